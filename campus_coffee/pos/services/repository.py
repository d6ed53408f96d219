"""
Persistence for POS records.

This module wraps the Django ORM behind the small interface the POS service
relies on: list, fetch by ID, upsert and clear.
"""

import logging
from typing import List

from django.db import IntegrityError, transaction

from ..exceptions import DuplicatePosNameError, PosNotFoundError
from ..models import Pos

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    "name",
    "description",
    "type",
    "campus",
    "street",
    "house_number",
    "postal_code",
    "city",
]


class PosRepository:
    """
    Stores and retrieves Pos records.
    """

    def get_all(self) -> List[Pos]:
        return list(Pos.objects.order_by("name"))

    def get_by_id(self, pos_id: int) -> Pos:
        """
        Fetch a POS by ID.

        Raises:
            PosNotFoundError: If no POS has this ID
        """
        try:
            return Pos.objects.get(pk=pos_id)
        except Pos.DoesNotExist:
            raise PosNotFoundError(pos_id) from None

    def upsert(self, pos: Pos) -> Pos:
        """
        Insert a new POS or update the stored one with the same ID.

        Args:
            pos: POS to persist; ``id`` None means insert

        Returns:
            The persisted POS with ID and timestamps set

        Raises:
            PosNotFoundError: If ``pos.id`` is set but no such record exists
            DuplicatePosNameError: If another POS already uses ``pos.name``
            django.core.exceptions.ValidationError: If required fields are blank
        """
        try:
            with transaction.atomic():
                if pos.id is None:
                    pos.save()
                    logger.info(f"Created new POS {pos.id}: {pos.name}")
                    return pos

                stored = self.get_by_id(pos.id)
                for field_name in UPDATABLE_FIELDS:
                    setattr(stored, field_name, getattr(pos, field_name))

                stored.save(update_fields=UPDATABLE_FIELDS + ["updated_at"])
                logger.info(f"Updated POS {stored.id}: {stored.name}")
                return stored

        except IntegrityError as e:
            # full_clean() has already run, so the name constraint is the only one left
            logger.error(f"Integrity error upserting POS '{pos.name}': {e}")
            raise DuplicatePosNameError(pos.name) from e

    def clear(self) -> int:
        """
        Delete every POS.

        Returns:
            Number of deleted records
        """
        deleted, _ = Pos.objects.all().delete()
        logger.info(f"Deleted {deleted} POS records")
        return deleted
