"""
POS service facade.

Entry point for callers that manage the catalog: listing, lookup, upsert,
OSM import and bulk clear.
"""

import logging
from typing import List, Optional

from ..exceptions import DuplicatePosNameError
from ..models import Pos
from .importer import OsmPosImporter
from .osm_client import OsmClient
from .repository import PosRepository

logger = logging.getLogger(__name__)


class PosService:
    """
    Business operations on POS records.
    """

    def __init__(
        self,
        repository: Optional[PosRepository] = None,
        osm_client: Optional[OsmClient] = None,
    ):
        self.repository = repository or PosRepository()
        self.osm_client = osm_client or OsmClient()
        self.importer = OsmPosImporter(self.osm_client, self.upsert)

    def clear(self) -> None:
        logger.warning("Clearing all POS data")
        self.repository.clear()

    def get_all(self) -> List[Pos]:
        logger.debug("Retrieving all POS")
        return self.repository.get_all()

    def get_by_id(self, pos_id: int) -> Pos:
        logger.debug(f"Retrieving POS with ID: {pos_id}")
        return self.repository.get_by_id(pos_id)

    def upsert(self, pos: Pos) -> Pos:
        """
        Create a POS (``id`` None) or update an existing one.

        Updates require the ID to exist; a stale ID fails before any write.

        Raises:
            PosNotFoundError: If ``pos.id`` is set but unknown
            DuplicatePosNameError: If another POS already uses ``pos.name``
        """
        if pos.id is None:
            logger.info(f"Creating new POS: {pos.name}")
        else:
            logger.info(f"Updating POS with ID: {pos.id}")
            self.repository.get_by_id(pos.id)

        try:
            saved = self.repository.upsert(pos)
        except DuplicatePosNameError as e:
            logger.error(f"Error upserting POS '{pos.name}': {e}")
            raise

        logger.info(f"Successfully upserted POS with ID: {saved.id}")
        return saved

    def import_from_osm_node(self, node_id: int) -> Pos:
        """
        Import a POS from an OpenStreetMap node.

        Raises:
            OsmNodeNotFoundError: If the node cannot be fetched
            OsmNodeMissingFieldsError: If the node lacks required tags
            DuplicatePosNameError: If a POS with the same name exists
        """
        return self.importer.import_from_node(node_id)
