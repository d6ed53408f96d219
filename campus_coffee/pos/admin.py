"""
Admin configuration for the pos app.
"""

import logging
from typing import Any

from django.contrib import admin
from django.http import HttpRequest

from .exceptions import DuplicatePosNameError
from .models import Pos
from .services.pos_service import PosService

logger = logging.getLogger(__name__)


@admin.register(Pos)
class PosAdmin(admin.ModelAdmin):
    """
    Admin interface for Pos model.

    Search functionality:
    - Internal ID: Use exact ID number (e.g., "123")
    - Name: Use partial text search (e.g., "cafe")
    - City / street: Use partial text search (e.g., "Heidelberg")

    Filters available:
    - Type: CAFE, BAKERY, VENDING_MACHINE, CAFETERIA
    - Campus: ALTSTADT, BERGHEIM, INF
    """

    list_display = (
        "id",
        "name",
        "type",
        "campus",
        "address_display",
        "updated_at",
    )
    search_fields = ("=id", "name", "city", "street")
    list_filter = ("type", "campus")
    ordering = ("name",)
    list_per_page = 50
    readonly_fields = ("created_at", "updated_at")

    search_help_text = (
        "Search by: Internal ID (exact match), POS name, city or street "
        "(partial match). Examples: '12' for ID, 'Bakery' for name."
    )

    preserve_filters = True
    show_full_result_count = True

    list_display_links = ("id", "name")

    fieldsets = (
        (
            "Basic Information",
            {"fields": ("name", "type", "campus", "description")},
        ),
        (
            "Address",
            {"fields": ("street", "house_number", "postal_code", "city")},
        ),
        (
            "Timestamps",
            {"fields": ("created_at", "updated_at"), "classes": ("collapse",)},
        ),
    )

    @admin.display(description="Address", ordering="city")
    def address_display(self, obj: Pos) -> str:
        """
        Display the single-line address in the admin list.
        """
        return obj.address

    def save_model(
        self, request: HttpRequest, obj: Pos, form: Any, change: bool
    ) -> None:
        """
        Save through the POS service so admin edits follow the upsert rules.
        """
        try:
            PosService().upsert(obj)
        except DuplicatePosNameError:
            logger.error(f"Admin save rejected: POS name '{obj.name}' already exists")
            raise

        if change:
            logger.info(f"Updated POS {obj.id} ({obj.name}) via admin interface")
        else:
            logger.info(f"Created new POS {obj.id} ({obj.name}) via admin interface")
