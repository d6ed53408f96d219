"""
Management command to import POS records from OpenStreetMap nodes.

Usage:
    python manage.py import_osm_nodes <node_id ...>
    python manage.py import_osm_nodes 5589879349 --verbose
    python manage.py import_osm_nodes 5589879349 1234 --clear --stop-on-error
"""

import logging
import time

from django.core.management.base import BaseCommand, CommandError, CommandParser

from pos.exceptions import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosError,
)
from pos.services.pos_service import PosService

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Management command to import POS records from OSM nodes.
    """

    help = "Import points of sale from OpenStreetMap nodes by node ID"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.stats = {
            "nodes_seen": 0,
            "imported": 0,
            "not_found": 0,
            "missing_fields": 0,
            "duplicates": 0,
        }
        self.start_time = None
        self.stop_on_error = False
        self.service = None

    def add_arguments(self, parser: CommandParser) -> None:
        """
        Add command line arguments.
        """
        parser.add_argument(
            "node_ids",
            nargs="+",
            type=int,
            help="OpenStreetMap node IDs to import",
        )

        parser.add_argument(
            "--clear",
            action="store_true",
            default=False,
            help="Delete all existing POS records before importing",
        )

        parser.add_argument(
            "--stop-on-error",
            action="store_true",
            default=False,
            help="Stop processing on first error instead of continuing",
        )

        parser.add_argument(
            "--verbose",
            action="store_true",
            default=False,
            help="Enable verbose debug logging",
        )

    def handle(self, *args, **options) -> None:
        """
        Main command handler.
        """
        self.start_time = time.time()
        self.stop_on_error = options["stop_on_error"]

        if options["verbose"]:
            logging.getLogger("pos").setLevel(logging.DEBUG)
            self.stdout.write("Verbose logging enabled")

        self.service = PosService()

        if options["clear"]:
            self.service.clear()
            self.stdout.write(self.style.WARNING("Cleared all POS records"))

        for node_id in options["node_ids"]:
            self.stats["nodes_seen"] += 1
            try:
                self._import_node(node_id)
            except PosError as e:
                logger.error(f"Import of OSM node {node_id} failed: {e}")
                if self.stop_on_error:
                    self._print_summary()
                    raise CommandError(f"Stopping on error: {e}") from e

        self._print_summary()

    def _import_node(self, node_id: int) -> None:
        """
        Import a single node and record the outcome.
        """
        try:
            pos = self.service.import_from_osm_node(node_id)
        except OsmNodeNotFoundError as e:
            self.stats["not_found"] += 1
            self.stdout.write(self.style.ERROR(str(e)))
            raise
        except OsmNodeMissingFieldsError as e:
            self.stats["missing_fields"] += 1
            self.stdout.write(self.style.ERROR(str(e)))
            raise
        except DuplicatePosNameError as e:
            self.stats["duplicates"] += 1
            self.stdout.write(self.style.ERROR(f"Node {node_id}: {e}"))
            raise

        self.stats["imported"] += 1
        self.stdout.write(
            self.style.SUCCESS(f"Imported node {node_id} as POS {pos.id}: {pos.name}")
        )

    def _errors(self) -> int:
        return (
            self.stats["not_found"]
            + self.stats["missing_fields"]
            + self.stats["duplicates"]
        )

    def _print_summary(self) -> None:
        """
        Print a formatted summary table of the import operation.
        """
        duration = time.time() - self.start_time

        self.stdout.write("\n" + "=" * 60)
        self.stdout.write(self.style.SUCCESS("OSM IMPORT SUMMARY"))
        self.stdout.write("=" * 60)

        self.stdout.write(f"Nodes seen:       {self.stats['nodes_seen']}")
        self.stdout.write(f"POS imported:     {self.stats['imported']}")
        self.stdout.write(f"Not found:        {self.stats['not_found']}")
        self.stdout.write(f"Missing fields:   {self.stats['missing_fields']}")
        self.stdout.write(f"Duplicate names:  {self.stats['duplicates']}")

        self.stdout.write(f"\nDuration:         {duration:.2f} seconds")
        self.stdout.write("=" * 60)

        errors = self._errors()
        if errors > 0:
            self.stdout.write(
                self.style.WARNING(
                    f"Import completed with {errors} errors. Check logs for details."
                )
            )
        else:
            self.stdout.write(self.style.SUCCESS("Import completed successfully!"))
