"""
Services package for POS data processing.

This package contains the OpenStreetMap client, the OSM-to-POS importer,
the POS repository and the POS service facade.
"""

from .importer import (
    OsmPosImporter,
    classify_amenity,
    convert_osm_node_to_pos,
    derive_description,
    determine_campus,
)
from .normalizers import normalize_string, parse_postal_code
from .osm_client import OsmClient, parse_node_xml
from .pos_service import PosService
from .repository import PosRepository
from .schemas import OsmNode

__all__ = [
    "OsmPosImporter",
    "classify_amenity",
    "convert_osm_node_to_pos",
    "derive_description",
    "determine_campus",
    "normalize_string",
    "parse_postal_code",
    "OsmClient",
    "parse_node_xml",
    "PosService",
    "PosRepository",
    "OsmNode",
]
