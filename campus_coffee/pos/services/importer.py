"""
Import of POS records from OpenStreetMap nodes.

This module converts an :class:`OsmNode` into an unsaved :class:`Pos`,
validating the required address tags and mapping OSM amenity values onto
the POS taxonomy, and orchestrates fetch -> convert -> upsert.
"""

import logging
from typing import Callable, Optional

from ..exceptions import OsmNodeMissingFieldsError
from ..models import CampusType, Pos, PosType
from .normalizers import is_blank, normalize_amenity, normalize_string, parse_postal_code
from .osm_client import OsmClient
from .schemas import OsmNode

logger = logging.getLogger(__name__)

AMENITY_TYPES = {
    "cafe": PosType.CAFE,
    "restaurant": PosType.CAFE,
    "coffee_shop": PosType.CAFE,
    "bakery": PosType.BAKERY,
    "bakehouse": PosType.BAKERY,
    "pastry_shop": PosType.BAKERY,
    "vending_machine": PosType.VENDING_MACHINE,
}

DEFAULT_DESCRIPTIONS = {
    PosType.CAFE: "Café",
    PosType.BAKERY: "Bakery",
    PosType.VENDING_MACHINE: "Vending Machine",
    PosType.CAFETERIA: "Cafeteria",
}

# Tried in order; the first non-blank tag becomes the description
DESCRIPTION_TAGS = ("description", "operator", "cuisine")

# Checked in this order; the first failing tag aborts the conversion
REQUIRED_TAGS = ("name", "addr:street", "addr:housenumber", "addr:postcode", "addr:city")

# Text tags copied onto POS fields; values longer than the column are rejected
TEXT_TAG_FIELDS = {
    "name": "name",
    "addr:street": "street",
    "addr:housenumber": "house_number",
    "addr:city": "city",
}


def classify_amenity(amenity: Optional[str], node_id: Optional[int] = None) -> PosType:
    """
    Map an OSM ``amenity`` value onto a PosType.

    Unknown and empty values fall back to CAFE.
    """
    normalized = normalize_amenity(amenity)
    pos_type = AMENITY_TYPES.get(normalized)
    if pos_type is None:
        logger.warning(
            f"Unknown amenity type '{normalized}' for OSM node {node_id}, defaulting to CAFE"
        )
        return PosType.CAFE
    return pos_type


def derive_description(osm_node: OsmNode, pos_type: PosType) -> str:
    """
    Pick the POS description from the node's tags.

    Uses the first non-blank of ``description``, ``operator`` and ``cuisine``,
    falling back to a label for the POS type.
    """
    for tag in DESCRIPTION_TAGS:
        value = normalize_string(osm_node.get_tag(tag, ""))
        if value:
            return value
    return DEFAULT_DESCRIPTIONS[pos_type]


def determine_campus(
    city: str, street: str, lat: Optional[float] = None, lon: Optional[float] = None
) -> CampusType:
    """
    Determine the campus of a POS from its address and coordinates.

    Every POS is currently assigned to ALTSTADT; the arguments are accepted
    so a geofence lookup can replace this without touching callers.
    """
    if "heidelberg" not in city.lower():
        logger.debug(f"Defaulting to ALTSTADT campus for city: {city}")
    return CampusType.ALTSTADT


def convert_osm_node_to_pos(osm_node: OsmNode) -> Pos:
    """
    Convert an OSM node to an unsaved POS.

    Args:
        osm_node: Node fetched from the OSM API

    Returns:
        Pos with ``id`` None, ready for upsert

    Raises:
        OsmNodeMissingFieldsError: If a required tag is missing, blank, or
            too long for its field, or the postal code is not an integer
    """
    node_id = osm_node.node_id
    logger.debug(f"Converting OSM node {node_id} to POS")

    for tag in REQUIRED_TAGS:
        if is_blank(osm_node.get_tag(tag)):
            logger.error(f"OSM node {node_id} is missing required field: {tag}")
            raise OsmNodeMissingFieldsError(node_id)

        field_name = TEXT_TAG_FIELDS.get(tag)
        if field_name is not None:
            max_length = Pos._meta.get_field(field_name).max_length
            if len(normalize_string(osm_node.get_tag(tag))) > max_length:
                logger.error(
                    f"OSM node {node_id} has {tag} longer than {max_length} characters"
                )
                raise OsmNodeMissingFieldsError(node_id)

        if tag == "addr:postcode" and parse_postal_code(osm_node.get_tag(tag)) is None:
            logger.error(
                f"OSM node {node_id} has invalid postal code: {osm_node.get_tag(tag)}"
            )
            raise OsmNodeMissingFieldsError(node_id)

    name = normalize_string(osm_node.get_tag("name"))
    street = normalize_string(osm_node.get_tag("addr:street"))
    house_number = normalize_string(osm_node.get_tag("addr:housenumber"))
    postal_code = parse_postal_code(osm_node.get_tag("addr:postcode"))
    city = normalize_string(osm_node.get_tag("addr:city"))

    pos_type = classify_amenity(osm_node.get_tag("amenity", ""), node_id)

    pos = Pos(
        name=name,
        description=derive_description(osm_node, pos_type),
        type=pos_type,
        campus=determine_campus(city, street, osm_node.lat, osm_node.lon),
        street=street,
        house_number=house_number,
        postal_code=postal_code,
        city=city,
    )

    logger.debug(f"Successfully converted OSM node {node_id} to POS '{pos.name}'")
    return pos


class OsmPosImporter:
    """
    Imports a POS from an OSM node: fetch, convert, then upsert.

    The importer keeps no state between calls. ``upsert`` is the callable
    that persists the converted POS (normally ``PosService.upsert``).
    """

    def __init__(self, osm_client: OsmClient, upsert: Callable[[Pos], Pos]):
        self.osm_client = osm_client
        self.upsert = upsert

    def import_from_node(self, node_id: int) -> Pos:
        """
        Import the POS described by an OSM node.

        Raises:
            OsmNodeNotFoundError: If the node cannot be fetched
            OsmNodeMissingFieldsError: If the node lacks required tags
            DuplicatePosNameError: If a POS with the same name exists
        """
        logger.info(f"Importing POS from OpenStreetMap node {node_id}...")

        osm_node = self.osm_client.fetch_node(node_id)
        pos = convert_osm_node_to_pos(osm_node)
        saved = self.upsert(pos)

        logger.info(f"Successfully imported POS '{saved.name}' from OSM node {node_id}")
        return saved
