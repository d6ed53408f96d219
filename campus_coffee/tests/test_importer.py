"""
Tests for OSM node to POS conversion.
"""

from django.test import SimpleTestCase

from pos.exceptions import OsmNodeMissingFieldsError
from pos.models import CampusType, PosType
from pos.services.importer import (
    DEFAULT_DESCRIPTIONS,
    REQUIRED_TAGS,
    TEXT_TAG_FIELDS,
    classify_amenity,
    convert_osm_node_to_pos,
    derive_description,
    determine_campus,
)
from pos.services.normalizers import is_blank, normalize_string, parse_postal_code
from tests.factories import build_osm_node


class TestNormalizers(SimpleTestCase):
    """Test tag normalization utilities."""

    def test_normalize_string(self):
        self.assertEqual(normalize_string("  Main St  "), "Main St")
        self.assertEqual(normalize_string(None), "")
        self.assertEqual(normalize_string("   ", "fallback"), "fallback")

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(""))
        self.assertTrue(is_blank(" \t\n"))
        self.assertFalse(is_blank(" x "))

    def test_parse_postal_code(self):
        self.assertEqual(parse_postal_code("69117"), 69117)
        self.assertEqual(parse_postal_code("  69117 "), 69117)
        self.assertEqual(parse_postal_code("01067"), 1067)

        self.assertIsNone(parse_postal_code("ABC"))
        self.assertIsNone(parse_postal_code("691 17"))
        self.assertIsNone(parse_postal_code("69_117"))
        self.assertIsNone(parse_postal_code("D-69117"))
        self.assertIsNone(parse_postal_code(""))
        self.assertIsNone(parse_postal_code(None))

    def test_parse_postal_code_outside_integer_column_range(self):
        self.assertEqual(parse_postal_code("2147483647"), 2147483647)
        self.assertEqual(parse_postal_code("-2147483648"), -2147483648)

        self.assertIsNone(parse_postal_code("2147483648"))
        self.assertIsNone(parse_postal_code("-2147483649"))
        self.assertIsNone(parse_postal_code("99999999999999999999999"))


class TestConvertRequiredFields(SimpleTestCase):
    """Test validation of required address tags."""

    def test_missing_required_tag_fails(self):
        """Each required tag, when absent, aborts the conversion."""
        for tag in REQUIRED_TAGS:
            with self.subTest(tag=tag):
                node = build_osm_node()
                tags = dict(node.tags)
                del tags[tag]

                with self.assertRaises(OsmNodeMissingFieldsError) as ctx:
                    convert_osm_node_to_pos(build_osm_node(tags=tags))

                self.assertEqual(ctx.exception.node_id, 5589879349)

    def test_blank_required_tag_fails(self):
        """Whitespace-only values count as missing."""
        for tag in REQUIRED_TAGS:
            with self.subTest(tag=tag):
                tags = dict(build_osm_node().tags)
                tags[tag] = "   "

                with self.assertRaises(OsmNodeMissingFieldsError):
                    convert_osm_node_to_pos(build_osm_node(tags=tags))

    def test_non_numeric_postcode_fails(self):
        node = build_osm_node(node_id=42, addr__postcode="ABC")

        with self.assertRaises(OsmNodeMissingFieldsError) as ctx:
            convert_osm_node_to_pos(node)

        self.assertEqual(ctx.exception.node_id, 42)

    def test_first_failure_is_logged(self):
        """Validation is fail-fast: only the first missing tag is reported."""
        node = build_osm_node(tags={"addr:postcode": "ABC"})

        with self.assertLogs("pos.services.importer", level="ERROR") as logs:
            with self.assertRaises(OsmNodeMissingFieldsError):
                convert_osm_node_to_pos(node)

        self.assertEqual(len(logs.records), 1)
        self.assertIn("required field: name", logs.output[0])

    def test_invalid_postcode_checked_before_city(self):
        node = build_osm_node(
            tags={
                "name": "Central Cafe",
                "addr:street": "Main St",
                "addr:housenumber": "12",
                "addr:postcode": "ABC",
            }
        )

        with self.assertLogs("pos.services.importer", level="ERROR") as logs:
            with self.assertRaises(OsmNodeMissingFieldsError):
                convert_osm_node_to_pos(node)

        self.assertIn("invalid postal code: ABC", logs.output[0])

    def test_oversized_postcode_fails(self):
        node = build_osm_node(node_id=42, addr__postcode="99999999999999999999999")

        with self.assertRaises(OsmNodeMissingFieldsError) as ctx:
            convert_osm_node_to_pos(node)

        self.assertEqual(ctx.exception.node_id, 42)

    def test_value_longer_than_field_fails(self):
        """Text tags that would not fit their column are rejected."""
        for tag in TEXT_TAG_FIELDS:
            with self.subTest(tag=tag):
                tags = dict(build_osm_node().tags)
                tags[tag] = "x" * 256

                with self.assertLogs("pos.services.importer", level="ERROR") as logs:
                    with self.assertRaises(OsmNodeMissingFieldsError):
                        convert_osm_node_to_pos(build_osm_node(tags=tags))

                self.assertIn(f"{tag} longer than 255 characters", logs.output[0])

    def test_value_at_field_length_converts(self):
        pos = convert_osm_node_to_pos(build_osm_node(name="x" * 255))

        self.assertEqual(len(pos.name), 255)


class TestConvertOsmNode(SimpleTestCase):
    """Test the full conversion of valid nodes."""

    def test_bakery_scenario(self):
        node = build_osm_node(
            tags={
                "name": "Central Cafe",
                "amenity": "bakery",
                "addr:street": "Main St",
                "addr:housenumber": "12",
                "addr:postcode": "69117",
                "addr:city": "Heidelberg",
            }
        )

        pos = convert_osm_node_to_pos(node)

        self.assertIsNone(pos.id)
        self.assertEqual(pos.name, "Central Cafe")
        self.assertEqual(pos.type, PosType.BAKERY)
        self.assertEqual(pos.campus, CampusType.ALTSTADT)
        self.assertEqual(pos.description, "Bakery")
        self.assertEqual(pos.street, "Main St")
        self.assertEqual(pos.house_number, "12")
        self.assertEqual(pos.postal_code, 69117)
        self.assertEqual(pos.city, "Heidelberg")

    def test_values_are_trimmed(self):
        node = build_osm_node(name="  Central Cafe ", addr__postcode=" 69117 ")

        pos = convert_osm_node_to_pos(node)

        self.assertEqual(pos.name, "Central Cafe")
        self.assertEqual(pos.postal_code, 69117)

    def test_node_without_coordinates(self):
        pos = convert_osm_node_to_pos(build_osm_node(lat=None, lon=None))

        self.assertEqual(pos.campus, CampusType.ALTSTADT)


class TestClassifyAmenity(SimpleTestCase):
    """Test amenity to PosType mapping."""

    def test_known_amenities(self):
        expected = {
            "cafe": PosType.CAFE,
            "restaurant": PosType.CAFE,
            "coffee_shop": PosType.CAFE,
            "bakery": PosType.BAKERY,
            "bakehouse": PosType.BAKERY,
            "pastry_shop": PosType.BAKERY,
            "vending_machine": PosType.VENDING_MACHINE,
        }
        for amenity, pos_type in expected.items():
            with self.subTest(amenity=amenity):
                self.assertEqual(classify_amenity(amenity), pos_type)

    def test_case_and_whitespace_insensitive(self):
        self.assertEqual(classify_amenity("  Bakery "), PosType.BAKERY)
        self.assertEqual(classify_amenity("VENDING_MACHINE"), PosType.VENDING_MACHINE)

    def test_unknown_amenity_defaults_to_cafe_with_warning(self):
        for amenity in ["pub", "cafeteria", "", None]:
            with self.subTest(amenity=amenity):
                with self.assertLogs("pos.services.importer", level="WARNING") as logs:
                    self.assertEqual(classify_amenity(amenity, 7), PosType.CAFE)
                self.assertIn("defaulting to CAFE", logs.output[0])

    def test_missing_amenity_tag_converts_to_cafe(self):
        tags = dict(build_osm_node().tags)
        del tags["amenity"]

        pos = convert_osm_node_to_pos(build_osm_node(tags=tags))

        self.assertEqual(pos.type, PosType.CAFE)
        self.assertEqual(pos.description, "Café")


class TestDeriveDescription(SimpleTestCase):
    """Test description fallback chain."""

    def test_description_tag_wins(self):
        node = build_osm_node(description="D", operator="O", cuisine="C")
        self.assertEqual(derive_description(node, PosType.CAFE), "D")

    def test_operator_used_when_description_blank(self):
        node = build_osm_node(description="  ", operator="O", cuisine="C")
        self.assertEqual(derive_description(node, PosType.CAFE), "O")

    def test_cuisine_used_last(self):
        node = build_osm_node(cuisine="coffee_shop")
        self.assertEqual(derive_description(node, PosType.CAFE), "coffee_shop")

    def test_type_fallback(self):
        node = build_osm_node()
        self.assertEqual(derive_description(node, PosType.CAFE), "Café")
        self.assertEqual(derive_description(node, PosType.BAKERY), "Bakery")
        self.assertEqual(
            derive_description(node, PosType.VENDING_MACHINE), "Vending Machine"
        )
        self.assertEqual(derive_description(node, PosType.CAFETERIA), "Cafeteria")

    def test_fallback_covers_every_type(self):
        self.assertEqual(set(DEFAULT_DESCRIPTIONS), set(PosType))


class TestDetermineCampus(SimpleTestCase):
    """Test campus determination."""

    def test_always_altstadt(self):
        self.assertEqual(
            determine_campus("Heidelberg", "Hauptstraße", 49.41, 8.69),
            CampusType.ALTSTADT,
        )
        self.assertEqual(determine_campus("Mannheim", "Q1"), CampusType.ALTSTADT)
        self.assertEqual(
            determine_campus("Heidelberg", "Im Neuenheimer Feld", 49.42, 8.67),
            CampusType.ALTSTADT,
        )
