"""
Normalization utilities for OSM tag values.

This module provides helpers to trim tag strings, parse postal codes and
normalize amenity values before they are mapped onto POS fields.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

POSTAL_CODE_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Postal codes are stored as signed 32-bit integers
POSTAL_CODE_MIN = -(2**31)
POSTAL_CODE_MAX = 2**31 - 1


def normalize_string(value: Optional[str], default: str = "") -> str:
    """
    Normalize a string value by stripping whitespace and handling None.

    Args:
        value: String value to normalize
        default: Default value if input is None or blank

    Returns:
        Normalized string value
    """
    if value is None:
        return default

    normalized = value.strip()
    return normalized if normalized else default


def is_blank(value: Optional[str]) -> bool:
    """
    Check whether a value is missing or only contains whitespace.
    """
    return value is None or not value.strip()


def parse_postal_code(value: Optional[str]) -> Optional[int]:
    """
    Parse a postal code tag into an integer.

    Surrounding whitespace is ignored. An optional sign followed by ASCII
    digits is accepted; anything else (letters, inner spaces, digit
    separators) is rejected.

    Args:
        value: Raw ``addr:postcode`` tag value

    Returns:
        Integer postal code, or None if the value is missing, not numeric
        or outside the signed 32-bit range
    """
    normalized = normalize_string(value)
    if not normalized:
        return None

    if not POSTAL_CODE_PATTERN.match(normalized):
        logger.debug(f"Postal code '{value}' is not an integer")
        return None

    postal_code = int(normalized)
    if not POSTAL_CODE_MIN <= postal_code <= POSTAL_CODE_MAX:
        logger.debug(f"Postal code '{value}' is out of range")
        return None

    return postal_code


def normalize_amenity(value: Optional[str]) -> str:
    """
    Lower-case and trim an amenity tag; missing values become "".
    """
    return normalize_string(value).lower()
