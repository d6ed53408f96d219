"""
Pydantic schemas for OpenStreetMap data.

This module defines the validated, immutable representation of an OSM node
as fetched from the OpenStreetMap API, before it is converted into a POS.
"""

import logging
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

logger = logging.getLogger(__name__)


class OsmNode(BaseModel):
    """
    An OpenStreetMap node with its coordinates and tags.

    Instances are frozen; a fresh one is built for every fetch.
    """

    model_config = ConfigDict(frozen=True)

    node_id: PositiveInt = Field(..., description="OpenStreetMap node ID")

    lat: Optional[float] = Field(
        default=None, ge=-90, le=90, description="Latitude coordinate"
    )

    lon: Optional[float] = Field(
        default=None, ge=-180, le=180, description="Longitude coordinate"
    )

    tags: Dict[str, str] = Field(
        default_factory=dict, description="OSM tags (key -> value)"
    )

    def get_tag(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up a tag value, returning ``default`` when the tag is absent.
        """
        return self.tags.get(key, default)

    def model_post_init(self, __context) -> None:
        logger.debug(f"Validated OSM node {self.node_id} with {len(self.tags)} tags")
