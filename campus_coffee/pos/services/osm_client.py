"""
OpenStreetMap API client.

This module fetches single nodes from the OSM API (``/node/{id}.xml``) and
parses the XML response into an :class:`OsmNode`. Every failure, whether
HTTP, transport or parsing, is reported as :class:`OsmNodeNotFoundError`.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

import requests
from django.conf import settings
from pydantic import ValidationError

from ..exceptions import OsmNodeNotFoundError
from .schemas import OsmNode

logger = logging.getLogger(__name__)


class OsmClient:
    """
    Client for the OpenStreetMap editing API (read-only node lookups).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.OSM_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.OSM_API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": user_agent or settings.OSM_USER_AGENT}
        )

    def node_url(self, node_id: int) -> str:
        return f"{self.base_url}/node/{node_id}.xml"

    def fetch_node(self, node_id: int) -> OsmNode:
        """
        Fetch an OSM node by ID.

        Args:
            node_id: OpenStreetMap node ID

        Returns:
            OsmNode with coordinates and tags

        Raises:
            OsmNodeNotFoundError: If the node cannot be fetched or parsed
        """
        logger.info(f"Fetching OSM node {node_id} from OpenStreetMap API")

        try:
            response = self.session.get(self.node_url(node_id), timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Error fetching OSM node {node_id}: {e}")
            raise OsmNodeNotFoundError(node_id) from e

        if 400 <= response.status_code < 500:
            logger.error(f"OSM node {node_id} not found (HTTP {response.status_code})")
            raise OsmNodeNotFoundError(node_id)

        if response.status_code >= 500:
            logger.error(
                f"OSM API server error for node {node_id} (HTTP {response.status_code})"
            )
            raise OsmNodeNotFoundError(node_id)

        if not response.content or not response.content.strip():
            logger.error(f"Empty response from OSM API for node {node_id}")
            raise OsmNodeNotFoundError(node_id)

        try:
            osm_node = parse_node_xml(response.content)
        except (ET.ParseError, ValidationError, ValueError) as e:
            logger.error(f"Error parsing OSM response for node {node_id}: {e}")
            raise OsmNodeNotFoundError(node_id) from e

        if osm_node is None:
            logger.error(f"No node element found in OSM API response for node {node_id}")
            raise OsmNodeNotFoundError(node_id)

        logger.info(
            f"Successfully fetched OSM node {node_id} with {len(osm_node.tags)} tags"
        )
        return osm_node


def parse_node_xml(content: bytes) -> Optional[OsmNode]:
    """
    Parse an OSM API XML document into an OsmNode.

    Expected structure::

        <osm>
          <node id="123" lat="49.41" lon="8.69">
            <tag k="name" v="Café"/>
          </node>
        </osm>

    Args:
        content: Raw XML response body

    Returns:
        OsmNode, or None if the document has no node element

    Raises:
        ET.ParseError: If the document is not well-formed XML
        ValidationError: If the node attributes are invalid
    """
    root = ET.fromstring(content)

    node_elem = root if root.tag == "node" else root.find("node")
    if node_elem is None:
        return None

    return OsmNode(
        node_id=node_elem.get("id"),
        lat=node_elem.get("lat"),
        lon=node_elem.get("lon"),
        tags=_collect_tags(node_elem),
    )


def _collect_tags(node_elem: ET.Element) -> Dict[str, str]:
    """
    Collect ``<tag k= v=/>`` children into a dict; later keys win.
    """
    tags = {}
    for tag_elem in node_elem.findall("tag"):
        key = tag_elem.get("k")
        if key is None:
            logger.debug("Skipping tag element without key")
            continue
        tags[key] = tag_elem.get("v", "")

    return tags
