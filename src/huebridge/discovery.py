import logging
from typing import Optional

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from huebridge.api.errors import ResponseFormatError, TransportError

logger = logging.getLogger(__name__)

DISCOVERY_URL = "https://discovery.meethue.com/"


class DiscoveredBridge(BaseModel):
    id: str
    internalipaddress: str
    port: Optional[int] = None


_DISCOVERY_RESPONSE = TypeAdapter(list[DiscoveredBridge])


def discover_bridges(timeout: float = 5, session: Optional[requests.Session] = None) -> list[DiscoveredBridge]:
    """Ask the Hue N-UPnP portal which bridges are registered on this network."""
    http = session or requests
    try:
        r = http.get(DISCOVERY_URL, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"bridge discovery failed: {e}") from e

    if r.status_code != 200:
        raise TransportError(f"discovery returned HTTP {r.status_code}", status_code=r.status_code, body=r.text)

    try:
        bridges = _DISCOVERY_RESPONSE.validate_json(r.text)
    except ValidationError as e:
        raise ResponseFormatError(f"unexpected discovery response: {e}") from e

    logger.info("Found %d bridge(s)", len(bridges))
    return bridges
