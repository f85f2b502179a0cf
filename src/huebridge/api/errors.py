import json
from typing import Any, Optional

from pydantic import ValidationError

from huebridge.models.response import find_error

# Bridge error types with a dedicated exception
UNAUTHORIZED_USER = 1
LINK_BUTTON_NOT_PRESSED = 101


class HueBridgeError(Exception):
    """Base class for everything the bridge or the network can fail with."""


class TransportError(HueBridgeError):
    """Raised for connection failures and non-200 responses."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseFormatError(HueBridgeError):
    """Raised when a success body does not have the expected shape."""


class ApiError(HueBridgeError):
    """Error reported by the bridge itself."""

    def __init__(self, description: str, type: Optional[int] = None, address: Optional[str] = None):
        super().__init__(description)
        self.description = description
        self.type = type
        self.address = address


class Unauthorized(ApiError):
    """The username is not (or no longer) on the bridge's whitelist."""


class LinkButtonRequired(ApiError):
    """Pairing needs the link button on the bridge to be pressed first."""


class BridgeStateError(RuntimeError):
    """Client used in the wrong pairing state, e.g. reading lights before linking."""


def parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResponseFormatError(f"bridge returned invalid JSON: {e}") from e


def raise_for_api_error(body: Any) -> None:
    """Raise the matching ApiError if ``body`` is an error envelope.

    Only the first entry counts, even if the bridge reports several errors.
    """
    try:
        error = find_error(body)
    except ValidationError as e:
        raise ResponseFormatError(f"malformed error response: {e}") from e

    if error is None:
        return

    if error.type == UNAUTHORIZED_USER:
        raise Unauthorized(error.description, error.type, error.address)
    if error.type == LINK_BUTTON_NOT_PRESSED:
        raise LinkButtonRequired(error.description, error.type, error.address)
    raise ApiError(error.description, error.type, error.address)
