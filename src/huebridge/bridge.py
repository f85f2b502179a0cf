"""Connection with a single Hue bridge over its local v1 REST API."""

import logging
from contextlib import contextmanager
from typing import Any, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from huebridge.api.errors import (
    BridgeStateError,
    ResponseFormatError,
    TransportError,
    parse_body,
    raise_for_api_error,
)
from huebridge.api.http_client import HttpClient
from huebridge.commands.base import CreateUserRequest
from huebridge.models.config import AuthenticatedConfig, BasicConfig
from huebridge.models.light import FullLight, Light
from huebridge.models.response import DeleteSuccess, LinkSuccess
from huebridge.settings import BridgeSettings

logger = logging.getLogger(__name__)

_LINK_RESPONSE = TypeAdapter(list[LinkSuccess])
_DELETE_RESPONSE = TypeAdapter(list[DeleteSuccess])
_LIGHTS_RESPONSE = TypeAdapter(dict[str, dict[str, Any]])


class BridgeIdentity(BaseModel):
    """Address of a bridge and the username paired with it, if any."""

    model_config = ConfigDict(frozen=True)

    address: str
    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    def with_username(self, username: Optional[str]) -> "BridgeIdentity":
        return self.model_copy(update={"username": username})


def enc(value: str) -> str:
    """Percent-encode (UTF-8) a value for use as a single path segment."""
    return quote(value, safe="", encoding="utf-8")


@contextmanager
def _decoding(what: str):
    try:
        yield
    except ValidationError as e:
        raise ResponseFormatError(f"unexpected {what} response: {e}") from e


class HueBridge:
    def __init__(
        self,
        address: str,
        username: Optional[str] = None,
        *,
        http: Optional[HttpClient] = None,
        timeout: float = 5,
    ):
        self._identity = BridgeIdentity(address=address, username=username)
        self.http = http or HttpClient(f"http://{address}/api", timeout=timeout)

    @classmethod
    def from_env(cls, settings: Optional[BridgeSettings] = None) -> "HueBridge":
        settings = settings or BridgeSettings.from_env()
        return cls(settings.bridge_ip, settings.username, timeout=settings.timeout)

    @property
    def identity(self) -> BridgeIdentity:
        return self._identity

    @property
    def username(self) -> Optional[str]:
        """The username currently authenticated with, or None."""
        return self._identity.username

    def get_config(self) -> BasicConfig:
        """Return the bridge configuration.

        Without a username only name and firmware version are available
        (BasicConfig); once linked the full AuthenticatedConfig is returned.
        """
        if not self._identity.is_authenticated:
            body = self._request("GET", "config")
            with _decoding("config"):
                return BasicConfig.model_validate(body)

        body = self._request("GET", f"{enc(self.username)}/config")
        with _decoding("config"):
            return AuthenticatedConfig.model_validate(body)

    def link(self, devicetype: str, username: Optional[str] = None) -> str:
        """Pair with the bridge and return the (possibly bridge-generated) username.

        Raises LinkButtonRequired until the link button on the bridge has been
        pressed. Retrying is up to the caller.
        """
        if self._identity.is_authenticated:
            raise BridgeStateError("already linked")

        request = CreateUserRequest(devicetype=devicetype, username=username)
        body = self._request("POST", "", request.to_payload())

        with _decoding("link"):
            entries = _LINK_RESPONSE.validate_python(body)
        if not entries:
            raise ResponseFormatError("unexpected link response: empty list")

        new_username = entries[0].success.username
        self._identity = self._identity.with_username(new_username)
        logger.info("Linked with bridge at %s as %s", self._identity.address, request.devicetype)
        return new_username

    def unlink(self) -> None:
        """Remove the current user from the bridge's whitelist.

        The client is unauthenticated afterwards and may link again.
        """
        user = self._require_username()
        body = self._request("DELETE", f"{user}/config/whitelist/{user}")

        with _decoding("unlink"):
            _DELETE_RESPONSE.validate_python(body)

        self._identity = self._identity.with_username(None)
        logger.info("Unlinked from bridge at %s", self._identity.address)

    def get_lights(self) -> list[Light]:
        """Return all lights known to the bridge (id and name only)."""
        user = self._require_username()
        body = self._request("GET", f"{user}/lights")

        with _decoding("lights"):
            lights = _LIGHTS_RESPONSE.validate_python(body)
            return [Light.from_bridge(light_id, data) for light_id, data in lights.items()]

    def get_light(self, light: Union[str, Light]) -> FullLight:
        """Return detailed information on a light, given its id or a Light."""
        light_id = light.id if isinstance(light, Light) else light
        user = self._require_username()
        body = self._request("GET", f"{user}/lights/{enc(light_id)}")

        with _decoding("light"):
            return FullLight.from_bridge(light_id, body)

    def close(self) -> None:
        self.http.close()

    # ---- helpers
    def _require_username(self) -> str:
        if not self._identity.is_authenticated:
            raise BridgeStateError("linking is required before interacting with the bridge")
        return enc(self._identity.username)

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        if method == "GET":
            response = self.http.get(path)
        elif method == "POST":
            response = self.http.post(path, payload or {})
        elif method == "DELETE":
            response = self.http.delete(path)
        else:
            raise ValueError(f"unsupported method {method}")

        if not response.ok:
            raise TransportError(
                f"bridge returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        body = parse_body(response.text)
        raise_for_api_error(body)
        return body
