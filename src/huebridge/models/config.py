from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from huebridge.models.types import BridgeDateTime

NO_PROXY = "none"


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Whitelist key, injected by AuthenticatedConfig
    username: str
    name: str  # devicetype used when pairing
    last_use_date: BridgeDateTime = Field(None, alias="last use date")
    create_date: BridgeDateTime = Field(None, alias="create date")


class SoftwareUpdate(BaseModel):
    updatestate: int = 0
    url: str = ""
    text: str = ""
    notify: bool = False


class BasicConfig(BaseModel):
    """Name and firmware of the bridge, readable without pairing."""

    name: str
    swversion: str

    @property
    def software_version(self) -> str:
        return self.swversion


class AuthenticatedConfig(BasicConfig):
    """Full bridge configuration, only returned to whitelisted users."""

    model_config = ConfigDict(populate_by_name=True)

    mac: str
    dhcp: bool
    ipaddress: str
    netmask: str
    gateway: str
    proxyaddress: str = NO_PROXY
    proxyport: int = 0
    utc: BridgeDateTime = Field(None, alias="UTC")
    linkbutton: bool = False
    whitelist: dict[str, User] = {}
    swupdate: SoftwareUpdate = SoftwareUpdate()

    @model_validator(mode="before")
    @classmethod
    def _inject_usernames(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("whitelist"), dict):
            data = dict(data)
            data["whitelist"] = {
                username: {**entry, "username": username} if isinstance(entry, dict) else entry
                for username, entry in data["whitelist"].items()
            }
        return data

    @property
    def mac_address(self) -> str:
        return self.mac

    @property
    def dhcp_enabled(self) -> bool:
        return self.dhcp

    @property
    def ip_address(self) -> str:
        return self.ipaddress

    @property
    def network_mask(self) -> str:
        return self.netmask

    @property
    def proxy_address(self) -> Optional[str]:
        return None if self.proxyaddress == NO_PROXY else self.proxyaddress

    @property
    def proxy_port(self) -> Optional[int]:
        # Address and port are only meaningful together
        return None if self.proxyaddress == NO_PROXY else self.proxyport

    @property
    def utc_time(self) -> Optional[datetime]:
        return self.utc

    @property
    def link_button_pressed(self) -> bool:
        """True if the link button was pressed within the last 30 seconds."""
        return self.linkbutton

    @property
    def users(self) -> list[User]:
        return list(self.whitelist.values())

    @property
    def software_update(self) -> SoftwareUpdate:
        return self.swupdate
