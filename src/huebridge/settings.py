import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv, find_dotenv

BRIDGE_IP_ENV = "HUE_BRIDGE_IP"
USERNAME_ENV = "HUE_USERNAME"
TIMEOUT_ENV = "HUE_TIMEOUT"

DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True)
class BridgeSettings:
    bridge_ip: str
    username: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "BridgeSettings":
        """Read the bridge address and username from the environment (or a .env file)."""
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        bridge_ip = os.getenv(BRIDGE_IP_ENV)
        if not bridge_ip:
            raise ValueError(f"{BRIDGE_IP_ENV} is not set.")

        raw_timeout = os.getenv(TIMEOUT_ENV)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None

        return cls(
            bridge_ip=bridge_ip,
            username=os.getenv(USERNAME_ENV) or None,
            timeout=timeout,
        )
