import json
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from huebridge.api.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class HttpClient:
    def __init__(self, base_url: str, *, timeout: float = 5, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def get(self, path: str) -> HttpResponse:
        return self._request("GET", path)

    def post(self, path: str, payload: dict) -> HttpResponse:
        return self._request("POST", path, data=json.dumps(payload))

    def delete(self, path: str) -> HttpResponse:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, data: Optional[str] = None) -> HttpResponse:
        url = self.url(path)
        try:
            r = self.session.request(method, url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug("%s %s -> %s", method, url, r.status_code)
        return HttpResponse(r.status_code, r.text)

    def close(self) -> None:
        self.session.close()
