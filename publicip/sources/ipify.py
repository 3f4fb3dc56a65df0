from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from .base import SourceSpec
from publicip.errors import FetchError

logger = logging.getLogger(__name__)

IPIFY_JSON_URL = "https://api.ipify.org?format=json"


class IpifySource:
    spec = SourceSpec(name="ipify")

    def __init__(self, endpoint: str = IPIFY_JSON_URL, timeout: float = 10.0) -> None:
        self.endpoint = endpoint
        self.timeout = timeout

    @staticmethod
    def _headers() -> Dict[str, str]:
        return {
            "accept": "application/json",
            "user-agent": "publicip/0.1 (+https://www.ipify.org)",
        }

    @staticmethod
    def _extract_ip(payload: Any) -> str:
        if not isinstance(payload, dict):
            raise FetchError("Unexpected response payload shape.")
        ip = payload.get("ip")
        if not isinstance(ip, str) or not ip:
            raise FetchError("Response payload has no 'ip' field.")
        try:
            ip.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FetchError(f"Response payload has a malformed 'ip' field: {ip!r}") from exc
        return ip

    def fetch(self) -> str:
        logger.debug("Requesting public IP from %s", self.endpoint)
        try:
            response = requests.get(self.endpoint, timeout=self.timeout, headers=self._headers())
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise FetchError(f"Could not fetch public IP from {self.endpoint}: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"Response from {self.endpoint} is not valid JSON: {exc}") from exc
        return self._extract_ip(payload)
