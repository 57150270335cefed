"""Shared HTTP session for the service desk API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..errors import TransportError

DEFAULT_HEADERS: Dict[str, str] = {
    "accept": "application/json",
}


class HttpClient:
    """Wraps a ``requests.Session`` so cookies survive between calls.

    One instance belongs to one logical login; sharing it across different
    credentials would mix their cookies.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self._session.cookies

    def cookie_value(self, name: str) -> str:
        """Returns the value of cookie ``name`` (case-insensitive), or ``""``."""

        wanted = name.lower()
        for cookie in self.cookies:
            if cookie.name.lower() == wanted:
                return cookie.value or ""
        return ""

    def post_json(self, url: str, payload: Dict[str, Any]) -> requests.Response:
        """POST ``payload`` as JSON; non-2xx responses are returned, not raised."""

        try:
            return self._session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logging.error("HTTP POST to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        try:
            return self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logging.error("HTTP GET to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
