"""
HTTP client helpers for the Mollie REST API.
"""

from __future__ import annotations

import logging
import platform
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urljoin

import requests

from .._version import __version__
from .config import ClientConfig
from .errors import MollieApiError, NetworkError, ResponseParseError

__all__ = [
    "HttpClient",
    "build_user_agent",
    "create_http_client",
]


def build_user_agent(suffix: Optional[str] = None) -> str:
    parts = [
        f"mollie-client-python/{__version__}",
        f"python/{platform.python_version()}",
        f"requests/{requests.__version__}",
    ]
    if suffix:
        parts.append(suffix.strip())
    return " ".join(parts)


def _encode_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    encoded: Dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded[key] = value
    return encoded


def _decode_json(response: requests.Response, url: str) -> Optional[Any]:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        logging.warning(
            "Failed to parse JSON from %s (HTTP %s)", url, response.status_code
        )
        raise ResponseParseError(
            f"Received a malformed response from the API (HTTP {response.status_code})",
            status_code=response.status_code,
        ) from exc


class HttpClient:
    """
    Shared transport for every resource.

    Holds one :class:`requests.Session` so connections are pooled; it keeps
    no per-request state and can be used by several resources at once.
    """

    def __init__(
        self,
        session: requests.Session,
        *,
        base_url: str,
        timeout: float,
    ) -> None:
        self.session = session
        self.base_url = base_url
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Any]:
        """
        Perform one round trip and return the decoded JSON body.

        Every failure is converted to :class:`MollieApiError`; ``None`` is
        returned for empty ``204`` responses.
        """
        url = self.url_for(path)
        logging.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=_encode_params(params),
                json=dict(body) if body is not None else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logging.warning("%s %s failed: %s", method, url, exc)
            raise NetworkError.from_exception(exc) from exc

        if response.status_code >= 400:
            error = MollieApiError.from_response(response)
            logging.warning(
                "%s %s responded with %s: %s",
                method,
                url,
                response.status_code,
                error.message,
            )
            raise error

        return _decode_json(response, url)

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> Optional[Any]:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        body: Mapping[str, Any],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Any]:
        return self.request("POST", path, params=params, body=body)

    def patch(self, path: str, body: Mapping[str, Any]) -> Optional[Any]:
        return self.request("PATCH", path, body=body)

    def delete(
        self,
        path: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Any]:
        return self.request("DELETE", path, body=body)


def _default_headers(config: ClientConfig) -> Dict[str, str]:
    headers = {
        "Authorization": f"Bearer {config.api_key}",
        "User-Agent": build_user_agent(config.user_agent_suffix),
        "Accept-Encoding": "gzip",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    headers.update(config.extra_headers)
    return headers


def create_http_client(
    config: ClientConfig,
    *,
    session: Optional[requests.Session] = None,
) -> HttpClient:
    """
    Build the :class:`HttpClient` shared by every resource of one client.
    """
    session = session or requests.Session()
    session.headers.update(_default_headers(config))
    if config.ca_bundle:
        session.verify = config.ca_bundle
    return HttpClient(
        session,
        base_url=config.api_endpoint,
        timeout=config.timeout_seconds,
    )
