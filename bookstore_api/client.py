"""
Thin HTTP client for the bookstore API.

Wraps a ``requests.Session`` so scenarios can say *what* to send
(method, path template, path parameters, JSON text) without repeating
URL joining or header handling.  Nothing here retries or interprets
status codes: a refused connection propagates as
``requests.RequestException`` and the caller decides what a status
means.

Request bodies are sent exactly as given.  Scenarios pass literal JSON
text so deliberately malformed payloads reach the service unchanged.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def expand_path(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """
    Substitute ``{name}`` placeholders in a path template.

    Raises:
        KeyError: If the template names a parameter that was not given.
    """
    params = path_params or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params:
            raise KeyError(f"Missing path parameter {name!r} for {template!r}")
        return quote(str(params[name]), safe="")

    return _PLACEHOLDER.sub(_replace, template)


def _encode_body(body: str | Mapping[str, Any] | None) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body, ensure_ascii=False).encode("utf-8")


class ApiResponse:
    """Status, content type and body of one HTTP exchange."""

    def __init__(self, raw: requests.Response):
        # JSON is UTF-8 unless the service says otherwise.
        if raw.encoding is None:
            raw.encoding = "utf-8"
        self.status_code: int = raw.status_code
        self.content_type: str = raw.headers.get("Content-Type", "")
        self.text: str = raw.text

    @property
    def is_json(self) -> bool:
        media_type = self.content_type.split(";", 1)[0].strip().lower()
        return media_type == JSON_CONTENT_TYPE or media_type.endswith("+json")

    def json(self) -> Any:
        """Parse the body; raises ``ValueError`` when it is not JSON."""
        return json.loads(self.text)

    def field(self, name: str) -> Any:
        """Return a top-level field of a JSON object body, ``None`` if absent."""
        body = self.json()
        if not isinstance(body, dict):
            raise AssertionError(
                f"Expected a JSON object body, got {type(body).__name__}: {self.text[:200]}"
            )
        return body.get(name)

    def __repr__(self) -> str:
        return f"<ApiResponse [{self.status_code}] {self.content_type or '-'}>"


class ApiClient:
    """Send requests against one resolved base URL."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, path: str, path_params: Mapping[str, Any] | None = None) -> str:
        return f"{self.base_url}/{expand_path(path, path_params).lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        body: str | Mapping[str, Any] | None = None,
        content_type: str | None = JSON_CONTENT_TYPE,
    ) -> ApiResponse:
        """
        Perform one HTTP call and wrap the response.

        Args:
            method: HTTP verb.
            path: Path template, e.g. ``/api/v1/Books/{id}``.
            path_params: Values for the template's placeholders.
            body: JSON text (sent verbatim) or a mapping to serialize.
            content_type: Sent only when a body is present.

        Returns:
            The ``ApiResponse`` for the exchange.

        Raises:
            requests.RequestException: On any transport-level failure.
        """
        url = self.url_for(path, path_params)
        data = _encode_body(body)
        headers = {"Accept": JSON_CONTENT_TYPE}
        if data is not None and content_type:
            headers["Content-Type"] = content_type

        try:
            raw = self.session.request(
                method=method.upper(),
                url=url,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method.upper(), url, exc)
            raise

        response = ApiResponse(raw)
        logger.info("%s %s -> %s", method.upper(), url, response.status_code)
        return response

    def get(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self.session.close()
