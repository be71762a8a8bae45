"""HTTP transport shared by every part of the Nitrado API client."""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

import requests

DEFAULT_BASE_URI = "https://api.nitrado.net/"
DEFAULT_USER_AGENT = "nitradoapi"
DEFAULT_RETRY_COUNT = 10
DEFAULT_RETRY_DELAY = 2.0


class NitradoError(Exception):
    """Raised when a request to the Nitrado API cannot be built, sent or understood."""


def _query_items(options: Any) -> Mapping[str, Any]:
    if isinstance(options, Mapping):
        return options
    to_query = getattr(options, "to_query", None)
    if callable(to_query):
        return to_query()
    raise NitradoError(f"cannot build a query string from {type(options).__name__}")


def add_options(url: str, options: Any) -> str:
    """Return ``url`` with its query string replaced by the encoded ``options``.

    ``options`` is a mapping or an object with a ``to_query()`` method; ``None``
    leaves the URL untouched. Keys are encoded in sorted order.
    """
    if options is None:
        return url
    items = _query_items(options)
    query = urlencode(sorted((str(key), str(value)) for key, value in items.items()))
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _decode(text: str) -> Any:
    stripped = text.lstrip()
    if not stripped:
        return None
    try:
        value, _ = json.JSONDecoder().raw_decode(stripped)
    except json.JSONDecodeError as exc:
        raise NitradoError(f"invalid JSON in response: {exc}") from exc
    return value


class Transport:
    """Builds, sends and decodes authenticated requests to the Nitrado API."""

    def __init__(
        self,
        token: str,
        base_uri: str = DEFAULT_BASE_URI,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
        retry_count: int = DEFAULT_RETRY_COUNT,
        retry_delay: float = DEFAULT_RETRY_DELAY,
    ) -> None:
        self.token = token
        self.base_uri = base_uri
        self.user_agent = user_agent
        self.session = session if session is not None else requests.Session()
        self.retry_count = retry_count
        self.retry_delay = retry_delay

    def build_url(self, path: str) -> str:
        """Resolve ``path`` against the base URI, which must end with a slash."""
        if not urlsplit(self.base_uri).path.endswith("/"):
            raise NitradoError(
                f"BaseURI must have a trailing slash, but {self.base_uri!r} does not"
            )
        return urljoin(self.base_uri, path)

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.token}"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send a request and return the decoded JSON body, or ``None`` if it is empty.

        Failed attempts (connection errors or status codes of 400 and above) are
        retried up to ``retry_count`` times, pausing ``retry_delay`` seconds after
        each. If every attempt fails to connect, :class:`NitradoError` is raised.
        """
        url = self.build_url(path)
        data = None
        if body is not None:
            data = (json.dumps(body, ensure_ascii=False) + "\n").encode("utf-8")
        headers = self._headers(body is not None)

        response: requests.Response | None = None
        last_error: Exception | None = None
        for _ in range(self.retry_count):
            try:
                response = self.session.request(method, url, data=data, headers=headers)
                last_error = None
            except requests.RequestException as exc:
                response = None
                last_error = exc
            if response is not None and response.status_code < 400:
                break
            time.sleep(self.retry_delay)

        if response is None:
            if last_error is not None:
                raise NitradoError(f"{method} {url} failed: {last_error}") from last_error
            raise NitradoError(f"{method} {url} was never sent")
        return _decode(response.text)