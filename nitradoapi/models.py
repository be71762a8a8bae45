"""Small response models shared across the Nitrado API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_TOKEN_KEY = "token"


def _section(data: Any, key: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class FileBookmarks:
    """The list of bookmarked file locations on a game server."""

    status: str = ""
    bookmarks: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileBookmarks:
        payload = data if isinstance(data, dict) else {}
        bookmarks = _section(payload, "data").get("bookmarks") or []
        return cls(
            status=_text(payload, "status"),
            bookmarks=[str(item) for item in bookmarks if item is not None],
        )


@dataclass
class FileLink:
    """A download link to a file, with the token that authorises it."""

    status: str = ""
    url: str = ""
    token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileLink:
        payload = data if isinstance(data, dict) else {}
        link = _section(_section(payload, "data"), _TOKEN_KEY)
        return cls(
            status=_text(payload, "status"),
            url=_text(link, "url"),
            token=_text(link, _TOKEN_KEY),
        )