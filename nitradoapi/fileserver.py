"""Listing, downloading and uploading files on a game server."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from .services import Service
from .transport import Transport, add_options


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _number(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _non_empty(**values: str) -> dict[str, str]:
    return {key: value for key, value in values.items() if value}


@dataclass
class File:
    """An entry in a game server's file listing."""

    owner: str = ""
    created_at: int = 0
    path: str = ""
    size: int = 0
    accessed_at: int = 0
    modified_at: int = 0
    type: str = ""
    chmod: str = ""
    group: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> File:
        payload = _mapping(data)
        return cls(
            owner=_text(payload.get("owner")),
            created_at=_number(payload.get("created_at")),
            path=_text(payload.get("path")),
            size=_number(payload.get("size")),
            accessed_at=_number(payload.get("accessed_at")),
            modified_at=_number(payload.get("modified_at")),
            type=_text(payload.get("type")),
            chmod=_text(payload.get("chmod")),
            group=_text(payload.get("group")),
            name=_text(payload.get("name")),
        )


@dataclass
class FileDownloadResponse:
    """The reply to a download or upload request: a URL and the token for it."""

    status: str = ""
    url: str = ""
    token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileDownloadResponse:
        payload = _mapping(data)
        token = _mapping(_mapping(payload.get("data")).get("token"))
        return cls(
            status=_text(payload.get("status")),
            url=_text(token.get("url")),
            token=_text(token.get("token")),
        )


@dataclass
class FileServerListOptions:
    """Query settings for a file listing."""

    dir: str = ""
    search: str = ""

    def to_query(self) -> dict[str, str]:
        return _non_empty(dir=self.dir, search=self.search)


@dataclass
class FileServerDownloadOptions:
    """Query settings for a download request."""

    file: str = ""

    def to_query(self) -> dict[str, str]:
        return _non_empty(file=self.file)


@dataclass
class FileServerUploadOptions:
    """Query settings for an upload request."""

    path: str = ""
    file: str = ""

    def to_query(self) -> dict[str, str]:
        return _non_empty(path=self.path, file=self.file)


class FileServerService:
    """Access to the file server endpoints of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(
        self, service: Service, options: FileServerListOptions | None = None
    ) -> list[File]:
        """Return the files at a location, oldest modification first."""
        url = add_options(
            f"services/{service.id}/gameservers/file_server/list",
            options or FileServerListOptions(),
        )
        response = _mapping(self._transport.request("GET", url))
        entries = _mapping(response.get("data")).get("entries") or []
        files = [File.from_dict(entry) for entry in entries]
        return sorted(files, key=attrgetter("modified_at"))

    def download(
        self, service: Service, options: FileServerDownloadOptions | None = None
    ) -> str:
        """Return the URL from which the requested file can be fetched."""
        url = add_options(
            f"services/{service.id}/gameservers/file_server/download",
            options or FileServerDownloadOptions(),
        )
        return FileDownloadResponse.from_dict(self._transport.request("GET", url)).url

    def upload(
        self, service: Service, options: FileServerUploadOptions | None = None
    ) -> FileDownloadResponse:
        """Request an upload slot and return the URL and token to upload with."""
        url = add_options(
            f"services/{service.id}/gameservers/file_server/upload",
            options or FileServerUploadOptions(),
        )
        return FileDownloadResponse.from_dict(self._transport.request("POST", url))