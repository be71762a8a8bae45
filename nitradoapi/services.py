"""Listing and inspecting the services on a Nitrado account."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .transport import Transport


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _number(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _flag(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _texts(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def _text_field(key: str | None = None) -> Any:
    return field(default="", metadata={"key": key, "convert": _text})


def _int_field(key: str | None = None) -> Any:
    return field(default=0, metadata={"key": key, "convert": _number})


def _build(cls: Any, data: Any) -> Any:
    payload = _mapping(data)
    values = {}
    for item in fields(cls):
        key = item.metadata.get("key") or item.name
        value = payload.get(key)
        convert = item.metadata.get("convert")
        values[item.name] = convert(value) if convert is not None else value
    return cls(**values)


@dataclass
class ServiceDetails:
    """Descriptive details of a service."""

    address: str = _text_field()
    name: str = _text_field()
    game: str = _text_field()
    portlist_short: str = _text_field()
    folder_short: str = _text_field()
    slots: int = _int_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceDetails:
        return _build(cls, data)


@dataclass
class Service:
    """A service rented on the Nitrado account."""

    id: int = _int_field()
    location_id: int = _int_field()
    status: str = _text_field()
    websocket_token: str = _text_field()
    user_id: int = _int_field()
    comment: Any = field(default=None, metadata={"key": None})
    auto_extension: bool = field(default=False, metadata={"key": None, "convert": _flag})
    auto_extension_duration: int = _int_field()
    type: str = _text_field()
    type_human: str = _text_field()
    details: ServiceDetails = field(
        default_factory=ServiceDetails,
        metadata={"key": None, "convert": ServiceDetails.from_dict},
    )
    start_date: str = _text_field()
    suspend_date: str = _text_field()
    delete_date: str = _text_field()
    suspending_in: int = _int_field()
    deleting_in: int = _int_field()
    username: str = _text_field()
    roles: list[str] = field(default_factory=list, metadata={"key": None, "convert": _texts})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Service:
        return _build(cls, data)


class ServicesService:
    """Access to the service endpoints of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> list[Service]:
        """Return every service on the account."""
        response = _mapping(self._transport.request("GET", "services"))
        entries = _mapping(response.get("data")).get("services") or []
        return [Service.from_dict(entry) for entry in entries]

    def get(self, service_id: int) -> Service:
        """Return the service with the given ID."""
        response = _mapping(self._transport.request("GET", f"services/{service_id}"))
        return Service.from_dict(_mapping(response.get("data")).get("service"))