"""Listing the players known to a game server."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

from .services import Service
from .transport import Transport


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Player:
    """A player of a game server and the actions that can be taken on them."""

    name: str = ""
    id: str = ""
    id_type: str = ""
    online: str = ""
    actions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        payload = _mapping(data)
        actions = payload.get("actions")
        return cls(
            name=_text(payload.get("name")),
            id=_text(payload.get("id")),
            id_type=_text(payload.get("id_type")),
            online=_text(payload.get("online")),
            actions=[str(a) for a in actions if a is not None]
            if isinstance(actions, list)
            else [],
        )


class PlayerListService:
    """Access to the player list endpoint of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, service: Service) -> list[Player]:
        """Return the players of the service's game server, ordered by name."""
        response = _mapping(
            self._transport.request("GET", f"services/{service.id}/gameservers/games/players")
        )
        entries = _mapping(response.get("data")).get("players") or []
        players = [Player.from_dict(entry) for entry in entries]
        return sorted(players, key=attrgetter("name"))