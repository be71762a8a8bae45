"""Resource and player statistics of a game server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .transport import Transport


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _series(value: Any) -> list[list[float]]:
    if not isinstance(value, list):
        return []
    return [[float(number) for number in point] for point in value if isinstance(point, list)]


@dataclass
class GSStats:
    """Time series of ``[value, timestamp]`` pairs for a game server."""

    cpu_usage: list[list[float]] = field(default_factory=list)
    current_players: list[list[float]] = field(default_factory=list)
    max_players: list[list[float]] = field(default_factory=list)
    memory_usage: list[list[float]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GSStats:
        payload = _mapping(data)
        return cls(
            cpu_usage=_series(payload.get("cpuUsage")),
            current_players=_series(payload.get("currentPlayers")),
            max_players=_series(payload.get("maxPlayers")),
            memory_usage=_series(payload.get("memoryUsage")),
        )


class GameServerStatsService:
    """Access to the game server statistics endpoint of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, service_id: int) -> GSStats:
        """Return the statistics of the given service's game server."""
        response = _mapping(
            self._transport.request("GET", f"services/{service_id}/gameservers/stats")
        )
        return GSStats.from_dict(_mapping(response.get("data")).get("stats"))