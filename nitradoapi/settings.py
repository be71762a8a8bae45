"""Changing the settings of a game server."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .transport import NitradoError, Transport, add_options


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass
class GSSettingsUpdateOptions:
    """A setting to change: its category, key and new value."""

    category: str = ""
    key: str = ""
    value: str = ""

    def to_query(self) -> dict[str, str]:
        query = {name: text for name, text in (("category", self.category), ("key", self.key)) if text}
        query["value"] = self.value
        return query


class GSSettingsService:
    """Access to the game server settings endpoint of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def update(self, service_id: int, options: GSSettingsUpdateOptions) -> None:
        """Change one setting of the service's game server.

        Raises :class:`NitradoError` if the category or key is blank, or unless
        the API reports success. An empty value is allowed.
        """
        if not options.category or not options.key:
            raise NitradoError(
                "category and key must not be blank. "
                f"category={json.dumps(options.category)}, key={json.dumps(options.key)}"
            )
        url = add_options(f"services/{service_id}/gameservers/settings", options)
        response = _mapping(self._transport.request("POST", url))
        status = response.get("status")
        status = "" if status is None else str(status)
        if status != "success":
            raise NitradoError(f"status {json.dumps(status)}")