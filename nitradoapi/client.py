"""The entry point to every part of the Nitrado API."""

from __future__ import annotations

import requests

from .fileserver import FileServerService
from .gameservers import GameServersService
from .playerlist import PlayerListService
from .services import ServicesService
from .settings import GSSettingsService
from .stats import GameServerStatsService
from .transport import (
    DEFAULT_BASE_URI,
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_USER_AGENT,
    Transport,
)


class Client:
    """A Nitrado API client; each part of the API is reached through an attribute."""

    def __init__(
        self,
        token: str,
        base_uri: str = DEFAULT_BASE_URI,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
        retry_count: int = DEFAULT_RETRY_COUNT,
        retry_delay: float = DEFAULT_RETRY_DELAY,
    ) -> None:
        self.transport = Transport(
            token,
            base_uri=base_uri,
            user_agent=user_agent,
            session=session,
            retry_count=retry_count,
            retry_delay=retry_delay,
        )
        self.file_server = FileServerService(self.transport)
        self.game_servers = GameServersService(self.transport)
        self.game_server_settings = GSSettingsService(self.transport)
        self.game_server_stats = GameServerStatsService(self.transport)
        self.player_list = PlayerListService(self.transport)
        self.services = ServicesService(self.transport)