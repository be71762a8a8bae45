"""Game server details and restarts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from .transport import NitradoError, Transport


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


def _dashed_text_field() -> Any:
    """A text field whose JSON key is the field name with hyphens for underscores."""
    return field(default="", metadata={"key": None, "dashed": True, "convert": _text})


def _int_field(key: str | None = None) -> Any:
    return field(default=0, metadata={"key": key, "convert": _number})


def _list_field(key: str | None = None) -> Any:
    return field(default_factory=list, metadata={"key": key, "convert": _texts})


def _nested(cls: Any, key: str | None = None) -> Any:
    return field(default_factory=cls, metadata={"key": key, "convert": cls.from_dict})


def _build(cls: Any, data: Any) -> Any:
    payload = _mapping(data)
    values = {}
    for item in fields(cls):
        if item.metadata.get("dashed"):
            key = item.name.replace("_", "-")
        else:
            key = item.metadata.get("key") or item.name
        value = payload.get(key)
        convert = item.metadata.get("convert")
        values[item.name] = convert(value) if convert is not None else value
    return cls(**values)


@dataclass
class GameSpecific:
    """Game-specific paths and update information."""

    path: str = _text_field()
    update_status: str = _text_field()
    last_update: str = _text_field()
    log_files: list[str] = _list_field()
    config_files: list[str] = _list_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSpecific:
        return _build(cls, data)


@dataclass
class FtpCredentials:
    """Access details for the game server's FTP account."""

    hostname: str = _text_field()
    port: int = _int_field()
    username: str = _text_field()
    password: str = _text_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FtpCredentials:
        return _build(cls, data)


@dataclass
class MysqlCredentials:
    """Access details for the game server's MySQL database."""

    hostname: str = _text_field()
    port: int = _int_field()
    username: str = _text_field()
    password: str = _text_field()
    database: str = _text_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MysqlCredentials:
        return _build(cls, data)


@dataclass
class Credentials:
    """All access credentials of a game server."""

    ftp: FtpCredentials = _nested(FtpCredentials)
    mysql: MysqlCredentials = _nested(MysqlCredentials)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credentials:
        return _build(cls, data)


@dataclass
class ServerConfig:
    """The ``config`` settings category."""

    hostname: str = _text_field()
    von_codec_quality: str = _text_field("vonCodecQuality")
    disable_von: str = _text_field("disableVoN")
    password: str = _text_field()
    server_time_acceleration: str = _text_field("serverTimeAcceleration")
    server_night_time_acceleration: str = _text_field("serverNightTimeAcceleration")
    server_time_persistent: str = _text_field("serverTimePersistent")
    disable_3rd_person: str = _text_field("disable3rdPerson")
    disable_crosshair: str = _text_field("disableCrosshair")
    use_server_time: str = _text_field("useServerTime")
    custom_server_time: str = _text_field("customServerTime")
    enable_mouse_and_keyboard: str = _text_field("enableMouseAndKeyboard")
    enable_whitelist: str = _text_field("enableWhitelist")
    mission: str = _text_field()
    admin_log_player_hits_only: str = _text_field("adminLogPlayerHitsOnly")
    admin_log_placement: str = _text_field("adminLogPlacement")
    admin_log_build_actions: str = _text_field("adminLogBuildActions")
    admin_log_player_list: str = _text_field("adminLogPlayerList")
    lighting_config: str = _text_field("lightingConfig")
    disable_personal_light: str = _text_field("disablePersonalLight")
    disable_base_damage: str = _text_field("disableBaseDamage")
    disable_container_damage: str = _text_field("disableContainerDamage")
    enable_cfg_gameplay_file: str = _text_field("enableCfgGameplayFile")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServerConfig:
        return _build(cls, data)


@dataclass
class GeneralSettings:
    """The ``general`` settings category."""

    expert_mode: str = _text_field("expertMode")
    admin_password: str = _dashed_text_field()
    nolog: str = _text_field()
    rcon_password: str = _dashed_text_field()
    additional_mods: str = _text_field("additionalMods")
    bans: str = _text_field()
    whitelist: str = _text_field()
    resetmission: str = _text_field()
    priority: str = _text_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneralSettings:
        return _build(cls, data)


@dataclass
class Settings:
    """The settings of a game server, by category."""

    config: ServerConfig = _nested(ServerConfig)
    general: GeneralSettings = _nested(GeneralSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return _build(cls, data)


@dataclass
class QueryInfo:
    """Live query information reported by a game server."""

    server_name: str = _text_field()
    connect_ip: str = _text_field()
    map: str = _text_field()
    version: str = _text_field()
    player_current: int = _int_field()
    player_max: int = _int_field()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryInfo:
        return _build(cls, data)


@dataclass
class GameServer:
    """The details of a game server."""

    status: str = _text_field()
    last_status_change: int = _int_field()
    must_be_started: bool = field(default=False, metadata={"key": None, "convert": _flag})
    username: str = _text_field()
    user_id: int = _int_field()
    service_id: int = _int_field()
    ip: str = _text_field()
    port: int = _int_field()
    query_port: int = _int_field()
    rcon_port: int = _int_field()
    type: str = _text_field()
    memory: str = _text_field()
    memory_mb: int = _int_field()
    game: str = _text_field()
    game_human: str = _text_field()
    game_specific: GameSpecific = _nested(GameSpecific)
    slots: int = _int_field()
    location: str = _text_field()
    credentials: Credentials = _nested(Credentials)
    settings: Settings = _nested(Settings)
    quota: Any = field(default=None, metadata={"key": None})
    query: QueryInfo = _nested(QueryInfo)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameServer:
        return _build(cls, data)


class GameServersService:
    """Access to the game server endpoints of the Nitrado API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, service_id: int) -> GameServer:
        """Return the game server of the given service."""
        response = _mapping(
            self._transport.request("GET", f"services/{service_id}/gameservers")
        )
        return GameServer.from_dict(_mapping(response.get("data")).get("gameserver"))

    def restart(self, service_id: int) -> None:
        """Restart the game server of the given service.

        Raises :class:`NitradoError` unless the API reports success.
        """
        response = _mapping(
            self._transport.request("POST", f"services/{service_id}/gameservers/restart")
        )
        status = _text(response.get("status"))
        if status != "success":
            message = _text(response.get("message"))
            raise NitradoError(f"status {json.dumps(status)} ({json.dumps(message)})")