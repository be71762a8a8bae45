# nitradoapi

A small Python client for the Nitrado game server hosting API. It can list
the services on an account and show the game server behind each one. It can
also restart a game server and change one of its settings. It reads usage
statistics, lists players, and lists, downloads and uploads files on the file
server.

## Installation

```
pip install nitradoapi
```

To run the test suite, install the `test` extra:

```
pip install "nitradoapi[test]"
pytest
```

## Command line

The `nitradoapi` command lists every service on the account. For each one it
prints the game of its game server:

```
export nitradoToken=placeholder
nitradoapi
```

Each service gets one output line. The name and the game are printed as
quoted strings:

```
GameServer for "My Server": "DayZ (PC)"
```

Options:

- `--token`: the API token. The default comes from the `nitradoToken`
  environment variable.
- `--base-uri`: the API base URI. The default is `https://api.nitrado.net/`.

If a `NitradoError` is raised, the command prints `error: ...` to standard
error and exits with status 1. Otherwise it exits with 0.

## Library usage

`nitradoapi.client.Client` builds one shared `Transport` and every service on
top of it. Each service is reached through an attribute of the client:

| Attribute | Class | Operations |
| --- | --- | --- |
| `services` | `nitradoapi.services.ServicesService` | `list()`, `get(service_id)` |
| `game_servers` | `nitradoapi.gameservers.GameServersService` | `get(service_id)`, `restart(service_id)` |
| `game_server_stats` | `nitradoapi.stats.GameServerStatsService` | `get(service_id)` |
| `player_list` | `nitradoapi.playerlist.PlayerListService` | `list(service)` |
| `file_server` | `nitradoapi.fileserver.FileServerService` | `list(service, options)`, `download(service, options)`, `upload(service, options)` |
| `game_server_settings` | `nitradoapi.settings.GSSettingsService` | `update(service_id, options)` |

The shared transport is `client.transport`.

```python
from nitradoapi.client import Client

client = Client("token")

for service in client.services.list():
    server = client.game_servers.get(service.id)
    print(service.details.name, server.game_human)

    usage = client.game_server_stats.get(service.id)
    print(usage.cpu_usage)  # [[value, timestamp], ...]

    for player in client.player_list.list(service):
        print(player.name, player.online)
```

A service can also be built on its own from a
`nitradoapi.transport.Transport`, for example `ServicesService(Transport("token"))`.

### Results

Responses are turned into dataclasses:

- `Service` and `ServiceDetails` in `nitradoapi.services`.
- `GameServer` in `nitradoapi.gameservers`, with its nested `GameSpecific`,
  `Credentials` (`FtpCredentials`, `MysqlCredentials`), `Settings`
  (`ServerConfig`, `GeneralSettings`) and `QueryInfo`.
- `GSStats` in `nitradoapi.stats`. Its series are `cpu_usage`,
  `current_players`, `max_players` and `memory_usage`.
- `Player` in `nitradoapi.playerlist`.
- `File` and `FileDownloadResponse` in `nitradoapi.fileserver`.

Fields missing from a response get empty defaults: `""`, `0`, `False` or an
empty list.

`nitradoapi.models` holds `FileBookmarks` and `FileLink`. Both are built with
`from_dict` from a response body.

### Files and settings

- `FileServerService.list` takes `FileServerListOptions(dir=..., search=...)`.
  It returns the `File` entries ordered by `modified_at`, oldest first.
- `FileServerService.download` takes `FileServerDownloadOptions(file=...)` and
  returns the download URL as a string.
- `FileServerService.upload` takes `FileServerUploadOptions(path=..., file=...)`
  and returns a `FileDownloadResponse` with `status`, `url` and `token`.
- `PlayerListService.list` returns players ordered by name.
- `GSSettingsService.update` takes
  `GSSettingsUpdateOptions(category=..., key=..., value=...)`. A blank category
  or key raises `NitradoError`. An empty value is allowed and is still sent.

Options become the query string of the request. Empty values are left out,
except the settings `value`. Keys are encoded in sorted order, through
`nitradoapi.transport.add_options`.

### Errors and retries

`Transport.request` sends the request with a `Bearer` token and the user agent
`nitradoapi`. It retries when a connection error occurs or when the status is
400 or above. It makes up to `retry_count` attempts (default 10) and sleeps
`retry_delay` seconds (default 2) after each failed attempt. If the last
attempt still returns an error status, its body is decoded and returned as
usual. `NitradoError` is raised when:

- every attempt failed to connect;
- the response body is not valid JSON;
- `base_uri` does not end with a slash;
- a restart or a settings update is not reported as `success`;
- a settings update is missing its category or key.

## What it does not do

`download` returns only a URL, and `upload` returns only a URL and token. The
package does not transfer file contents itself. Only the operations listed
above are covered. Other parts of the Nitrado API have no methods here.