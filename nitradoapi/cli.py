"""List the game servers of a Nitrado account."""

from __future__ import annotations

import argparse
import json
import os
import sys

from .client import Client
from .transport import DEFAULT_BASE_URI, NitradoError

TOKEN_VARIABLE = "nitradoToken"


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nitradoapi", description="Show the game of every service on the account."
    )
    parser.add_argument(
        "--token",
        default=os.environ.get(TOKEN_VARIABLE, ""),
        help=f"API token (default: the {TOKEN_VARIABLE} environment variable)",
    )
    parser.add_argument("--base-uri", default=DEFAULT_BASE_URI, help="API base URI")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the game of each service's game server; return the exit status."""
    args = _parser().parse_args(argv)
    client = Client(args.token, base_uri=args.base_uri)
    try:
        for service in client.services.list():
            game_server = client.game_servers.get(service.id)
            print(
                f"GameServer for {_quote(service.details.name)}: "
                f"{_quote(game_server.game_human)}"
            )
    except NitradoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())