"""
Command-line interface for inspecting Mollie resources.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Iterable, Optional, Sequence, TextIO, Tuple

import requests

from .api import ConfigError, create_mollie_client
from .core.config import load_client_config
from .core.errors import MollieApiError
from .core.resources import RESOURCE_SPECS


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    resource_names = [spec.name for spec in RESOURCE_SPECS]

    parser = argparse.ArgumentParser(
        prog="mollie-client",
        description="Fetch Mollie API resources and print them as JSON",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MOLLIE_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )
    parser.add_argument(
        "--param",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Extra request parameter, e.g. customerId=cst_xxx (repeatable)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", help="Retrieve a single entity")
    get_parser.add_argument("resource", choices=resource_names)
    get_parser.add_argument("id", help="Entity ID, e.g. tr_WDqYK6vllg")

    list_parser = commands.add_parser("list", help="Retrieve one page of entities")
    list_parser.add_argument("resource", choices=resource_names)
    list_parser.add_argument("--limit", type=int, help="Page size")
    list_parser.add_argument(
        "--from",
        dest="cursor",
        help="Cursor (ID) of the first entity on the page",
    )
    return parser


def _page_to_json(page: Any) -> dict[str, Any]:
    return {
        "count": page.count,
        "items": [item.to_dict() for item in page],
        "next": page.next_page_params(),
        "previous": page.previous_page_params(),
    }


def run_cli(argv: Sequence[str] | None = None, *, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())
    params = _collect_overrides(args.param or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_mollie_client(config=config, session=requests.Session())
    resource = client.resource(args.resource)

    try:
        if args.command == "get":
            result: dict[str, Any] = resource.get(args.id, params).to_dict()
        else:
            if args.limit is not None:
                params["limit"] = str(args.limit)
            if args.cursor:
                params["from"] = args.cursor
            result = _page_to_json(resource.list(params))
    except MollieApiError as exc:
        logging.error("Request failed: %s", exc.message)
        return 1
    finally:
        client.close()

    json.dump(result, out, indent=2)
    out.write("\n")
    return 0


def main() -> None:
    sys.exit(run_cli())
