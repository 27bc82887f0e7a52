"""
Command-line interface for inspecting resources through the typed client.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Sequence, TextIO, Tuple

import requests

from .api import create_client
from .core.client import Client
from .core.errors import ConfigError, StripeError
from .core.objects import StripeModel
from .core.params import ListParams
from .resources import (
    Charge,
    Customer,
    ListCharges,
    ListCustomers,
    ListRefunds,
    ListSubscriptions,
    Refund,
    Source,
    Subscription,
)

_RETRIEVABLE = {
    "charge": Charge,
    "customer": Customer,
    "refund": Refund,
    "source": Source,
    "subscription": Subscription,
}

_LISTABLE: Dict[str, Tuple[type, type]] = {
    "charge": (Charge, ListCharges),
    "customer": (Customer, ListCustomers),
    "refund": (Refund, ListRefunds),
    "subscription": (Subscription, ListSubscriptions),
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def parse_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripe-resources",
        description="Retrieve or list Stripe resources and print them as JSON",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=parse_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    retrieve = commands.add_parser("retrieve", help="Fetch one resource by id")
    retrieve.add_argument("resource", choices=sorted(_RETRIEVABLE))
    retrieve.add_argument("id")
    retrieve.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="FIELD",
        help="Inline a referenced object instead of its id (repeatable)",
    )

    listing = commands.add_parser("list", help="Fetch one page of a resource list")
    listing.add_argument("resource", choices=sorted(_LISTABLE))
    listing.add_argument("--limit", type=int, default=None)
    listing.add_argument("--starting-after", default=None, metavar="ID")
    listing.add_argument("--ending-before", default=None, metavar="ID")
    return parser


def _retrieve(client: Client, args: argparse.Namespace) -> StripeModel:
    resource = _RETRIEVABLE[args.resource]
    return resource.retrieve(client, args.id, expand=args.expand)


def _list(client: Client, args: argparse.Namespace) -> StripeModel:
    resource, params_cls = _LISTABLE[args.resource]
    values = {
        "limit": args.limit,
        "starting_after": args.starting_after,
        "ending_before": args.ending_before,
    }
    params: ListParams = params_cls(
        **{key: value for key, value in values.items() if value is not None}
    )
    page = resource.list(client, params)
    if page.has_more:
        logging.info("More results available; continue with --starting-after %s", page.last_id)
    return page


_COMMANDS: Dict[str, Callable[[Client, argparse.Namespace], StripeModel]] = {
    "retrieve": _retrieve,
    "list": _list,
}


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    session: requests.Session | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = dict(args.set or ())

    try:
        client = create_client(env_file=args.env_file, overrides=overrides, session=session)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        result = _COMMANDS[args.command](client, args)
    except (StripeError, ValueError) as exc:
        logging.error("%s %s failed: %s", args.command, args.resource, exc)
        return 1

    out = stdout or sys.stdout
    out.write(result.model_dump_json(indent=2, exclude_none=True))
    out.write("\n")
    return 0


def main() -> None:
    sys.exit(run_cli())
