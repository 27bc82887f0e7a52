"""
Minimal script that pages through the refunds of one charge using the public API.
"""

from __future__ import annotations

import argparse
import logging
import sys

from stripe_resources import (
    ConfigError,
    ListRefunds,
    Refund,
    StripeError,
    create_client,
)
from stripe_resources.cli import parse_override


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List every refund issued for a charge")
    parser.add_argument("charge", help="Charge id, e.g. ch_123")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_* settings",
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
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=10,
        help="Refunds requested per page (1-100)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_client(
            env_file=args.env_file,
            overrides=dict(args.set or ()),
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    params = ListRefunds(charge=args.charge, limit=args.page_size)
    total = 0
    try:
        while True:
            page = Refund.list(client, params)
            for refund in page.items():
                total += 1
                print(f"{refund.id}\t{refund.amount}\t{refund.currency}\t{refund.status}")
            if not page.has_more:
                break
            params = params.model_copy(update={"starting_after": page.last_id})
    except StripeError as exc:
        logging.error("Listing refunds failed: %s", exc)
        return 1

    logging.info("%d refund(s) for %s", total, args.charge)
    return 0


if __name__ == "__main__":
    sys.exit(main())
