"""
Create a quarterly subscription for an existing customer.

See https://docs.mollie.com/reference/v2/subscriptions-api/create-subscription
"""

from __future__ import annotations

import argparse
import logging
import sys

from mollie_client import ConfigError, MollieApiError, create_mollie_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Mollie subscription")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MOLLIE_* settings",
    )
    parser.add_argument(
        "--api-key",
        help="Provide the API key without relying on environment data",
    )
    parser.add_argument("--customer-id", default="cst_pzhEvnttJ2")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_mollie_client(env_file=args.env_file, api_key=args.api_key)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        subscription = client.customers_subscriptions.create(
            customer_id=args.customer_id,
            amount={"value": "24.00", "currency": "EUR"},
            times=4,
            interval="3 months",
            description="Quarterly payment",
            webhook_url="https://webshop.example.org/payments/webhook/",
        )
    except MollieApiError as exc:
        logging.error("Creating the subscription failed: %s", exc.message)
        return 1

    logging.info("Created subscription %s (%s)", subscription.id, subscription.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
