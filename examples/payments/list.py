"""
Walk through every payment, one page at a time.

See https://docs.mollie.com/reference/v2/payments-api/list-payments
"""

from __future__ import annotations

import logging
import sys

from mollie_client import ConfigError, MollieApiError, create_mollie_client


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    try:
        client = create_mollie_client()
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    params = {"limit": 50}
    with client:
        while params is not None:
            try:
                page = client.payments.list(params)
            except MollieApiError as exc:
                logging.error("Listing payments failed: %s", exc.message)
                return 1
            for payment in page:
                logging.info("%s %s %s", payment.id, payment.status, payment.amount)
            params = page.next_page_params()
    return 0


if __name__ == "__main__":
    sys.exit(main())
