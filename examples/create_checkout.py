"""
Minimal script that creates a PagSeguro checkout through the public API.

Seller credentials are read from PAGSEGURO_SELLER_EMAIL / PAGSEGURO_SELLER_TOKEN
(environment or .env file).
"""

from __future__ import annotations

import argparse
import logging
import sys

from pagseguro_checkout import SHIPPING_PAC, ConfigError, create_checkout_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a PagSeguro checkout code")
    parser.add_argument("reference", help="Merchant reference for the order")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAGSEGURO_* settings",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the sandbox endpoint",
    )
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
        client = create_checkout_client(
            env_file=args.env_file,
            sandbox=True if args.sandbox else None,
        )
        request = client.new_request(args.reference)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    request.add_item("0001", "Sample product", 10.0, 1).set_weight(500)
    request.set_buyer("Comprador Teste", "comprador@example.com").set_cpf("12345678909")
    request.set_shipping(SHIPPING_PAC, 0).set_address_state_city("SP", "Sao Paulo")

    result = client.submit(request)
    if result.success:
        logging.info("Checkout code: %s", result.checkout.code)
        return 0

    for error in result.errors:
        logging.error("PagSeguro error %s: %s", error.code, error.message)
    if not result.errors:
        logging.error("Checkout failed, see the log above for details")
    return 1


if __name__ == "__main__":
    sys.exit(main())
