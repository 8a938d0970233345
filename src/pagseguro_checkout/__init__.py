"""
Public facade for the PagSeguro checkout client.

The module re-exports the most useful pieces for integrators so they can
``from pagseguro_checkout import ...`` without navigating the package.
"""

from .api import create_checkout_client, submit_checkout
from .core import (
    CHECKOUT_URL,
    SANDBOX_CHECKOUT_URL,
    SHIPPING_OTHER,
    SHIPPING_PAC,
    SHIPPING_SEDEX,
    XML_HEADER,
    Address,
    Buyer,
    BuyerDocument,
    CheckoutClient,
    CheckoutConfig,
    CheckoutEnvironment,
    CheckoutError,
    CheckoutRequest,
    CheckoutResponse,
    CheckoutResult,
    ConfigError,
    LineItem,
    Metadata,
    Phone,
    SerializationError,
    Shipping,
    ShippingType,
    build_checkout_element,
    build_environment,
    build_session,
    decode_response,
    format_amount,
    format_quantity,
    load_checkout_config,
    load_env_file,
    serialize_checkout,
)

__all__ = (
    "Address",
    "Buyer",
    "BuyerDocument",
    "CHECKOUT_URL",
    "CheckoutClient",
    "CheckoutConfig",
    "CheckoutEnvironment",
    "CheckoutError",
    "CheckoutRequest",
    "CheckoutResponse",
    "CheckoutResult",
    "ConfigError",
    "LineItem",
    "Metadata",
    "Phone",
    "SANDBOX_CHECKOUT_URL",
    "SHIPPING_OTHER",
    "SHIPPING_PAC",
    "SHIPPING_SEDEX",
    "SerializationError",
    "Shipping",
    "ShippingType",
    "XML_HEADER",
    "build_checkout_element",
    "build_environment",
    "build_session",
    "create_checkout_client",
    "decode_response",
    "format_amount",
    "format_quantity",
    "load_checkout_config",
    "load_env_file",
    "serialize_checkout",
    "submit_checkout",
)
