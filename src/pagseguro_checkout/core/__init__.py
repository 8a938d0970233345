"""
Core primitives for building and submitting PagSeguro checkouts.
"""

from .client import CheckoutClient, submit_checkout
from .config import (
    CHECKOUT_URL,
    SANDBOX_CHECKOUT_URL,
    CheckoutConfig,
    ConfigError,
    load_checkout_config,
)
from .decoding import declared_charset, decode_response
from .environment import CheckoutEnvironment, build_environment, load_env_file
from .formatting import format_amount, format_quantity
from .models import (
    SHIPPING_OTHER,
    SHIPPING_PAC,
    SHIPPING_SEDEX,
    Address,
    Buyer,
    BuyerDocument,
    CheckoutRequest,
    LineItem,
    Metadata,
    Phone,
    Shipping,
    ShippingType,
)
from .results import CheckoutError, CheckoutResponse, CheckoutResult
from .serializer import (
    XML_HEADER,
    SerializationError,
    build_checkout_element,
    serialize_checkout,
)
from .transport import build_session, request_timeout

__all__ = [
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
    "declared_charset",
    "decode_response",
    "format_amount",
    "format_quantity",
    "load_checkout_config",
    "load_env_file",
    "request_timeout",
    "serialize_checkout",
    "submit_checkout",
]
