"""
Public, high-level helpers for creating checkouts on PagSeguro.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from .core.client import CheckoutClient
from .core.config import CheckoutConfig, load_checkout_config
from .core.models import CheckoutRequest
from .core.results import CheckoutResult

__all__ = ["create_checkout_client", "submit_checkout"]


def _resolve_config(
    config: Optional[CheckoutConfig],
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    settings: Mapping[str, Any],
) -> CheckoutConfig:
    if config is None:
        return load_checkout_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            **settings,
        )

    extras = (overrides, base, *settings.values())
    if any(item is not None and item != {} for item in extras):
        raise ValueError(
            "Provide either a pre-built CheckoutConfig or individual settings, not both."
        )
    return config


def create_checkout_client(
    *,
    config: Optional[CheckoutConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    **settings: Any,
) -> CheckoutClient:
    """
    Construct a :class:`CheckoutClient`.

    Callers can either supply a ready-made :class:`CheckoutConfig` or let the
    helper assemble one from ``PAGSEGURO_*`` environment data, a ``.env``
    file and keyword settings (``seller_email``, ``seller_token``,
    ``sandbox``, ``checkout_url``, ``connect_timeout``, ``read_timeout``,
    ``verify_tls``, ``ca_bundle``).
    """
    cfg = _resolve_config(config, env_file, overrides, base, settings)
    return CheckoutClient(cfg, session=session)


def submit_checkout(
    request: CheckoutRequest,
    *,
    config: Optional[CheckoutConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    **settings: Any,
) -> CheckoutResult:
    """
    Submit ``request`` with a client configured like
    :func:`create_checkout_client`.
    """
    with create_checkout_client(
        config=config,
        session=session,
        env_file=env_file,
        overrides=overrides,
        base=base,
        **settings,
    ) as client:
        return client.submit(request)
