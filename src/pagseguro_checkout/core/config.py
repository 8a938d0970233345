"""
Configuration objects and helpers for the checkout client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .environment import build_environment

__all__ = [
    "CHECKOUT_URL",
    "ConfigError",
    "CheckoutConfig",
    "SANDBOX_CHECKOUT_URL",
    "load_checkout_config",
]

CHECKOUT_URL = "https://ws.pagseguro.uol.com.br/v2/checkout"
SANDBOX_CHECKOUT_URL = "https://ws.sandbox.pagseguro.uol.com.br/v2/checkout"

DEFAULT_CONNECT_TIMEOUT = 30.0
DEFAULT_READ_TIMEOUT = 60.0

_PARAMETER_TO_ENV_KEY = {
    "seller_email": "PAGSEGURO_SELLER_EMAIL",
    "seller_token": "PAGSEGURO_SELLER_TOKEN",
    "sandbox": "PAGSEGURO_SANDBOX",
    "checkout_url": "PAGSEGURO_CHECKOUT_URL",
    "connect_timeout": "PAGSEGURO_CONNECT_TIMEOUT",
    "read_timeout": "PAGSEGURO_READ_TIMEOUT",
    "verify_tls": "PAGSEGURO_VERIFY_TLS",
    "ca_bundle": "PAGSEGURO_CA_BUNDLE",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean, got '{raw}'")


def _parse_timeout(raw: Optional[str], key: str, default: Optional[float]) -> Optional[float]:
    if raw is None:
        return default
    value = raw.strip()
    if value.lower() in ("", "none"):
        return None
    try:
        seconds = float(value)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number of seconds, got '{raw}'") from exc
    if seconds <= 0:
        raise ConfigError(f"{key} must be greater than zero")
    return seconds


def _required(values: Mapping[str, str], key: str) -> str:
    value = (values.get(key) or "").strip()
    if not value:
        raise ConfigError(f"{key} must be provided")
    return value


@dataclass(frozen=True)
class CheckoutConfig:
    """
    Settings for :class:`pagseguro_checkout.core.client.CheckoutClient`.

    ``verify_tls`` is handed to requests as-is: ``True`` trusts the system
    store, a path pins a CA bundle, ``False`` turns verification off.
    """

    seller_email: str = ""
    seller_token: str = ""
    checkout_url: str = CHECKOUT_URL
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT
    verify_tls: Union[bool, str] = True
    sandbox: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "CheckoutConfig":
        seller_email = _required(values, "PAGSEGURO_SELLER_EMAIL")
        seller_token = _required(values, "PAGSEGURO_SELLER_TOKEN")

        sandbox = _parse_bool(values.get("PAGSEGURO_SANDBOX") or "false", "PAGSEGURO_SANDBOX")
        default_url = SANDBOX_CHECKOUT_URL if sandbox else CHECKOUT_URL
        checkout_url = (values.get("PAGSEGURO_CHECKOUT_URL") or default_url).strip()
        if not checkout_url.startswith(("https://", "http://")):
            raise ConfigError(
                f"PAGSEGURO_CHECKOUT_URL must be an http(s) URL, got '{checkout_url}'"
            )

        connect_timeout = _parse_timeout(
            values.get("PAGSEGURO_CONNECT_TIMEOUT"),
            "PAGSEGURO_CONNECT_TIMEOUT",
            DEFAULT_CONNECT_TIMEOUT,
        )
        if connect_timeout is None:
            raise ConfigError("PAGSEGURO_CONNECT_TIMEOUT cannot be disabled")
        read_timeout = _parse_timeout(
            values.get("PAGSEGURO_READ_TIMEOUT"),
            "PAGSEGURO_READ_TIMEOUT",
            DEFAULT_READ_TIMEOUT,
        )

        verify_tls: Union[bool, str] = _parse_bool(
            values.get("PAGSEGURO_VERIFY_TLS") or "true", "PAGSEGURO_VERIFY_TLS"
        )
        ca_bundle = (values.get("PAGSEGURO_CA_BUNDLE") or "").strip()
        if ca_bundle:
            if verify_tls is False:
                raise ConfigError(
                    "PAGSEGURO_CA_BUNDLE cannot be combined with PAGSEGURO_VERIFY_TLS=false"
                )
            verify_tls = ca_bundle

        return cls(
            seller_email=seller_email,
            seller_token=seller_token,
            checkout_url=checkout_url.rstrip("/"),
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            verify_tls=verify_tls,
            sandbox=sandbox,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        **settings: Any,
    ) -> "CheckoutConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(_settings_to_overrides(settings))
        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.settings())


def _settings_to_overrides(settings: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in settings.items():
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown checkout setting '{key}'") from exc
        if value is None:
            continue
        overrides[env_key] = _stringify(value)
    return overrides


def load_checkout_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    **settings: Any,
) -> CheckoutConfig:
    """
    Convenience wrapper that mirrors :meth:`CheckoutConfig.from_env`.

    Keyword settings use the attribute names of :class:`CheckoutConfig`
    (plus ``ca_bundle``) and win over both the environment and ``overrides``.
    """
    return CheckoutConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        **settings,
    )
