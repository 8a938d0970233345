"""
HTTP session setup for talking to PagSeguro.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

import requests

from .config import CheckoutConfig

__all__ = ["build_session", "request_timeout"]


def build_session(verify: Union[bool, str] = True) -> requests.Session:
    """
    Create a session with an explicit TLS trust policy.

    ``verify`` may be a CA bundle path to trust PagSeguro's chain without
    relying on the system store. ``False`` disables verification entirely
    and must be requested by the caller.
    """
    session = requests.Session()
    session.verify = verify
    if verify is False:
        logging.warning(
            "TLS certificate verification is disabled for PagSeguro requests"
        )
    return session


def request_timeout(config: CheckoutConfig) -> Tuple[float, Optional[float]]:
    """
    ``(connect, read)`` timeout pair for requests; a ``None`` read timeout
    leaves the body transfer unbounded.
    """
    return (config.connect_timeout, config.read_timeout)
