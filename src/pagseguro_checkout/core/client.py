"""
HTTP client for the PagSeguro checkout endpoint.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import CheckoutConfig, ConfigError
from .decoding import declared_charset, decode_response
from .models import CheckoutRequest
from .results import CheckoutResult
from .serializer import SerializationError, serialize_checkout
from .transport import build_session, request_timeout

__all__ = ["CheckoutClient", "submit_checkout"]

REQUEST_CHARSET = "UTF-8"


class CheckoutClient:
    """
    Submits checkout requests and turns the answers into
    :class:`CheckoutResult` objects.

    ``submit`` never raises for network, serialization or decoding problems;
    they are logged and reported as a failed result.
    """

    def __init__(
        self,
        config: Optional[CheckoutConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or CheckoutConfig()
        self._owns_session = session is None
        self.session = session or build_session(self.config.verify_tls)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CheckoutClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def new_request(
        self,
        reference_id: str,
        redirect_url: str = "",
        notification_url: str = "",
    ) -> CheckoutRequest:
        """
        Start a request signed with the configured seller credentials.
        """
        if not self.config.seller_email or not self.config.seller_token:
            raise ConfigError("Seller email and token must be configured")
        return CheckoutRequest.create(
            self.config.seller_token,
            self.config.seller_email,
            reference_id,
            redirect_url,
            notification_url,
        )

    def submit(self, request: CheckoutRequest) -> CheckoutResult:
        try:
            body = serialize_checkout(request)
        except SerializationError as exc:
            logging.error(
                "Could not serialize checkout %s: %s",
                getattr(request, "reference_id", None),
                exc,
            )
            return CheckoutResult.failed()

        # PagSeguro authenticates through the query string, not the body
        params = {
            "email": request.email,
            "token": request.token,
            "charset": REQUEST_CHARSET,
        }
        logging.info(
            "Submitting checkout %s to %s", request.reference_id, self.config.checkout_url
        )
        try:
            response = self.session.post(
                self.config.checkout_url,
                params=params,
                data=body,
                headers={"Content-Type": "application/xml"},
                timeout=request_timeout(self.config),
            )
            raw = response.content
        except requests.RequestException as exc:
            logging.error("Checkout request %s failed: %s", request.reference_id, exc)
            return CheckoutResult.failed()

        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug(
                "PagSeguro answered %s: %s",
                response.status_code,
                raw.decode("utf-8", errors="replace"),
            )
        return decode_response(raw, declared_charset(response.headers))


def submit_checkout(
    request: CheckoutRequest,
    *,
    config: Optional[CheckoutConfig] = None,
    session: Optional[requests.Session] = None,
) -> CheckoutResult:
    """
    One-shot helper around :meth:`CheckoutClient.submit`.
    """
    with CheckoutClient(config, session=session) as client:
        return client.submit(request)
