"""
Outcome types returned by checkout submissions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

__all__ = ["CheckoutError", "CheckoutResponse", "CheckoutResult"]


@dataclass(frozen=True)
class CheckoutResponse:
    code: str
    data: str


@dataclass(frozen=True)
class CheckoutError:
    code: int
    message: str


@dataclass(frozen=True)
class CheckoutResult:
    """
    Either a checkout code, a list of remote errors, or neither.

    ``checkout`` and ``errors`` are never populated together. Both are empty
    when the request never reached PagSeguro or its answer could not be
    understood; ``raw`` then holds whatever body was received, if any.
    """

    success: bool
    checkout: Optional[CheckoutResponse] = None
    errors: Tuple[CheckoutError, ...] = ()
    raw: Optional[bytes] = None

    @classmethod
    def succeeded(
        cls, response: CheckoutResponse, raw: Optional[bytes] = None
    ) -> "CheckoutResult":
        return cls(success=True, checkout=response, raw=raw)

    @classmethod
    def rejected(
        cls, errors: Sequence[CheckoutError], raw: Optional[bytes] = None
    ) -> "CheckoutResult":
        if not errors:
            raise ValueError("A rejected result needs at least one error")
        return cls(success=False, errors=tuple(errors), raw=raw)

    @classmethod
    def failed(cls, raw: Optional[bytes] = None) -> "CheckoutResult":
        return cls(success=False, raw=raw)
