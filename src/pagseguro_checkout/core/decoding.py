"""
Interpretation of PagSeguro checkout responses.

PagSeguro answers successes and business errors the same way at the HTTP
level, so the body itself is the only discriminator: a document carrying
``errors/error`` entries is a rejection, a ``checkout`` document with a
``code`` is a success, anything else is a failure.
"""

from __future__ import annotations

import codecs
import logging
import xml.etree.ElementTree as ET
from typing import List, Mapping, Optional

from requests.utils import get_encoding_from_headers

from .results import CheckoutError, CheckoutResponse, CheckoutResult

__all__ = ["declared_charset", "decode_response", "parse_document"]

_BOMS = (codecs.BOM_UTF8, codecs.BOM_UTF16_BE, codecs.BOM_UTF16_LE)


class _ShapeMismatch(Exception):
    pass


def declared_charset(headers: Mapping[str, str]) -> Optional[str]:
    """
    Return the ``charset`` parameter of the Content-Type header, if present.

    requests falls back to ISO-8859-1 for every ``text/*`` type; that default
    is ignored here because XML carries its own encoding rules.
    """
    content_type = headers.get("content-type") or ""
    if "charset" not in content_type.lower():
        return None
    return get_encoding_from_headers(headers)


def _has_declaration(body: bytes) -> bool:
    return body.lstrip().startswith(b"<?xml") or body.startswith(_BOMS)


def parse_document(body: bytes, charset: Optional[str] = None) -> ET.Element:
    """
    Parse ``body`` into an element, transcoding to text along the way.

    A declared XML encoding wins (expat decodes any codec Python knows);
    undeclared bodies are decoded with ``charset`` when one is given.
    """
    if _has_declaration(body) or not charset:
        return ET.fromstring(body)
    return ET.fromstring(body.decode(charset))


def _child_text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None:
        return None
    return (child.text or "").strip()


def _read_errors(root: ET.Element) -> List[CheckoutError]:
    if root.tag == "errors":
        entries = root.findall("error")
    else:
        entries = root.findall("errors/error")

    errors = []
    for entry in entries:
        raw_code = _child_text(entry, "code")
        try:
            code = int(raw_code or "")
        except ValueError as exc:
            raise _ShapeMismatch(f"Error code is not an integer: {raw_code!r}") from exc
        errors.append(CheckoutError(code=code, message=_child_text(entry, "message") or ""))
    return errors


def _read_checkout(root: ET.Element) -> CheckoutResponse:
    if root.tag != "checkout":
        raise _ShapeMismatch(f"Unexpected root element <{root.tag}>")
    code = _child_text(root, "code")
    if code is None:
        raise _ShapeMismatch("Checkout response has no <code>")
    return CheckoutResponse(code=code, data=_child_text(root, "data") or "")


def decode_response(body: bytes, charset: Optional[str] = None) -> CheckoutResult:
    try:
        root = parse_document(body, charset)
    except (ET.ParseError, LookupError, UnicodeDecodeError, ValueError) as exc:
        logging.error("Could not parse checkout response: %s", exc)
        return CheckoutResult.failed(raw=body)

    try:
        errors = _read_errors(root)
    except _ShapeMismatch as exc:
        logging.debug("Response is not an error list: %s", exc)
        errors = []

    if errors:
        logging.info(
            "PagSeguro rejected checkout: %s",
            "; ".join(f"{error.code} {error.message}" for error in errors),
        )
        return CheckoutResult.rejected(errors, raw=body)

    try:
        response = _read_checkout(root)
    except _ShapeMismatch as exc:
        logging.error("Could not decode checkout response: %s", exc)
        return CheckoutResult.failed(raw=body)

    logging.info("PagSeguro issued checkout code %s", response.code)
    return CheckoutResult.succeeded(response, raw=body)
