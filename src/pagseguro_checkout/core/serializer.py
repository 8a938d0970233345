"""
Render :class:`CheckoutRequest` objects as PagSeguro checkout XML.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable, Optional

from .models import Address, Buyer, CheckoutRequest, LineItem, Metadata, Shipping

__all__ = [
    "SerializationError",
    "XML_HEADER",
    "build_checkout_element",
    "serialize_checkout",
]

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


class SerializationError(Exception):
    """Raised when a request cannot be rendered as checkout XML."""


def _text(value: object, tag: str) -> str:
    if not isinstance(value, str):
        raise SerializationError(
            f"<{tag}> must be text, got {type(value).__name__}: {value!r}"
        )
    if _INVALID_XML_CHARS.search(value):
        raise SerializationError(f"<{tag}> contains characters not allowed in XML")
    return value


def _required(parent: ET.Element, tag: str, value: object) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = _text(value, tag)
    return child


def _optional(parent: ET.Element, tag: str, value: Optional[object]) -> None:
    if value is None or value == "":
        return
    _required(parent, tag, value)


def _append_items(parent: ET.Element, items: Iterable[LineItem]) -> None:
    items = list(items)
    if not items:
        return
    container = ET.SubElement(parent, "items")
    for item in items:
        node = ET.SubElement(container, "item")
        _required(node, "id", item.id)
        _required(node, "description", item.description)
        _required(node, "amount", item.amount)
        _required(node, "quantity", item.quantity)
        _optional(node, "shippingCost", item.shipping_cost)
        _optional(node, "weight", item.weight)


def _append_buyer(parent: ET.Element, buyer: Buyer) -> None:
    node = ET.SubElement(parent, "sender")
    _required(node, "email", buyer.email)
    _required(node, "name", buyer.name)
    if buyer.phone is not None:
        phone = ET.SubElement(node, "phone")
        _optional(phone, "areaCode", buyer.phone.area_code)
        _optional(phone, "number", buyer.phone.number)
    if buyer.documents:
        documents = ET.SubElement(node, "documents")
        for document in buyer.documents:
            entry = ET.SubElement(documents, "document")
            _required(entry, "type", document.type)
            _required(entry, "value", document.value)
    _optional(node, "bornDate", buyer.born_date)


def _append_address(parent: ET.Element, address: Address) -> None:
    node = ET.SubElement(parent, "address")
    _required(node, "country", address.country)
    _optional(node, "state", address.state)
    _optional(node, "city", address.city)
    _optional(node, "postalCode", address.postal_code)
    _optional(node, "district", address.district)
    _optional(node, "street", address.street)
    _optional(node, "number", address.number)
    _optional(node, "complement", address.complement)


def _append_shipping(parent: ET.Element, shipping: Shipping) -> None:
    node = ET.SubElement(parent, "shipping")
    _required(node, "type", shipping.type)
    _required(node, "cost", shipping.cost)
    if shipping.address is not None:
        _append_address(node, shipping.address)


def _append_metadata(parent: ET.Element, tag: str, entry: Metadata) -> None:
    node = ET.SubElement(parent, tag)
    _required(node, "key", entry.key)
    _optional(node, "value", entry.value)
    for child in entry.group:
        _append_metadata(node, "group", child)


def build_checkout_element(request: CheckoutRequest) -> ET.Element:
    root = ET.Element("checkout")
    _required(root, "email", request.email)
    _required(root, "token", request.token)
    _required(root, "currency", request.currency)
    _append_items(root, request.items)
    _required(root, "reference", request.reference_id)
    if request.buyer is not None:
        _append_buyer(root, request.buyer)
    if request.shipping is not None:
        _append_shipping(root, request.shipping)
    _optional(root, "extraAmount", request.extra_amount)
    _optional(root, "redirectURL", request.redirect_url)
    _optional(root, "notificationURL", request.notification_url)
    _optional(root, "maxUses", request.max_uses)
    _optional(root, "maxAge", request.max_age)
    for entry in request.metadata:
        _append_metadata(root, "metadata", entry)
    return root


def serialize_checkout(request: CheckoutRequest) -> bytes:
    """
    Return the request body: :data:`XML_HEADER` followed by the element tree.

    ElementTree writes its own declaration only when asked to, so the tree is
    rendered without one and the fixed header is prepended instead.
    """
    try:
        root = build_checkout_element(request)
    except (AttributeError, TypeError) as exc:
        raise SerializationError(f"Malformed checkout request: {exc}") from exc
    body = ET.tostring(root, encoding="unicode")
    return (XML_HEADER + body).encode("utf-8")
