"""
Mutable request model for the PagSeguro checkout API.

Every numeric field is kept as the text that goes on the wire (see
:mod:`pagseguro_checkout.core.formatting`). Mutators return the object they
touched, so requests can be assembled fluently::

    request = CheckoutRequest.create(token, email, "ORDER-1")
    request.add_item("0001", "Notebook", 2499.9, 1).set_weight(1800)
    request.set_buyer("Maria Silva", "maria@example.com").set_cpf("12345678909")
    request.set_shipping(SHIPPING_SEDEX, 35.0).set_address_state_city("SP", "Campinas")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import List, Optional, Union

from .formatting import Number, format_amount, format_quantity

__all__ = [
    "Address",
    "Buyer",
    "BuyerDocument",
    "CheckoutRequest",
    "DEFAULT_COUNTRY",
    "DEFAULT_CURRENCY",
    "DEFAULT_MAX_AGE",
    "DEFAULT_MAX_USES",
    "DOCUMENT_CPF",
    "LineItem",
    "Metadata",
    "Phone",
    "SHIPPING_OTHER",
    "SHIPPING_PAC",
    "SHIPPING_SEDEX",
    "Shipping",
    "ShippingType",
]

DEFAULT_CURRENCY = "BRL"
DEFAULT_COUNTRY = "BRA"
DEFAULT_MAX_USES = "10"
DEFAULT_MAX_AGE = "7200"
DOCUMENT_CPF = "CPF"


class ShippingType(IntEnum):
    PAC = 1
    SEDEX = 2
    OTHER = 3


SHIPPING_PAC = ShippingType.PAC
SHIPPING_SEDEX = ShippingType.SEDEX
SHIPPING_OTHER = ShippingType.OTHER


@dataclass
class LineItem:
    id: str
    description: str
    amount: str
    quantity: str
    shipping_cost: Optional[str] = None
    weight: Optional[str] = None

    def set_amount(self, amount: Number) -> "LineItem":
        self.amount = format_amount(amount)
        return self

    def set_quantity(self, quantity: int) -> "LineItem":
        self.quantity = format_quantity(quantity)
        return self

    def set_shipping_cost(self, cost: Number) -> "LineItem":
        self.shipping_cost = format_amount(cost)
        return self

    def set_weight(self, grams: int) -> "LineItem":
        self.weight = format_quantity(grams)
        return self


@dataclass
class Phone:
    area_code: Optional[str] = None
    number: Optional[str] = None


@dataclass
class BuyerDocument:
    type: str
    value: str = ""


@dataclass
class Buyer:
    name: str
    email: str
    phone: Optional[Phone] = None
    documents: List[BuyerDocument] = field(default_factory=list)
    born_date: Optional[str] = None  # dd/mm/yyyy

    def set_phone(self, area_code: str, number: str) -> "Buyer":
        self.phone = Phone(area_code=area_code, number=number)
        return self

    def set_document(self, doc_type: str, value: str) -> "Buyer":
        """
        Set the document of ``doc_type``, updating an existing entry in place.
        """
        for document in self.documents:
            if document.type == doc_type:
                document.value = value
                return self
        self.documents.append(BuyerDocument(type=doc_type, value=value))
        return self

    def set_cpf(self, cpf: str) -> "Buyer":
        return self.set_document(DOCUMENT_CPF, cpf)

    def set_born_date(self, value: Union[date, str]) -> "Buyer":
        if isinstance(value, date):
            value = value.strftime("%d/%m/%Y")
        self.born_date = value
        return self


@dataclass
class Address:
    """
    Shipping address.

    PagSeguro documents length limits (city 2-60 chars, district 60, street
    80, number 20, complement 40, postal code 8 digits) and rejects requests
    that break them; nothing is checked locally.
    """

    country: str = DEFAULT_COUNTRY
    state: str = ""
    city: str = ""
    postal_code: str = ""
    district: str = ""
    street: str = ""
    number: str = ""
    complement: str = ""


@dataclass
class Shipping:
    type: str
    cost: str
    address: Optional[Address] = None

    def set_address(
        self,
        state: str = "",
        city: str = "",
        postal_code: str = "",
        district: str = "",
        street: str = "",
        number: str = "",
        complement: str = "",
    ) -> "Shipping":
        self.address = Address(
            state=state,
            city=city,
            postal_code=postal_code,
            district=district,
            street=street,
            number=number,
            complement=complement,
        )
        return self

    def _ensure_address(self) -> Address:
        if self.address is None:
            self.address = Address()
        return self.address

    def set_address_state_city(self, state: str, city: str) -> "Shipping":
        address = self._ensure_address()
        address.state = state
        address.city = city
        return self

    def set_address_country(self, country: str) -> "Shipping":
        self._ensure_address().country = country
        return self


@dataclass
class Metadata:
    key: str
    value: str = ""
    group: List["Metadata"] = field(default_factory=list)

    def add_group_entry(self, key: str, value: str = "") -> "Metadata":
        entry = Metadata(key=key, value=value)
        self.group.append(entry)
        return entry


@dataclass
class CheckoutRequest:
    email: str
    token: str
    currency: str = DEFAULT_CURRENCY
    items: List[LineItem] = field(default_factory=list)
    reference_id: str = ""
    buyer: Optional[Buyer] = None
    shipping: Optional[Shipping] = None
    extra_amount: str = ""  # negative for discounts, positive for taxes
    redirect_url: str = ""
    notification_url: str = ""
    max_uses: str = DEFAULT_MAX_USES  # 0-999 attempts per reference
    max_age: str = DEFAULT_MAX_AGE  # seconds the checkout code stays valid
    metadata: List[Metadata] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        seller_token: str,
        seller_email: str,
        reference_id: str,
        redirect_url: str = "",
        notification_url: str = "",
    ) -> "CheckoutRequest":
        return cls(
            email=seller_email,
            token=seller_token,
            reference_id=reference_id,
            redirect_url=redirect_url,
            notification_url=notification_url,
        )

    def add_item(
        self,
        id: str,
        description: str,
        amount: Number,
        quantity: int,
    ) -> LineItem:
        item = LineItem(
            id=id,
            description=description,
            amount=format_amount(amount),
            quantity=format_quantity(quantity),
        )
        self.items.append(item)
        return item

    def set_buyer(self, name: str, email: str) -> Buyer:
        self.buyer = Buyer(name=name, email=email)
        return self.buyer

    def set_shipping(self, shipping_type: int, cost: Number) -> Shipping:
        self.shipping = Shipping(
            type=format_quantity(int(shipping_type)),
            cost=format_amount(cost),
        )
        return self.shipping

    def set_extra_amount(self, amount: Number) -> "CheckoutRequest":
        self.extra_amount = format_amount(amount)
        return self

    def add_metadata(self, key: str, value: str = "") -> Metadata:
        entry = Metadata(key=key, value=value)
        self.metadata.append(entry)
        return entry
