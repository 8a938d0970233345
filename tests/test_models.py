"""Unit tests for the checkout request model."""
from datetime import date

from pagseguro_checkout import (
    SHIPPING_OTHER,
    SHIPPING_SEDEX,
    Address,
    CheckoutRequest,
    ShippingType,
)


def _request() -> CheckoutRequest:
    return CheckoutRequest.create(
        "TOKEN123",
        "vendas@example.com",
        "REF-1",
        "https://loja.example.com/obrigado",
        "https://loja.example.com/notificacoes",
    )


def test_create_applies_defaults():
    request = _request()
    assert request.email == "vendas@example.com"
    assert request.token == "TOKEN123"
    assert request.reference_id == "REF-1"
    assert request.currency == "BRL"
    assert request.max_uses == "10"
    assert request.max_age == "7200"
    assert request.items == []
    assert request.buyer is None
    assert request.shipping is None
    assert request.extra_amount == ""


def test_defaults_can_be_overridden_by_assignment():
    request = _request()
    request.max_uses = "1"
    request.max_age = "30"
    assert (request.max_uses, request.max_age) == ("1", "30")


def test_add_item_formats_numbers_and_chains():
    request = _request()
    item = request.add_item("0001", "Notebook", 2499.9, 2)
    assert item.amount == "2499.90"
    assert item.quantity == "2"

    returned = item.set_weight(1800).set_shipping_cost(12).set_quantity(3).set_amount(10)
    assert returned is item
    assert item.weight == "1800"
    assert item.shipping_cost == "12.00"
    assert item.quantity == "3"
    assert item.amount == "10.00"
    assert request.items == [item]


def test_items_keep_insertion_order():
    request = _request()
    request.add_item("A", "First", 1, 1)
    request.add_item("B", "Second", 2, 1)
    assert [item.id for item in request.items] == ["A", "B"]


def test_set_cpf_twice_overwrites_single_document():
    buyer = _request().set_buyer("Maria Silva", "maria@example.com")
    buyer.set_cpf("11111111111").set_cpf("22222222222")
    cpfs = [document for document in buyer.documents if document.type == "CPF"]
    assert len(cpfs) == 1
    assert cpfs[0].value == "22222222222"


def test_set_document_keeps_other_types():
    buyer = _request().set_buyer("Maria Silva", "maria@example.com")
    buyer.set_document("RG", "123").set_cpf("111").set_document("RG", "456")
    assert [(d.type, d.value) for d in buyer.documents] == [("RG", "456"), ("CPF", "111")]


def test_set_buyer_replaces_previous_buyer():
    request = _request()
    request.set_buyer("First", "first@example.com").set_cpf("111")
    buyer = request.set_buyer("Second", "second@example.com")
    assert request.buyer is buyer
    assert buyer.documents == []


def test_buyer_phone_and_born_date():
    buyer = _request().set_buyer("Maria Silva", "maria@example.com")
    buyer.set_phone("11", "999998888").set_born_date(date(1990, 3, 7))
    assert buyer.phone.area_code == "11"
    assert buyer.phone.number == "999998888"
    assert buyer.born_date == "07/03/1990"

    buyer.set_born_date("01/12/1985")
    assert buyer.born_date == "01/12/1985"


def test_set_shipping_formats_type_and_cost():
    shipping = _request().set_shipping(SHIPPING_SEDEX, 35)
    assert shipping.type == "2"
    assert shipping.cost == "35.00"
    assert shipping.address is None
    assert int(ShippingType.PAC) == 1
    assert _request().set_shipping(SHIPPING_OTHER, 0).type == "3"


def test_state_city_creates_missing_address():
    shipping = _request().set_shipping(SHIPPING_SEDEX, 0)
    shipping.set_address_state_city("SP", "Campinas")
    assert shipping.address == Address(state="SP", city="Campinas")
    assert shipping.address.country == "BRA"
    assert shipping.address.street == ""


def test_country_creates_missing_address():
    shipping = _request().set_shipping(SHIPPING_SEDEX, 0)
    returned = shipping.set_address_country("PRT")
    assert returned is shipping
    assert shipping.address == Address(country="PRT")


def test_partial_updates_keep_existing_address():
    shipping = _request().set_shipping(SHIPPING_SEDEX, 0)
    shipping.set_address("SP", "Campinas", "13010000", "Centro", "Rua A", "10", "apto 2")
    shipping.set_address_state_city("RJ", "Niteroi")
    assert shipping.address.street == "Rua A"
    assert shipping.address.state == "RJ"
    assert shipping.address.city == "Niteroi"


def test_set_address_resets_country():
    shipping = _request().set_shipping(SHIPPING_SEDEX, 0)
    shipping.set_address_country("PRT")
    shipping.set_address("SP", "Campinas", "13010000", "Centro", "Rua A", "10", "")
    assert shipping.address.country == "BRA"


def test_extra_amount_and_metadata():
    request = _request()
    assert request.set_extra_amount(-5) is request
    assert request.extra_amount == "-5.00"

    passenger = request.add_metadata("PASSENGER")
    passenger.add_group_entry("PASSENGER_CPF", "11111111111")
    passenger.add_group_entry("PASSENGER_NAME", "Joao")
    assert [entry.key for entry in request.metadata] == ["PASSENGER"]
    assert [(m.key, m.value) for m in passenger.group] == [
        ("PASSENGER_CPF", "11111111111"),
        ("PASSENGER_NAME", "Joao"),
    ]
