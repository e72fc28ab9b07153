from decimal import Decimal

import pytest

from app.services.billing_service import BillingService
from app.services.errors import ConflictError


class _Rate:
    def __init__(self, value, is_percentage=True):
        self.value = Decimal(value)
        self.is_percentage = is_percentage


class _Item:
    def __init__(self, item_id, price, stock=0, name="item"):
        self.id = item_id
        self.selling_price = Decimal(price)
        self.stock = stock
        self.name = name


def _discount(client, headers, name, value, is_percentage=True):
    resp = client.post(
        "/api/discount-types/",
        json={"name": name, "value": value, "is_percentage": is_percentage},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def _tax(client, headers, name, value, is_percentage=True):
    resp = client.post(
        "/api/tax-types/",
        json={"name": name, "value": value, "is_percentage": is_percentage},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def test_compute_applies_discount_then_tax():
    result = BillingService.compute(
        [(_Item(1, "10.00"), 3), (_Item(2, "5.50"), 2)],
        [_Rate("10")],
        [_Rate("19")],
    )
    assert result.subtotal == Decimal("41.00")
    assert result.discount == Decimal("4.10")
    assert result.tax == Decimal("7.01")
    assert result.total == Decimal("43.91")


def test_compute_caps_discount_at_subtotal():
    result = BillingService.compute([(_Item(1, "5.00"), 1)], [_Rate("8", False), _Rate("50")], [])
    assert result.discount == Decimal("5.00")
    assert result.total == Decimal("0.00")


def test_compute_fixed_tax_and_half_up_rounding():
    result = BillingService.compute([(_Item(1, "0.125"), 1)], [], [_Rate("1.5", False)])
    assert result.subtotal == Decimal("0.13")
    assert result.total == Decimal("1.63")


def test_take_stock_is_all_or_nothing():
    a, b = _Item(1, "1", stock=5), _Item(2, "1", stock=1)
    with pytest.raises(ConflictError):
        BillingService.take_stock([(a, 2), (b, 2)])
    assert (a.stock, b.stock) == (5, 1)

    BillingService.take_stock([(a, 2), (b, 1)])
    assert (a.stock, b.stock) == (3, 0)


def test_subtotal_endpoint(client, admin_headers, create_item):
    tote = create_item(price="10.00")
    bag = create_item(name="Bag", price="2.25")
    body = {"items": [{"item_id": tote["id"], "amount": 2}, {"item_id": bag["id"], "amount": 4}]}
    resp = client.post("/api/billing/subtotal", json=body, headers=admin_headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["subtotal"]) == Decimal("29.00")


def test_total_endpoint(client, admin_headers, create_item):
    tote = create_item(price="100.00")
    discount_id = _discount(client, admin_headers, "Loyalty", "10")
    tax_id = _tax(client, admin_headers, "VAT", "19")
    body = {"items": [{"item_id": tote["id"], "amount": 1}], "discounts": [discount_id], "taxes": [tax_id]}
    data = client.post("/api/billing/total", json=body, headers=admin_headers).json()
    assert {k: Decimal(v) for k, v in data.items()} == {
        "subtotal": Decimal("100.00"),
        "discount": Decimal("10.00"),
        "tax": Decimal("17.10"),
        "total": Decimal("107.10"),
    }


def test_billing_unknown_references_are_404(client, admin_headers, create_item):
    tote = create_item()
    missing_item = {"items": [{"item_id": 999, "amount": 1}]}
    assert client.post("/api/billing/total", json=missing_item, headers=admin_headers).status_code == 404

    missing_tax = {"items": [{"item_id": tote["id"], "amount": 1}], "taxes": [77]}
    assert client.post("/api/billing/total", json=missing_tax, headers=admin_headers).status_code == 404


def test_billing_rejects_empty_or_zero_lines(client, admin_headers, create_item):
    tote = create_item()
    assert client.post("/api/billing/total", json={"items": []}, headers=admin_headers).status_code == 422
    zero = {"items": [{"item_id": tote["id"], "amount": 0}]}
    assert client.post("/api/billing/total", json=zero, headers=admin_headers).status_code == 422


def test_discount_and_tax_types(client, admin_headers):
    discount_id = _discount(client, admin_headers, "Promo", "5", is_percentage=False)
    assert client.get(f"/api/discount-types/{discount_id}", headers=admin_headers).json()["name"] == "Promo"
    assert len(client.get("/api/discount-types/", headers=admin_headers).json()) == 1
    assert client.get("/api/discount-types/99", headers=admin_headers).status_code == 404

    duplicate = client.post("/api/discount-types/", json={"name": "Promo", "value": "1"}, headers=admin_headers)
    assert duplicate.status_code == 409

    over = client.post("/api/tax-types/", json={"name": "Silly", "value": "120"}, headers=admin_headers)
    assert over.status_code == 422

    tax_id = _tax(client, admin_headers, "Stamp", "120", is_percentage=False)
    assert client.get(f"/api/tax-types/{tax_id}", headers=admin_headers).status_code == 200
    assert len(client.get("/api/tax-types/", headers=admin_headers).json()) == 1
