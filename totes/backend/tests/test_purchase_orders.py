from decimal import Decimal

from app.services.purchase_order_service import (
    ORDER_STATE_CANCELLED,
    ORDER_STATE_PAID,
    ORDER_STATE_PENDING,
)


def _create_order(client, headers, items, **extra):
    body = {"items": items, **extra}
    resp = client.post("/api/purchase-orders/", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def _set_state(client, headers, order_id, state_id):
    return client.patch(
        f"/api/purchase-orders/{order_id}/state",
        json={"order_state_id": state_id},
        headers=headers,
    )


def test_new_order_is_pending_with_totals(client, admin_headers, create_item, customer):
    tote = create_item(price="15.00", stock=5)
    order = _create_order(
        client, admin_headers, [{"item_id": tote["id"], "amount": 2}], customer_id=customer["id"]
    )
    assert order["order_state_id"] == ORDER_STATE_PENDING
    assert Decimal(order["subtotal"]) == Decimal("30.00")
    assert Decimal(order["total"]) == Decimal("30.00")
    assert order["items"] == [{"item_id": tote["id"], "amount": 2}]
    assert order["customer_id"] == customer["id"]


def test_pay_order_issues_invoice_and_takes_stock(client, admin_headers, create_item, customer):
    tote = create_item(price="20.00", stock=5)
    order = _create_order(
        client, admin_headers, [{"item_id": tote["id"], "amount": 3}], customer_id=customer["id"]
    )

    resp = _set_state(client, admin_headers, order["id"], ORDER_STATE_PAID)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["purchase_order"]["order_state_id"] == ORDER_STATE_PAID
    invoice = data["invoice"]
    assert invoice["purchase_order_id"] == order["id"]
    assert invoice["customer_id"] == customer["id"]
    assert Decimal(invoice["total"]) == Decimal("60.00")
    assert [(line["item_id"], line["amount"]) for line in invoice["items"]] == [(tote["id"], 3)]

    stock = client.get(f"/api/items/{tote['id']}", headers=admin_headers).json()["stock"]
    assert stock == 2


def test_paid_and_cancelled_are_terminal(client, admin_headers, create_item, customer):
    tote = create_item(stock=10)
    paid = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}], customer_id=customer["id"])
    assert _set_state(client, admin_headers, paid["id"], ORDER_STATE_PAID).status_code == 200
    assert _set_state(client, admin_headers, paid["id"], ORDER_STATE_CANCELLED).status_code == 409
    assert _set_state(client, admin_headers, paid["id"], ORDER_STATE_PAID).status_code == 409

    cancelled = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}])
    resp = _set_state(client, admin_headers, cancelled["id"], ORDER_STATE_CANCELLED)
    assert resp.status_code == 200
    assert resp.json()["invoice"] is None
    assert _set_state(client, admin_headers, cancelled["id"], ORDER_STATE_PAID).status_code == 409
    assert _set_state(client, admin_headers, cancelled["id"], ORDER_STATE_PENDING).status_code == 409


def test_unknown_state_is_404(client, admin_headers, create_item):
    tote = create_item()
    order = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}])
    assert _set_state(client, admin_headers, order["id"], 42).status_code == 404
    assert _set_state(client, admin_headers, 999, ORDER_STATE_PAID).status_code == 404


def test_pay_without_customer_is_409(client, admin_headers, create_item):
    tote = create_item(stock=10)
    order = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}])
    assert _set_state(client, admin_headers, order["id"], ORDER_STATE_PAID).status_code == 409
    fetched = client.get(f"/api/purchase-orders/{order['id']}", headers=admin_headers).json()
    assert fetched["order_state_id"] == ORDER_STATE_PENDING


def test_insufficient_stock_leaves_everything_unchanged(client, admin_headers, create_item, customer):
    plenty = create_item(name="Plenty", stock=10)
    scarce = create_item(name="Scarce", stock=1)
    order = _create_order(
        client,
        admin_headers,
        [{"item_id": plenty["id"], "amount": 2}, {"item_id": scarce["id"], "amount": 2}],
        customer_id=customer["id"],
    )
    resp = _set_state(client, admin_headers, order["id"], ORDER_STATE_PAID)
    assert resp.status_code == 409
    assert "Insufficient stock" in resp.json()["detail"]

    assert client.get(f"/api/items/{plenty['id']}", headers=admin_headers).json()["stock"] == 10
    assert client.get(f"/api/items/{scarce['id']}", headers=admin_headers).json()["stock"] == 1
    fetched = client.get(f"/api/purchase-orders/{order['id']}", headers=admin_headers).json()
    assert fetched["order_state_id"] == ORDER_STATE_PENDING
    assert client.get("/api/invoices/", headers=admin_headers).json() == []


def test_update_only_while_pending(client, admin_headers, create_item, customer):
    tote = create_item(price="5.00", stock=10)
    order = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}])

    update = {"items": [{"item_id": tote["id"], "amount": 4}], "customer_id": customer["id"]}
    resp = client.put(f"/api/purchase-orders/{order['id']}", json=update, headers=admin_headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["subtotal"]) == Decimal("20.00")
    assert resp.json()["customer_id"] == customer["id"]

    _set_state(client, admin_headers, order["id"], ORDER_STATE_CANCELLED)
    resp = client.put(f"/api/purchase-orders/{order['id']}", json=update, headers=admin_headers)
    assert resp.status_code == 409


def test_create_with_unknown_references(client, admin_headers, create_item):
    tote = create_item()
    line = [{"item_id": tote["id"], "amount": 1}]
    for extra in ({"customer_id": 999}, {"seller_id": 999}, {"responsible_id": 999}):
        resp = client.post("/api/purchase-orders/", json={"items": line, **extra}, headers=admin_headers)
        assert resp.status_code == 404
    resp = client.post("/api/purchase-orders/", json={"items": [{"item_id": 999, "amount": 1}]}, headers=admin_headers)
    assert resp.status_code == 404


def test_search_and_listings(client, admin_headers, create_item, customer):
    tote = create_item(stock=10)
    order = _create_order(client, admin_headers, [{"item_id": tote["id"], "amount": 1}], customer_id=customer["id"])

    assert client.get("/api/purchase-orders/search-by-id", params={"id": ""}, headers=admin_headers).status_code == 400
    assert client.get("/api/purchase-orders/search-by-id", params={"id": "9"}, headers=admin_headers).status_code == 404
    found = client.get("/api/purchase-orders/search-by-id", params={"id": str(order["id"])}, headers=admin_headers)
    assert [o["id"] for o in found.json()] == [order["id"]]

    by_customer = client.get(f"/api/purchase-orders/customer/{customer['id']}", headers=admin_headers)
    assert [o["id"] for o in by_customer.json()] == [order["id"]]
    assert client.get("/api/purchase-orders/customer/999", headers=admin_headers).status_code == 404

    by_state = client.get(f"/api/purchase-orders/state/{ORDER_STATE_PENDING}", headers=admin_headers)
    assert len(by_state.json()) == 1
    assert client.get(f"/api/purchase-orders/state/{ORDER_STATE_PAID}", headers=admin_headers).status_code == 404

    assert client.get("/api/purchase-orders/seller/1", headers=admin_headers).json() == []
    assert len(client.get("/api/purchase-orders/", headers=admin_headers).json()) == 1


def test_order_state_types(client, admin_headers):
    states = client.get("/api/order-state-types/", headers=admin_headers).json()
    assert [s["description"] for s in states] == ["PENDING", "PAID", "CANCELLED"]
    assert client.get("/api/order-state-types/2", headers=admin_headers).json()["description"] == "PAID"
    assert client.get("/api/order-state-types/7", headers=admin_headers).status_code == 404
