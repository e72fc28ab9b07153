from datetime import datetime, timedelta, timezone
from decimal import Decimal


def _invoice(client, headers, customer_id, items, **extra):
    return client.post(
        "/api/invoices/",
        json={"customer_id": customer_id, "items": items, **extra},
        headers=headers,
    )


def _today():
    return datetime.now(timezone.utc).date()


def test_direct_invoice_freezes_prices_and_takes_stock(client, admin_headers, create_item, customer):
    tote = create_item(price="12.00", stock=4)
    resp = _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 2}])
    assert resp.status_code == 201, resp.text
    invoice = resp.json()
    assert invoice["purchase_order_id"] is None
    assert invoice["enterprise_data"]
    assert Decimal(invoice["total"]) == Decimal("24.00")
    assert Decimal(invoice["items"][0]["unit_price"]) == Decimal("12.00")
    assert client.get(f"/api/items/{tote['id']}", headers=admin_headers).json()["stock"] == 2

    body = {
        "name": tote["name"],
        "stock": 2,
        "selling_price": "99.00",
        "item_type_id": 1,
    }
    client.put(f"/api/items/{tote['id']}", json=body, headers=admin_headers)
    fetched = client.get(f"/api/invoices/{invoice['id']}", headers=admin_headers).json()
    assert Decimal(fetched["items"][0]["unit_price"]) == Decimal("12.00")


def test_invoice_rejects_short_stock_and_unknown_customer(client, admin_headers, create_item, customer):
    tote = create_item(stock=1)
    short = _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 2}])
    assert short.status_code == 409
    assert client.get(f"/api/items/{tote['id']}", headers=admin_headers).json()["stock"] == 1

    ghost = _invoice(client, admin_headers, 999, [{"item_id": tote["id"], "amount": 1}])
    assert ghost.status_code == 404
    assert client.get("/api/invoices/", headers=admin_headers).json() == []


def test_invoice_searches(client, admin_headers, create_item, customer):
    tote = create_item()
    invoice = _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 1}]).json()

    found = client.get("/api/invoices/search-by-customer", params={"customer_id": "1032"}, headers=admin_headers)
    assert [i["id"] for i in found.json()] == [invoice["id"]]
    missing = client.get("/api/invoices/search-by-customer", params={"customer_id": "555"}, headers=admin_headers)
    assert missing.json() == []

    by_id = client.get("/api/invoices/search-by-id", params={"id": str(invoice["id"])}, headers=admin_headers)
    assert invoice["id"] in [i["id"] for i in by_id.json()]
    assert client.get("/api/invoices/999", headers=admin_headers).status_code == 404


def test_invoice_pdf(client, admin_headers, create_item, customer):
    tote = create_item(name="Tote <deluxe>")
    discount = client.post(
        "/api/discount-types/", json={"name": "Friends & family", "value": "10"}, headers=admin_headers
    ).json()
    invoice = _invoice(
        client,
        admin_headers,
        customer["id"],
        [{"item_id": tote["id"], "amount": 1}],
        discounts=[discount["id"]],
    ).json()

    resp = client.get(f"/api/invoices/{invoice['id']}/pdf", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")
    assert client.get("/api/invoices/999/pdf", headers=admin_headers).status_code == 404


def test_external_sale(client, admin_headers, create_item):
    tote = create_item(price="8.00", stock=5)
    resp = client.post("/api/external-sales/", json={"item_id": tote["id"], "amount": 2}, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    sale = resp.json()
    assert sale["user_email"] == "admin@example.com"
    assert Decimal(sale["unit_price"]) == Decimal("8.00")
    assert Decimal(sale["total"]) == Decimal("16.00")
    assert client.get(f"/api/items/{tote['id']}", headers=admin_headers).json()["stock"] == 3

    priced = client.post(
        "/api/external-sales/",
        json={"item_id": tote["id"], "amount": 1, "unit_price": "6.50", "notes": "fair stand"},
        headers=admin_headers,
    ).json()
    assert Decimal(priced["total"]) == Decimal("6.50")

    assert client.get(f"/api/external-sales/{sale['id']}", headers=admin_headers).json()["id"] == sale["id"]
    assert len(client.get("/api/external-sales/", headers=admin_headers).json()) == 2
    assert client.get("/api/external-sales/999", headers=admin_headers).status_code == 404


def test_external_sale_errors(client, admin_headers, create_item):
    tote = create_item(stock=1)
    short = client.post("/api/external-sales/", json={"item_id": tote["id"], "amount": 3}, headers=admin_headers)
    assert short.status_code == 409
    ghost = client.post("/api/external-sales/", json={"item_id": 999, "amount": 1}, headers=admin_headers)
    assert ghost.status_code == 404
    zero = client.post("/api/external-sales/", json={"item_id": tote["id"], "amount": 0}, headers=admin_headers)
    assert zero.status_code == 422


def test_sales_report(client, admin_headers, create_item, customer):
    tote = create_item(name="Tote", price="10.00", stock=20)
    bag = create_item(name="Bag", price="3.00", stock=20)
    _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 2}])
    _invoice(client, admin_headers, customer["id"], [{"item_id": bag["id"], "amount": 1}])
    client.post("/api/external-sales/", json={"item_id": bag["id"], "amount": 4}, headers=admin_headers)

    today = _today()
    params = {"start_date": str(today - timedelta(days=1)), "end_date": str(today + timedelta(days=1))}
    report = client.get("/api/reports/sales", params=params, headers=admin_headers).json()
    assert report["invoice_count"] == 2
    assert Decimal(report["invoice_total"]) == Decimal("23.00")
    assert report["external_sale_count"] == 1
    assert Decimal(report["external_sale_total"]) == Decimal("12.00")
    assert Decimal(report["grand_total"]) == Decimal("35.00")
    assert [(t["name"], t["amount"]) for t in report["top_items"]] == [("Bag", 5), ("Tote", 2)]


def test_sales_report_window_and_validation(client, admin_headers, create_item, customer):
    tote = create_item()
    _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 1}])

    past = _today() - timedelta(days=30)
    params = {"start_date": str(past), "end_date": str(past + timedelta(days=1))}
    report = client.get("/api/reports/sales", params=params, headers=admin_headers).json()
    assert report["invoice_count"] == 0
    assert Decimal(report["grand_total"]) == Decimal("0")
    assert report["top_items"] == []

    backwards = {"start_date": str(_today()), "end_date": str(past)}
    assert client.get("/api/reports/sales", params=backwards, headers=admin_headers).status_code == 400


def test_invoice_customer_search_wildcards_match_literally(client, admin_headers, create_item, customer):
    tote = create_item()
    _invoice(client, admin_headers, customer["id"], [{"item_id": tote["id"], "amount": 1}])
    for pattern in ("%", "_032"):
        resp = client.get("/api/invoices/search-by-customer", params={"customer_id": pattern}, headers=admin_headers)
        assert resp.json() == []
