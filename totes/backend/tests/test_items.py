from decimal import Decimal


def test_create_item_records_first_price(client, admin_headers, create_item):
    item = create_item(name="Canvas tote", price="12.50")
    assert item["item_state"] is True
    assert Decimal(item["selling_price"]) == Decimal("12.50")

    history = client.get(f"/api/historical-item-prices/{item['id']}", headers=admin_headers).json()
    assert [Decimal(h["price"]) for h in history] == [Decimal("12.50")]


def test_price_history_only_grows_on_price_change(client, admin_headers, create_item):
    item = create_item(price="10.00")
    body = {
        "name": item["name"],
        "description": "renamed description",
        "stock": item["stock"],
        "selling_price": "10.00",
        "purchase_price": "4.00",
        "item_type_id": 1,
    }
    resp = client.put(f"/api/items/{item['id']}", json=body, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["description"] == "renamed description"

    body["selling_price"] = "11.00"
    client.put(f"/api/items/{item['id']}", json=body, headers=admin_headers)

    history = client.get(f"/api/historical-item-prices/{item['id']}", headers=admin_headers).json()
    assert [Decimal(h["price"]) for h in history] == [Decimal("10.00"), Decimal("11.00")]


def test_historical_prices_missing_item_is_404(client, admin_headers):
    resp = client.get("/api/historical-item-prices/4242", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No historical prices found"


def test_create_item_unknown_type_is_400(client, admin_headers):
    body = {"name": "Ghost", "selling_price": "1.00", "item_type_id": 99}
    assert client.post("/api/items/", json=body, headers=admin_headers).status_code == 400


def test_create_item_negative_stock_is_422(client, admin_headers):
    body = {"name": "Broken", "selling_price": "1.00", "item_type_id": 1, "stock": -1}
    assert client.post("/api/items/", json=body, headers=admin_headers).status_code == 422


def test_update_state_and_get(client, admin_headers, create_item):
    item = create_item()
    resp = client.patch(f"/api/items/{item['id']}/state", json={"item_state": False}, headers=admin_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/items/{item['id']}", headers=admin_headers).json()["item_state"] is False
    assert client.get("/api/items/999", headers=admin_headers).status_code == 404


def test_check_stock(client, admin_headers, create_item):
    item = create_item(stock=3)
    ok = client.get(f"/api/items/{item['id']}/stock", params={"quantity": 3}, headers=admin_headers).json()
    assert ok == {"item_id": item["id"], "stock": 3, "requested": 3, "available": True}

    short = client.get(f"/api/items/{item['id']}/stock", params={"quantity": 4}, headers=admin_headers).json()
    assert short["available"] is False

    assert client.get("/api/items/999/stock", params={"quantity": 1}, headers=admin_headers).status_code == 404


def test_search_items(client, admin_headers, create_item):
    first = create_item(name="Leather Tote")
    create_item(name="Canvas bag")

    by_name = client.get("/api/items/search-by-name", params={"name": "tote"}, headers=admin_headers).json()
    assert [i["name"] for i in by_name] == ["Leather Tote"]

    by_id = client.get("/api/items/search-by-id", params={"id": str(first["id"])}, headers=admin_headers).json()
    assert first["id"] in [i["id"] for i in by_id]


def test_item_types_catalog(client, admin_headers):
    types = client.get("/api/item-types/", headers=admin_headers).json()
    assert [t["name"] for t in types] == ["PRODUCT", "SERVICE"]
    assert client.get("/api/item-types/2", headers=admin_headers).json()["name"] == "SERVICE"
    assert client.get("/api/item-types/9", headers=admin_headers).status_code == 404


def test_additional_expenses_crud(client, admin_headers, create_item):
    item = create_item()
    body = {"name": "Shipping", "item_id": item["id"], "expense": "2.50", "description": "courier"}
    created = client.post("/api/additional-expenses/", json=body, headers=admin_headers)
    assert created.status_code == 201
    expense_id = created.json()["id"]

    body["expense"] = "3.00"
    updated = client.put(f"/api/additional-expenses/{expense_id}", json=body, headers=admin_headers)
    assert Decimal(updated.json()["expense"]) == Decimal("3.00")

    assert len(client.get("/api/additional-expenses/", headers=admin_headers).json()) == 1

    assert client.delete(f"/api/additional-expenses/{expense_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/additional-expenses/{expense_id}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/additional-expenses/{expense_id}", headers=admin_headers).status_code == 404


def test_additional_expense_for_missing_item_is_404(client, admin_headers):
    body = {"name": "Shipping", "item_id": 999, "expense": "1.00"}
    assert client.post("/api/additional-expenses/", json=body, headers=admin_headers).status_code == 404


def test_search_wildcards_match_literally(client, admin_headers, create_item):
    create_item(name="Tote bag")
    create_item(name="Canvas")
    percent = create_item(name="50% off tote")

    def names(**params):
        resp = client.get("/api/items/search-by-name", params=params, headers=admin_headers)
        return [i["name"] for i in resp.json()]

    assert names(name="%") == [percent["name"]]
    assert names(name="t_te") == []
    assert client.get("/api/items/search-by-id", params={"id": "_"}, headers=admin_headers).json() == []
