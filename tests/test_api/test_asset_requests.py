"""API tests for /asset_requests and the approval workflow."""


def _create_asset(client, name="Laptop", quantity=10, type="electronics"):
    res = client.post("/assets", json={"name": name, "quantity": quantity, "type": type})
    return res.json()["insertedId"]


def _create_request(client, asset_id, quantity=1, **extra):
    res = client.post("/asset_requests", json={"assetId": asset_id, "quantity": quantity, **extra})
    assert res.status_code == 201
    return res.json()["insertedId"]


def _get_request(client, request_id):
    return next(r for r in client.get("/asset_requests").json() if r["_id"] == request_id)


def test_create_request_defaults(client):
    asset_id = _create_asset(client)
    request_id = _create_request(client, asset_id, quantity=3)

    req = _get_request(client, request_id)
    assert req["status"] == "pending"
    assert req["assetId"] == asset_id
    assert req["assetName"] == "laptop"
    assert req["quantity"] == 3
    assert req["reason"] == ""
    assert req["userName"] == "Anonymous"
    assert req["email"] == "unknown"
    assert req["createdAt"]


def test_create_request_with_requester(client):
    asset_id = _create_asset(client)
    request_id = _create_request(
        client, str(asset_id), quantity=1, reason="New hire", userName="Nadia", email="nadia@example.com"
    )
    req = _get_request(client, request_id)
    assert req["reason"] == "New hire"
    assert req["userName"] == "Nadia"
    assert req["email"] == "nadia@example.com"


def test_create_request_unknown_asset(client):
    res = client.post("/asset_requests", json={"assetId": 999, "quantity": 1})
    assert res.status_code == 404
    assert res.json() == {"message": "Asset not found"}


def test_create_request_invalid_asset_id(client):
    res = client.post("/asset_requests", json={"assetId": "xyz", "quantity": 1})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid asset ID"}


def test_create_request_requires_positive_quantity(client):
    asset_id = _create_asset(client)
    res = client.post("/asset_requests", json={"assetId": asset_id, "quantity": 0})
    assert res.status_code == 400


def test_list_requests_newest_first(client):
    asset_id = _create_asset(client)
    ids = [_create_request(client, asset_id) for _ in range(3)]
    res = client.get("/asset_requests")
    assert res.status_code == 200
    assert [r["_id"] for r in res.json()] == list(reversed(ids))


def test_approve_decrements_stock(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=3)

    res = client.put(f"/asset_requests/{request_id}/approve")
    assert res.status_code == 200
    assert res.json() == {"message": "Request approved"}
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 7
    assert _get_request(client, request_id)["status"] == "approved"


def test_approve_exact_stock(client):
    asset_id = _create_asset(client, quantity=2)
    request_id = _create_request(client, asset_id, quantity=2)
    assert client.put(f"/asset_requests/{request_id}/approve").status_code == 200
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 0


def test_approve_insufficient_stock(client):
    asset_id = _create_asset(client, quantity=2)
    request_id = _create_request(client, asset_id, quantity=5)

    res = client.put(f"/asset_requests/{request_id}/approve")
    assert res.status_code == 400
    assert res.json() == {"message": "Not enough stock"}
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 2
    assert _get_request(client, request_id)["status"] == "pending"


def test_approve_twice_is_rejected(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=3)
    client.put(f"/asset_requests/{request_id}/approve")

    res = client.put(f"/asset_requests/{request_id}/approve")
    assert res.status_code == 409
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 7


def test_competing_approvals_never_oversell(client):
    asset_id = _create_asset(client, quantity=10)
    first = _create_request(client, asset_id, quantity=6)
    second = _create_request(client, asset_id, quantity=6)

    assert client.put(f"/asset_requests/{first}/approve").status_code == 200
    assert client.put(f"/asset_requests/{second}/approve").status_code == 400
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 4
    assert _get_request(client, second)["status"] == "pending"


def test_approve_when_asset_deleted(client):
    asset_id = _create_asset(client)
    request_id = _create_request(client, asset_id)
    client.delete(f"/assets/{asset_id}")

    res = client.put(f"/asset_requests/{request_id}/approve")
    assert res.status_code == 404
    assert res.json() == {"message": "Asset not found"}
    assert _get_request(client, request_id)["status"] == "pending"


def test_approve_missing_request(client):
    res = client.put("/asset_requests/555/approve")
    assert res.status_code == 404
    assert res.json() == {"message": "Request not found"}


def test_reject_request(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=3)

    res = client.put(f"/asset_requests/{request_id}/reject")
    assert res.status_code == 200
    assert res.json() == {"message": "Request rejected"}
    assert _get_request(client, request_id)["status"] == "rejected"
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 10


def test_reject_after_approve_is_rejected(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=3)
    client.put(f"/asset_requests/{request_id}/approve")

    res = client.put(f"/asset_requests/{request_id}/reject")
    assert res.status_code == 409
    assert _get_request(client, request_id)["status"] == "approved"


def test_approve_after_reject_is_rejected(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=3)
    client.put(f"/asset_requests/{request_id}/reject")

    assert client.put(f"/asset_requests/{request_id}/approve").status_code == 409
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 10


def test_delete_approved_request_keeps_stock(client):
    asset_id = _create_asset(client, quantity=10)
    request_id = _create_request(client, asset_id, quantity=4)
    client.put(f"/asset_requests/{request_id}/approve")

    res = client.delete(f"/asset_requests/{request_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Request deleted", "deletedCount": 1}
    assert client.get("/asset_requests").json() == []
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 6


def test_asset_name_is_snapshot(client):
    asset_id = _create_asset(client, name="Laptop")
    request_id = _create_request(client, asset_id)
    client.put(f"/assets/{asset_id}", json={"name": "Notebook", "quantity": 10, "type": "electronics"})
    assert _get_request(client, request_id)["assetName"] == "laptop"


def test_full_workflow(client):
    res = client.post("/assets", json={"name": "Laptop ", "quantity": 10, "type": "electronics"})
    asset_id = res.json()["insertedId"]
    asset = client.get(f"/assets/{asset_id}").json()
    assert asset["name"] == "laptop"
    assert asset["quantity"] == 10

    request_id = _create_request(client, asset_id, quantity=3)
    assert _get_request(client, request_id)["status"] == "pending"

    assert client.put(f"/asset_requests/{request_id}/approve").status_code == 200
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 7
    assert _get_request(client, request_id)["status"] == "approved"

    # Terminal: a second approval neither succeeds nor touches stock
    assert client.put(f"/asset_requests/{request_id}/approve").status_code == 409
    assert client.get(f"/assets/{asset_id}").json()["quantity"] == 7
