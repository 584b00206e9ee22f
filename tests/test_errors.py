async def test_validation_error_payload(client, vendor_a):
    resp = await client.post("/api/customers", json={"name": "Ravi"}, headers=vendor_a.headers)
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["field"] == "phone"
    assert body["details"][0]["field"] == "phone"


async def test_not_found_payload(client, vendor_a):
    resp = await client.get("/api/customers/does-not-exist", headers=vendor_a.headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Customer not found", "code": "NOT_FOUND"}


async def test_unknown_route_uses_error_shape(client):
    resp = await client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"


async def test_bad_login_is_rejected(client):
    resp = await client.post("/api/auth/jwt/login", data={"username": "ghost@vendor.in", "password": "nope"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "LOGIN_BAD_CREDENTIALS"


async def test_request_id_header(client):
    resp = await client.get("/api/profiles/me")
    assert resp.headers["X-Request-ID"]

    resp = await client.get("/api/profiles/me", headers={"X-Request-ID": "trace-42"})
    assert resp.headers["X-Request-ID"] == "trace-42"
