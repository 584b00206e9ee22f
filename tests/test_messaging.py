import threading

import pytest

from vendorhub.core.config import settings
from vendorhub.utils import twilio_client


@pytest.fixture
def outbox(monkeypatch):
    sent = []

    def fake_send(to_phone, body):
        sent.append((to_phone, body))
        return None if to_phone.endswith("0000") else f"SM{len(sent)}"

    monkeypatch.setattr(twilio_client, "send_whatsapp", fake_send)
    return sent


async def _customers(client, headers, *rows):
    ids = []
    for name, phone, opted_out in rows:
        resp = await client.post("/api/customers", json={"name": name, "phone": phone, "optedOut": opted_out}, headers=headers)
        ids.append(resp.json()["id"])
    return ids


async def test_send_to_all_skips_opted_out(client, vendor_a, vendor_b, outbox):
    await _customers(
        client,
        vendor_a.headers,
        ("Ravi", "9999999999", False),
        ("Meena", "9888888888", True),
        ("Broken", "9111110000", False),
    )
    await _customers(client, vendor_b.headers, ("Other shop", "9777777777", False))

    message = (
        await client.post(
            "/api/messages",
            json={"type": "promotional", "content": "Diwali offer: 20% off!"},
            headers=vendor_a.headers,
        )
    ).json()
    assert message["status"] == "scheduled"

    resp = await client.post(f"/api/messages/{message['id']}/send", headers=vendor_a.headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "sent"
    assert body["deliveredCount"] == 1
    assert body["failedCount"] == 1
    assert body["sentAt"] is not None
    assert sorted(phone for phone, _ in outbox) == ["9111110000", "9999999999"]

    resp = await client.post(f"/api/messages/{message['id']}/send", headers=vendor_a.headers)
    assert resp.status_code == 400


async def test_selected_recipients_never_include_foreign_customers(client, vendor_a, vendor_b, outbox):
    (mine,) = await _customers(client, vendor_a.headers, ("Ravi", "9999999999", False))
    (theirs,) = await _customers(client, vendor_b.headers, ("Other shop", "9777777777", False))

    message = (
        await client.post(
            "/api/messages",
            json={"type": "reminder", "content": "Your order is ready", "recipientType": "selected", "recipientIds": [mine, theirs]},
            headers=vendor_a.headers,
        )
    ).json()
    body = (await client.post(f"/api/messages/{message['id']}/send", headers=vendor_a.headers)).json()

    assert body["deliveredCount"] == 1
    assert outbox == [("9999999999", "Your order is ready")]


async def test_sender_runs_in_a_worker_thread(client, vendor_a, monkeypatch):
    loop_thread = threading.get_ident()
    sender_threads = []

    def fake_send(to_phone, body):
        sender_threads.append(threading.get_ident())
        return "SM1"

    monkeypatch.setattr(twilio_client, "send_whatsapp", fake_send)
    await _customers(client, vendor_a.headers, ("Ravi", "9999999999", False))
    message = (await client.post("/api/messages", json={"type": "announcement", "content": "Open till 11"}, headers=vendor_a.headers)).json()

    resp = await client.post(f"/api/messages/{message['id']}/send", headers=vendor_a.headers)
    assert resp.status_code == 200
    assert resp.json()["deliveredCount"] == 1
    assert sender_threads and loop_thread not in sender_threads


async def test_selected_requires_recipient_ids(client, vendor_a):
    resp = await client.post(
        "/api/messages",
        json={"type": "reminder", "content": "Hello", "recipientType": "selected"},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 400
    assert resp.json()["field"] == "recipientIds"


async def test_messages_are_scoped(client, vendor_a, vendor_b, outbox):
    message = (await client.post("/api/messages", json={"type": "announcement", "content": "Closed Monday"}, headers=vendor_a.headers)).json()

    assert (await client.get("/api/messages", headers=vendor_b.headers)).json() == []
    assert (await client.post(f"/api/messages/{message['id']}/send", headers=vendor_b.headers)).status_code == 404
    assert outbox == []


async def test_messaging_feature_gate(client, vendor_a, admin):
    await client.put(f"/api/admin/profiles/{vendor_a.profile_id}/features", json={"messaging": False}, headers=admin.headers)
    resp = await client.get("/api/messages", headers=vendor_a.headers)
    assert resp.status_code == 403
    assert resp.json()["details"] == {"feature": "messaging"}
    assert (await client.get("/api/automations", headers=vendor_a.headers)).status_code == 403


def test_send_whatsapp_without_credentials_returns_none(monkeypatch):
    monkeypatch.setattr(settings, "twilio_account_sid", "")
    monkeypatch.setattr(settings, "twilio_from_number", "+14155238886")
    assert twilio_client.send_whatsapp("9999999999", "hi") is None


def test_send_whatsapp_swallows_provider_errors(monkeypatch):
    class Boom:
        class messages:
            @staticmethod
            def create(**kwargs):
                raise RuntimeError("provider down")

    monkeypatch.setattr(settings, "twilio_from_number", "+14155238886")
    monkeypatch.setattr(twilio_client, "_get_client", lambda: Boom())
    assert twilio_client.send_whatsapp("9999999999", "hi") is None
