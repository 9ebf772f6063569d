# tests/test_api_requests.py
"""Заявки с сайта: публичное создание, админский список, письмо менеджеру."""
from __future__ import annotations

import smtplib

import pytest
from django.core.mail import EmailMultiAlternatives

from transferapp.models import ApplicationRequest, ContactRequest, TransferRequest
from transferapp.notifications import notify_new_contact_request

CONTACT_PAYLOAD = {
    "name": "Иван",
    "email": "ivan@example.com",
    "phone": "+7 (906) 219-99-17",
    "message": "Нужен трансфер в Гданьск",
}


# --- обратная связь ---

@pytest.mark.django_db
def test_contact_request_created_with_status_new(api_client, settings, django_capture_on_commit_callbacks):
    settings.CONTACT_FORM_EMAIL = []
    with django_capture_on_commit_callbacks(execute=True):
        resp = api_client.post(
            "/api/contact-requests/",
            {**CONTACT_PAYLOAD, "status": "completed"},
            format="json",
        )
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "new"
    assert data["name"] == "Иван"
    assert {"id", "created_at", "updated_at"} <= set(data)
    assert ContactRequest.objects.get(pk=data["id"]).status == "new"


@pytest.mark.django_db
def test_contact_request_missing_fields(api_client):
    resp = api_client.post("/api/contact-requests/", {"name": "Иван"}, format="json")
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"]
    assert {"email", "message"} <= set(data["details"])
    assert ContactRequest.objects.count() == 0


@pytest.mark.django_db
def test_contact_request_sends_email(api_client, settings, mailoutbox, django_capture_on_commit_callbacks):
    settings.CONTACT_FORM_EMAIL = ["manager@royaltransfer.org"]
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        resp = api_client.post("/api/contact-requests/", CONTACT_PAYLOAD, format="json")

    assert resp.status_code == 201
    assert len(callbacks) == 1
    assert len(mailoutbox) == 1
    mail = mailoutbox[0]
    assert mail.subject == "Новая заявка с сайта Royal Transfer от Иван"
    assert mail.to == ["manager@royaltransfer.org"]
    assert mail.reply_to == ["ivan@example.com"]
    assert mail.from_email.startswith('"Royal Transfer Сайт" <')
    assert "Нужен трансфер в Гданьск" in mail.body
    html, mimetype = mail.alternatives[0]
    assert mimetype == "text/html"
    assert "tel:+79062199917" in html


@pytest.mark.django_db
def test_contact_request_email_not_configured(api_client, settings, mailoutbox, django_capture_on_commit_callbacks):
    settings.CONTACT_FORM_EMAIL = []
    with django_capture_on_commit_callbacks(execute=True):
        resp = api_client.post("/api/contact-requests/", CONTACT_PAYLOAD, format="json")
    assert resp.status_code == 201
    assert mailoutbox == []
    assert notify_new_contact_request(ContactRequest.objects.get()) is False


@pytest.mark.django_db
def test_contact_request_smtp_failure_does_not_fail_request(
    api_client, settings, monkeypatch, django_capture_on_commit_callbacks,
):
    settings.CONTACT_FORM_EMAIL = ["manager@royaltransfer.org"]

    def broken_send(self, fail_silently=False):
        raise smtplib.SMTPServerDisconnected("connection lost")

    monkeypatch.setattr(EmailMultiAlternatives, "send", broken_send)
    with django_capture_on_commit_callbacks(execute=True):
        resp = api_client.post("/api/contact-requests/", CONTACT_PAYLOAD, format="json")

    # заявка сохранена, клиент получает успешный ответ
    assert resp.status_code == 201
    assert ContactRequest.objects.count() == 1
    assert notify_new_contact_request(ContactRequest.objects.get()) is False


# --- доступ и список для администратора ---

@pytest.mark.django_db
def test_request_list_requires_admin(api_client):
    ContactRequest.objects.create(**CONTACT_PAYLOAD)
    resp = api_client.get("/api/contact-requests/")
    assert resp.status_code == 403
    assert "error" in resp.json()

    resp = api_client.delete(f"/api/contact-requests/{ContactRequest.objects.get().pk}/")
    assert resp.status_code == 403
    assert ContactRequest.objects.count() == 1


@pytest.mark.django_db
def test_request_list_pagination(admin_api):
    ContactRequest.objects.bulk_create([
        ContactRequest(name=f"Клиент {i}", email=f"c{i}@example.com", message="...")
        for i in range(25)
    ])
    resp = admin_api.get("/api/contact-requests/?page=2&limit=10")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["results"]) == 10
    assert data["pagination"] == {"total": 25, "page": 2, "limit": 10, "pages": 3}

    last = admin_api.get("/api/contact-requests/?page=3&limit=10").json()
    assert len(last["results"]) == 5


@pytest.mark.django_db
def test_request_list_default_page_size(admin_api):
    for i in range(12):
        ContactRequest.objects.create(name=f"Клиент {i}", email=f"c{i}@example.com", message="...")
    data = admin_api.get("/api/contact-requests/").json()
    assert len(data["results"]) == 10
    assert data["pagination"]["pages"] == 2


@pytest.mark.django_db
def test_request_list_status_filter(admin_api):
    ContactRequest.objects.create(name="A", email="a@example.com", message="...", status="new")
    ContactRequest.objects.create(name="B", email="b@example.com", message="...", status="completed")

    data = admin_api.get("/api/contact-requests/?status=completed").json()
    assert [item["name"] for item in data["results"]] == ["B"]
    assert data["pagination"]["total"] == 1

    resp = admin_api.get("/api/contact-requests/?status=unknown")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_request_status_update_and_delete(admin_api):
    obj = ContactRequest.objects.create(**CONTACT_PAYLOAD)

    resp = admin_api.patch(f"/api/contact-requests/{obj.pk}/", {"status": "processing"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "processing"
    assert resp.json()["status_display"] == "В обработке"

    resp = admin_api.patch(f"/api/contact-requests/{obj.pk}/", {"status": "lost"}, format="json")
    assert resp.status_code == 400

    assert admin_api.delete(f"/api/contact-requests/{obj.pk}/").status_code == 204
    assert not ContactRequest.objects.exists()


@pytest.mark.django_db
def test_delete_unknown_request_returns_404(admin_api):
    resp = admin_api.delete("/api/contact-requests/999999/")
    assert resp.status_code == 404
    assert resp.json()["error"]


# --- быстрые заявки ---

@pytest.mark.django_db
def test_application_request_create(api_client):
    resp = api_client.post(
        "/api/application-requests/",
        {"name": "Мария", "phone": "+79000000000", "contact_method": "whatsapp"},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.json()["status"] == "new"
    assert ApplicationRequest.objects.get().contact_method == "whatsapp"


@pytest.mark.django_db
def test_application_request_invalid_contact_method(api_client):
    resp = api_client.post(
        "/api/application-requests/",
        {"name": "Мария", "phone": "+79000000000", "contact_method": "pigeon"},
        format="json",
    )
    assert resp.status_code == 400
    assert "contact_method" in resp.json()["details"]


@pytest.mark.django_db
def test_application_request_put_not_allowed(admin_api):
    obj = ApplicationRequest.objects.create(name="Мария", phone="+7", contact_method="call")
    resp = admin_api.put(
        f"/api/application-requests/{obj.pk}/",
        {"name": "X", "phone": "+7", "contact_method": "call"},
        format="json",
    )
    assert resp.status_code == 405


# --- заказ трансфера ---

TRANSFER_PAYLOAD = {
    "customer_name": "Пётр",
    "customer_phone": "+79001112233",
    "vehicle_class": "Бизнес",
    "date": "2026-07-01",
    "time": "09:30",
    "origin_city": "Калининград",
    "origin_address": "ул. Университетская, 2Г",
    "destination_city": "Гданьск",
    "destination_address": "Dluga 1",
    "payment_method": "card",
}


@pytest.mark.django_db
def test_transfer_request_create_with_vehicle(api_client, admin_api, make_vehicle):
    vehicle = make_vehicle("Бизнес")
    resp = api_client.post(
        "/api/transfer-requests/",
        {**TRANSFER_PAYLOAD, "vehicle": vehicle.pk},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.json()["status"] == "new"

    data = admin_api.get("/api/transfer-requests/").json()
    item = data["results"][0]
    assert item["vehicle_details"] == {
        "id": vehicle.pk,
        "vehicle_class": "Бизнес",
        "brand": "Mercedes-Benz",
        "model": "E-Class",
    }


@pytest.mark.django_db
def test_transfer_request_missing_date(api_client):
    payload = {k: v for k, v in TRANSFER_PAYLOAD.items() if k != "date"}
    resp = api_client.post("/api/transfer-requests/", payload, format="json")
    assert resp.status_code == 400
    assert "date" in resp.json()["details"]


@pytest.mark.django_db
def test_transfer_request_return_requires_date_and_time(api_client):
    resp = api_client.post(
        "/api/transfer-requests/",
        {**TRANSFER_PAYLOAD, "return_transfer": True, "return_date": "2026-07-05"},
        format="json",
    )
    assert resp.status_code == 400
    assert "return_date" in resp.json()["details"]

    resp = api_client.post(
        "/api/transfer-requests/",
        {**TRANSFER_PAYLOAD, "return_transfer": True, "return_date": "2026-07-05", "return_time": "18:00"},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.json()["return_time"] == "18:00:00"


@pytest.mark.django_db
def test_transfer_request_cleans_dependent_fields(api_client):
    resp = api_client.post(
        "/api/transfer-requests/",
        {**TRANSFER_PAYLOAD, "tell_driver": True, "return_transfer": False, "return_date": "2026-07-05"},
        format="json",
    )
    assert resp.status_code == 201
    obj = TransferRequest.objects.get()
    assert obj.destination_address == ""
    assert obj.return_date is None


@pytest.mark.django_db
def test_request_list_page_past_end_is_empty(admin_api):
    for i in range(3):
        ContactRequest.objects.create(name=f"Клиент {i}", email=f"c{i}@example.com", message="...")

    resp = admin_api.get("/api/contact-requests/?page=2&limit=10")
    assert resp.status_code == 200
    assert resp.json() == {
        "results": [],
        "pagination": {"total": 3, "page": 2, "limit": 10, "pages": 1},
    }


@pytest.mark.django_db
def test_request_list_empty_table(admin_api):
    resp = admin_api.get("/api/application-requests/")
    assert resp.status_code == 200
    assert resp.json()["pagination"] == {"total": 0, "page": 1, "limit": 10, "pages": 0}


@pytest.mark.django_db
def test_transfer_request_one_way_drops_return_data(api_client):
    # return_transfer не передан — поездка в одну сторону
    resp = api_client.post(
        "/api/transfer-requests/",
        {**TRANSFER_PAYLOAD, "return_date": "2026-07-05", "return_time": "18:00"},
        format="json",
    )
    assert resp.status_code == 201
    obj = TransferRequest.objects.get()
    assert obj.return_transfer is False
    assert obj.return_date is None
    assert obj.return_time is None
