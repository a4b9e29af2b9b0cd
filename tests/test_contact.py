"""
Contact form tests: validation, message composition and mail delivery errors.
"""

import smtplib

import pytest

from test_fixtures import client
from adapters import mail_adapter
from app.config import settings, MailBackend
from app.exceptions import ExternalServiceError
from domain.schemas.contact_schemas import ContactForm
from services.contact_service import ContactService

FORM = {
    "name": "Sarah Martinez",
    "email": "sarah@example.com",
    "message": "Loved the <b>lemon</b> chicken!\nMore please.",
}


@pytest.fixture
def sent_messages(monkeypatch):
    """Switch to the SMTP backend and capture messages instead of connecting"""
    outbox = []
    monkeypatch.setattr(settings, "mail_backend", MailBackend.SMTP)
    monkeypatch.setattr(mail_adapter, "_send_smtp", outbox.append)
    return outbox


def test_contact_console_backend():
    r = client.post("/api/contact", json=FORM)
    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_contact_message_contents(sent_messages):
    ContactService.send_contact_message(ContactForm(**FORM))

    [msg] = sent_messages
    assert msg["Subject"] == "Chef Fest Contact: Sarah Martinez"
    assert msg["Reply-To"] == "sarah@example.com"
    assert msg["To"] == settings.contact_recipient
    assert "More please." in msg.get_body(("plain",)).get_content()
    html = msg.get_body(("html",)).get_content()
    assert "&lt;b&gt;lemon&lt;/b&gt;" in html
    assert "<br>" in html


@pytest.mark.parametrize(
    "body",
    [
        {**FORM, "name": "S"},
        {**FORM, "email": "nope"},
        {**FORM, "message": "short"},
    ],
)
def test_contact_validation(body, sent_messages):
    r = client.post("/api/contact", json=body)
    assert r.status_code == 422
    assert r.json()["success"] is False
    assert sent_messages == []


def test_contact_smtp_failure(monkeypatch):
    def refuse(*args, **kwargs):
        raise smtplib.SMTPConnectError(421, "service not available")

    monkeypatch.setattr(settings, "mail_backend", MailBackend.SMTP)
    monkeypatch.setattr(smtplib, "SMTP", refuse)

    with pytest.raises(ExternalServiceError):
        mail_adapter.send(mail_adapter.build_message("Hi", "Body"))

    r = client.post("/api/contact", json=FORM)
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Failed to send message"}


def test_build_message_defaults():
    msg = mail_adapter.build_message("Subject line", "Plain text")
    assert msg["From"] == settings.contact_sender
    assert msg["To"] == settings.contact_recipient
    assert msg["Reply-To"] is None
    assert not msg.is_multipart()
