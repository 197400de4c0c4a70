"""Tests for reset-email rendering and the Resend sender."""

import pytest
import requests

from app.core.errors import DeliveryError
from app.services.mailer import (
    RESET_EMAIL_SUBJECT,
    LoggingEmailSender,
    ResendEmailSender,
    build_reset_email,
    get_email_sender,
)


class FakeResponse:

    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture
def sender():
    return ResendEmailSender(api_key="re_test", sender="IGC <noreply@igc.test>", api_url="https://mail.test/emails",
                             timeout=3.0)


@pytest.fixture
def captured(monkeypatch):
    """Replace requests.post; the test sets ``captured["response"]``."""
    calls = {"response": FakeResponse(payload={"id": "email-123"})}

    def fake_post(url, **kwargs):
        calls["url"] = url
        calls.update(kwargs)
        response = calls["response"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr("app.services.mailer.requests.post", fake_post)
    return calls


class TestBuildResetEmail:

    def test_contains_code_and_ttl(self):
        subject, html = build_reset_email("042917", ttl_minutes=10)
        assert subject == RESET_EMAIL_SUBJECT
        assert "042917" in html
        assert "10분" in html


class TestResendEmailSender:

    def test_success(self, sender, captured):
        assert sender.send("a@b.co", "subj", "<p>hi</p>") == "email-123"
        assert captured["url"] == "https://mail.test/emails"
        assert captured["headers"]["Authorization"] == "Bearer re_test"
        assert captured["json"] == {
            "from": "IGC <noreply@igc.test>",
            "to": ["a@b.co"],
            "subject": "subj",
            "html": "<p>hi</p>",
        }
        assert captured["timeout"] == 3.0

    def test_provider_rejects(self, sender, captured):
        captured["response"] = FakeResponse(status_code=422, payload={"message": "bad"}, text="bad")
        with pytest.raises(DeliveryError):
            sender.send("a@b.co", "subj", "body")

    def test_network_error(self, sender, captured):
        captured["response"] = requests.ConnectionError("down")
        with pytest.raises(DeliveryError):
            sender.send("a@b.co", "subj", "body")

    @pytest.mark.parametrize("payload", [None, {}, {"id": ""}])
    def test_missing_message_id(self, sender, captured, payload):
        captured["response"] = FakeResponse(payload=payload)
        with pytest.raises(DeliveryError):
            sender.send("a@b.co", "subj", "body")


class TestGetEmailSender:

    def test_without_api_key_logs(self, monkeypatch):
        monkeypatch.setattr("app.services.mailer.settings.RESEND_API_KEY", "")
        sender = get_email_sender()
        assert isinstance(sender, LoggingEmailSender)
        assert sender.send("a@b.co", "s", "b").startswith("log-")

    def test_with_api_key(self, monkeypatch):
        monkeypatch.setattr("app.services.mailer.settings.RESEND_API_KEY", "re_live")
        assert isinstance(get_email_sender(), ResendEmailSender)
