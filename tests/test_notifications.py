"""
Notification service tests: message template, mock behaviour, factory.
"""

import asyncio

from food_ordering.core.config import get_settings
from food_ordering.services.notifications import (
    CONTACT_SUBJECT,
    MockNotificationService,
    SendGridNotificationService,
    build_contact_acknowledgment,
    get_notification_service,
    reset_notification_service,
)


def test_acknowledgment_body():
    body = build_contact_acknowledgment("Asha", "Hi there", "Tasty Co")

    assert body == (
        "Hello Asha,\n\n"
        "Thank you for your message: \"Hi there\".\n\n"
        "We will get back to you soon!\n\n"
        "Regards,\nTasty Co"
    )


def test_mock_records_acknowledgment():
    service = MockNotificationService(company_name="Tasty Co")

    result = asyncio.run(service.send_contact_acknowledgment("Asha", "asha@example.com", "Hi"))

    assert result.success
    assert result.provider == "mock"
    [email] = service.sent
    assert email.to_email == "asha@example.com"
    assert email.subject == CONTACT_SUBJECT
    assert email.message_id == result.message_id


def test_mock_simulated_failure():
    service = MockNotificationService(failure_rate=1.0)

    result = asyncio.run(service.send_email("a@example.com", "s", "b"))

    assert not result.success
    assert result.error_message == "Simulated email failure"
    assert service.sent == []


def test_sendgrid_without_key_reports_failure():
    service = SendGridNotificationService(api_key=None, from_email="from@example.com")

    result = asyncio.run(service.send_email("a@example.com", "s", "b"))

    assert not result.success
    assert result.error_message == "SendGrid not configured"
    assert asyncio.run(service.health_check()) is False


def test_factory_uses_mock_in_development(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "development")
    monkeypatch.setenv("COMPANY_NAME", "Dev Kitchen")
    get_settings.cache_clear()
    reset_notification_service()

    service = get_notification_service()

    assert isinstance(service, MockNotificationService)
    assert service.company_name == "Dev Kitchen"
    assert get_notification_service() is service

    get_settings.cache_clear()
    reset_notification_service()


def test_factory_uses_sendgrid_in_production(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "production")
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test-key")
    monkeypatch.setenv("SENDGRID_FROM_EMAIL", "kitchen@example.com")
    get_settings.cache_clear()
    reset_notification_service()

    service = get_notification_service()

    assert isinstance(service, SendGridNotificationService)
    assert service.provider_name == "sendgrid"
    assert service.sendgrid_from_email == "kitchen@example.com"
    assert service.sendgrid_client is not None

    get_settings.cache_clear()
    reset_notification_service()
