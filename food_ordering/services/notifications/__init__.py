"""
Notification Service Factory

Returns Mock or SendGrid notification service based on ENV_MODE.
"""

import logging
from functools import lru_cache

from food_ordering.core.config import get_settings
from food_ordering.services.notifications.base import (
    BaseNotificationService,
    NotificationResult,
    CONTACT_SUBJECT,
    build_contact_acknowledgment,
)
from food_ordering.services.notifications.mock import MockNotificationService, SentEmail
from food_ordering.services.notifications.real import SendGridNotificationService

logger = logging.getLogger(__name__)


@lru_cache()
def get_notification_service() -> BaseNotificationService:
    """Get the configured notification service."""
    settings = get_settings()

    if settings.is_development:
        logger.info("Notification Service: Using MockNotificationService (development mode)")
        return MockNotificationService(company_name=settings.company_name)
    else:
        logger.info(f"Notification Service: Using SendGridNotificationService ({settings.env_mode.value} mode)")
        return SendGridNotificationService(
            api_key=settings.sendgrid_api_key,
            from_email=settings.sendgrid_from_email,
            company_name=settings.company_name,
        )


def reset_notification_service() -> None:
    """Clear the cached service instance."""
    get_notification_service.cache_clear()


__all__ = [
    "get_notification_service",
    "reset_notification_service",
    "BaseNotificationService",
    "NotificationResult",
    "MockNotificationService",
    "SendGridNotificationService",
    "SentEmail",
    "CONTACT_SUBJECT",
    "build_contact_acknowledgment",
]
