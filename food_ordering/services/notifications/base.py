"""
Notification Service Abstract Base Class

Defines the interface for sending email from one fixed sender account.
Supports both Mock (development) and SendGrid (production) implementations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

CONTACT_SUBJECT = "Thank you for contacting us!"


@dataclass
class NotificationResult:
    """Result from sending a notification."""
    success: bool
    message_id: Optional[str] = None
    error_message: Optional[str] = None
    provider: str = "unknown"


def build_contact_acknowledgment(name: str, about: str, company_name: str) -> str:
    """Plain-text body of the contact acknowledgment email."""
    return (
        f"Hello {name},\n\n"
        f"Thank you for your message: \"{about}\".\n\n"
        f"We will get back to you soon!\n\n"
        f"Regards,\n{company_name}"
    )


class BaseNotificationService(ABC):
    """Abstract base class for notification services."""

    def __init__(self, company_name: str = "Your Company"):
        self.company_name = company_name

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""
        pass

    @abstractmethod
    async def send_email(
        self,
        to_email: str,
        subject: str,
        body_text: str,
    ) -> NotificationResult:
        """Send a single plain-text email."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check service connectivity."""
        pass

    async def send_contact_acknowledgment(
        self,
        name: str,
        email: str,
        about: str,
    ) -> NotificationResult:
        """Thank a contact-form sender for their message."""
        return await self.send_email(
            to_email=email,
            subject=CONTACT_SUBJECT,
            body_text=build_contact_acknowledgment(name, about, self.company_name),
        )
