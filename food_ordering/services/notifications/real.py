"""
Real Notification Service

Production implementation sending email through SendGrid from one
configured sender address.
"""

import asyncio
import logging
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from food_ordering.services.notifications.base import (
    BaseNotificationService,
    NotificationResult,
)

logger = logging.getLogger(__name__)


class SendGridNotificationService(BaseNotificationService):
    """Production notification service using SendGrid."""

    def __init__(
        self,
        api_key: Optional[str],
        from_email: str,
        company_name: str = "Your Company",
    ):
        super().__init__(company_name)
        self.sendgrid_from_email = from_email

        if api_key:
            self.sendgrid_client = SendGridAPIClient(api_key)
        else:
            self.sendgrid_client = None
            logger.warning("SendGrid credentials not configured")

        logger.info("SendGridNotificationService initialized")

    @property
    def provider_name(self) -> str:
        return "sendgrid"

    async def send_email(
        self,
        to_email: str,
        subject: str,
        body_text: str,
    ) -> NotificationResult:
        """Send email via SendGrid."""
        if not self.sendgrid_client:
            return NotificationResult(
                success=False,
                error_message="SendGrid not configured",
                provider="sendgrid"
            )

        try:
            message = Mail(
                from_email=self.sendgrid_from_email,
                to_emails=to_email,
                subject=subject,
                plain_text_content=body_text,
            )

            # The SendGrid client is synchronous
            response = await asyncio.to_thread(self.sendgrid_client.send, message)

            logger.info(f"Email sent to {to_email}: {response.status_code}")

            return NotificationResult(
                success=response.status_code in [200, 201, 202],
                message_id=response.headers.get('X-Message-Id'),
                provider="sendgrid"
            )

        except Exception as e:
            logger.error(f"SendGrid error: {e}")
            return NotificationResult(
                success=False,
                error_message=str(e),
                provider="sendgrid"
            )

    async def health_check(self) -> bool:
        """Check that the API key is accepted."""
        if not self.sendgrid_client:
            return False

        try:
            response = await asyncio.to_thread(self.sendgrid_client.client.scopes.get)
            return response.status_code == 200
        except Exception as e:
            logger.error(f"SendGrid health check failed: {e}")
            return False
