"""
Mock Notification Service

Simulates email sending for development.
No actual messages are sent - they are logged and kept in ``sent``.
"""

import asyncio
import random
import uuid
import logging
from dataclasses import dataclass

from food_ordering.services.notifications.base import (
    BaseNotificationService,
    NotificationResult,
)

logger = logging.getLogger(__name__)


@dataclass
class SentEmail:
    """An email the mock service pretended to send."""
    to_email: str
    subject: str
    body_text: str
    message_id: str


class MockNotificationService(BaseNotificationService):
    """Mock notification service for development."""

    def __init__(
        self,
        company_name: str = "Your Company",
        failure_rate: float = 0.0,
        latency: float = 0.0,
    ):
        super().__init__(company_name)
        self.failure_rate = failure_rate
        self.latency = latency
        self.sent: list[SentEmail] = []
        logger.info(f"MockNotificationService initialized (failure_rate={failure_rate:.0%})")

    @property
    def provider_name(self) -> str:
        return "mock"

    async def _simulate_latency(self) -> None:
        """Simulate network latency."""
        if self.latency:
            await asyncio.sleep(random.uniform(0, self.latency))

    def _should_fail(self) -> bool:
        return random.random() < self.failure_rate

    async def send_email(
        self,
        to_email: str,
        subject: str,
        body_text: str,
    ) -> NotificationResult:
        """Simulate sending email."""
        await self._simulate_latency()

        if self._should_fail():
            logger.warning(f"Mock email failed (simulated) to {to_email}")
            return NotificationResult(
                success=False,
                error_message="Simulated email failure",
                provider="mock"
            )

        message_id = f"email_mock_{uuid.uuid4().hex[:12]}"
        self.sent.append(SentEmail(to_email, subject, body_text, message_id))
        logger.info(f"Mock email sent to {to_email}: {subject} (ID: {message_id})")

        return NotificationResult(
            success=True,
            message_id=message_id,
            provider="mock"
        )

    async def health_check(self) -> bool:
        """Mock always returns healthy."""
        return True
