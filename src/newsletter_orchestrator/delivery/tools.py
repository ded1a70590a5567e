"""
Delivery Tools for Agents

Tools the editor agent can call while producing the final newsletter.
"""

import logging
from typing import TYPE_CHECKING

from strands import tool

if TYPE_CHECKING:
    from .email_service import EmailService

logger = logging.getLogger(__name__)


def create_delivery_tools(email_service: "EmailService"):
    """Create delivery tools bound to an email service."""

    @tool
    def send_email(subject: str, content: str) -> str:
        """
        Send the finished newsletter by email.

        Call this at most once, after the newsletter is final.

        Args:
            subject: The email subject line
            content: The full newsletter body (HTML allowed)

        Returns:
            A short status message
        """
        try:
            sent = email_service.deliver(subject, content)
        except Exception as e:
            logger.warning("Email delivery tool failed: %s", e)
            return f"Email could not be sent: {e}"

        return "Email sent successfully" if sent else "Email could not be sent"

    return [send_email]
