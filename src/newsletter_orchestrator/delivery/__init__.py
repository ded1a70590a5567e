"""
Delivery package.

SMTP email delivery and the agent tool that exposes it.
"""

from .email_service import EmailService
from .tools import create_delivery_tools

__all__ = ["EmailService", "create_delivery_tools"]
