"""
Email delivery over SMTP.
"""

import logging
import smtplib
import ssl
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)


class EmailService:
    """Sends newsletters as HTML email to the configured recipients."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        recipients: list[str],
        *,
        username: str = "",
        password: str = "",
        use_ssl: bool = False,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.recipients = recipients
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def build_message(self, subject: str, content: str) -> MIMEText:
        msg = MIMEText(content, "html", "utf-8")
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = ", ".join(self.recipients)
        return msg

    def send_email(self, subject: str, content: str) -> None:
        """
        Send an email, raising on any SMTP or connection failure.

        Args:
            subject: The email subject line
            content: The email body (HTML allowed)
        """
        if not self.sender or not self.recipients:
            raise ValueError("Email sender and recipients must be configured")

        msg = self.build_message(subject, content)
        context = ssl.create_default_context()

        if self.use_ssl:
            server = smtplib.SMTP_SSL(
                self.host, self.port, context=context, timeout=self.timeout
            )
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        with server as connection:
            if not self.use_ssl:
                connection.starttls(context=context)
            if self.username:
                connection.login(self.username, self.password)
            connection.sendmail(self.sender, self.recipients, msg.as_string())

    def deliver(self, subject: str, content: str) -> bool:
        """Best-effort send. Returns False instead of raising on failure."""
        try:
            self.send_email(subject, content)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.warning("Cannot send email to %s: %s", self.recipients, e)
            return False

        logger.info("Email sent successfully to: %s", self.recipients)
        return True
