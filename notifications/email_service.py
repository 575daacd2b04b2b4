"""Plain-text mail delivery over SMTP.

When SMTP is not configured the service runs in dev mode and logs the
message instead of sending it.
"""
import logging
import smtplib
from email.mime.text import MIMEText

from core.config import Settings
from notifications.verification_code_created import MailMessage

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self, host: str, port: int, user: str, password: str, sender: str):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmailService":
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            user=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            sender=settings.SMTP_FROM,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.host and self.port > 0 and self.sender)

    def send(self, to_email: str, message: MailMessage) -> bool:
        """Send ``message`` to ``to_email``. Returns True if real mail went out."""
        if not self.enabled:
            logger.info("Dev mode (no SMTP configured). Mail to %s: %s\n%s", to_email, message.subject, message.body)
            return False
        msg = MIMEText(message.body)
        msg["Subject"] = message.subject
        msg["From"] = self.sender
        msg["To"] = to_email
        with smtplib.SMTP(self.host, self.port, timeout=15) as server:
            server.starttls()
            if self.user:
                server.login(self.user, self.password)
            server.send_message(msg)
        logger.info("Sent mail to %s", to_email)
        return True
