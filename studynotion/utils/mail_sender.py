import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from studynotion.config import settings

logger = logging.getLogger(__name__)


class MailSender:
    """Sends HTML mail over SMTP_SSL."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
    ):
        self.host = host or settings.MAIL_HOST
        self.port = port or settings.MAIL_PORT
        self.user = user or settings.MAIL_USER
        self.password = password or settings.MAIL_PASS
        self.sender = sender or settings.MAIL_FROM

    def send(self, to_email: str, subject: str, body: str) -> EmailMessage:
        if not self.host or not self.user or not self.password:
            raise RuntimeError("Email configuration is not set")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to_email
        msg.set_content("This message requires an HTML capable mail client.")
        msg.add_alternative(body, subtype="html")

        with smtplib.SMTP_SSL(self.host, self.port) as smtp:
            smtp.login(self.user, self.password)
            smtp.send_message(msg)

        logger.info(f"[mail] '{subject}' sent to {to_email}")
        return msg
