import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr, make_msgid
from typing import Optional, Tuple
from app.core.config import Settings, settings
from app.core.logger import logger

# (display name, address)
Address = Tuple[Optional[str], str]


@dataclass
class SentMessage:
    message_id: str
    preview_url: Optional[str] = None


def build_message(sender: Address, to: Address, subject: str, html: str) -> MIMEMultipart:
    message = MIMEMultipart("alternative")
    message["From"] = formataddr(sender)
    message["To"] = formataddr(to)
    message["Subject"] = subject
    message["Message-ID"] = make_msgid(domain=sender[1].split("@")[-1])
    message.attach(MIMEText(html, "html"))
    return message


class MailClient:
    """Sends a single HTML message and returns a handle describing it."""

    def send_mail(self, sender: Address, to: Address, subject: str, html: str) -> SentMessage:
        raise NotImplementedError


class SMTPMailClient(MailClient):
    def __init__(self, config: Settings):
        self.config = config

    def _connect(self) -> smtplib.SMTP:
        smtp_class = smtplib.SMTP_SSL if self.config.SMTP_USE_SSL else smtplib.SMTP
        return smtp_class(
            self.config.SMTP_HOST,
            self.config.SMTP_PORT,
            timeout=self.config.SMTP_TIMEOUT_SECONDS
        )

    def send_mail(self, sender: Address, to: Address, subject: str, html: str) -> SentMessage:
        message = build_message(sender, to, subject, html)

        with self._connect() as server:
            if self.config.SMTP_USER:
                server.login(self.config.SMTP_USER, self.config.SMTP_PASSWORD)
            server.sendmail(sender[1], [to[1]], message.as_string())

        logger.info(f"[Email] Sent '{subject}' to {to[1]} via {self.config.SMTP_HOST}")
        return SentMessage(message_id=message["Message-ID"])


class ConsoleMailClient(MailClient):
    """Development transport: writes the message to the log instead of sending it."""

    def __init__(self, config: Settings):
        self.config = config

    def send_mail(self, sender: Address, to: Address, subject: str, html: str) -> SentMessage:
        message = build_message(sender, to, subject, html)
        message_id = message["Message-ID"]

        logger.info(
            f"[Email] Console transport {message_id}\n"
            f"From: {message['From']}\nTo: {message['To']}\nSubject: {subject}\n\n{html}"
        )

        preview_url = None
        if self.config.MAIL_PREVIEW_BASE_URL:
            preview_url = f"{self.config.MAIL_PREVIEW_BASE_URL.rstrip('/')}/{message_id.strip('<>')}"
        return SentMessage(message_id=message_id, preview_url=preview_url)


def create_mail_client(config: Settings) -> MailClient:
    if config.MAIL_BACKEND == "smtp":
        return SMTPMailClient(config)
    return ConsoleMailClient(config)


def get_mail_client() -> MailClient:
    return create_mail_client(settings)
