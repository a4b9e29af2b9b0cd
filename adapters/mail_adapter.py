"""Outgoing mail adapter for the contact form.

Two backends: ``console`` logs the message instead of sending it (development
and tests), ``smtp`` delivers it through the configured SMTP server. Every
network call is bounded by ``settings.smtp_timeout_sec`` and failures are
raised, never retried.
"""

from email.message import EmailMessage
from typing import Optional
import logging
import smtplib

from app.config import settings, MailBackend
from app.exceptions import ExternalServiceError

logger = logging.getLogger("cheffest.mail")


def build_message(
    subject: str,
    text: str,
    html: Optional[str] = None,
    to: Optional[str] = None,
    reply_to: Optional[str] = None,
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = settings.contact_sender
    msg["To"] = to or settings.contact_recipient
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.set_content(text)
    if html:
        msg.add_alternative(html, subtype="html")
    return msg


def _send_smtp(msg: EmailMessage) -> None:
    with smtplib.SMTP(
        settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout_sec
    ) as smtp:
        if settings.smtp_use_tls:
            smtp.starttls()
        if settings.smtp_user and settings.smtp_password:
            smtp.login(settings.smtp_user, settings.smtp_password.get_secret_value())
        smtp.send_message(msg)


def send(msg: EmailMessage) -> None:
    """Deliver a message with the configured backend."""
    if settings.mail_backend == MailBackend.CONSOLE:
        logger.info(
            f"mail_logged to={msg['To']} subject={msg['Subject']!r}\n{msg.get_body(('plain',)).get_content()}"
        )
        return

    try:
        _send_smtp(msg)
    except (smtplib.SMTPException, OSError) as exc:
        logger.error(f"mail_send_failed host={settings.smtp_host} error={exc}")
        raise ExternalServiceError("Failed to send message") from exc
    logger.info(f"mail_sent to={msg['To']} subject={msg['Subject']!r}")
