import html
import logging

from adapters import mail_adapter
from domain.schemas.contact_schemas import ContactForm

logger = logging.getLogger("cheffest.contact")


class ContactService:
    """Relays contact form submissions to the site's inbox"""

    @staticmethod
    def send_contact_message(form: ContactForm) -> None:
        subject = f"Chef Fest Contact: {form.name}"
        text = (
            f"Name: {form.name}\n"
            f"Email: {form.email}\n\n"
            f"Message:\n{form.message}\n"
        )
        body = html.escape(form.message).replace("\n", "<br>")
        html_body = (
            "<h2>New Contact Form Submission</h2>"
            f"<p><strong>Name:</strong> {html.escape(form.name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(str(form.email))}</p>"
            "<p><strong>Message:</strong></p>"
            f"<p>{body}</p>"
        )
        msg = mail_adapter.build_message(
            subject, text, html=html_body, reply_to=str(form.email)
        )
        mail_adapter.send(msg)
        logger.info(f"contact_message_sent sender={form.email}")
