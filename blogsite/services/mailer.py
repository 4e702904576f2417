# blogsite/services/mailer.py
import logging

import requests

from blogsite.errors import ExternalServiceError

logger = logging.getLogger(__name__)

CONTACT_SUBJECT = "New Form Submission"


class MailRelay:
    """
    Cliente del relay de correo HTTP (API estilo Mailgun).
    Envío sincrónico, sin reintentos: el que llama decide qué hacer con el error.
    """

    def __init__(self, app=None):
        self.url = None
        self.api_key = None
        self.sender = None
        self.recipient = None
        self.timeout = 5
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.url = app.config.get("MAIL_RELAY_URL")
        self.api_key = app.config.get("MAIL_API_KEY")
        self.sender = app.config.get("MAIL_SENDER")
        self.recipient = app.config.get("MAIL_RECIPIENT")
        self.timeout = app.config.get("MAIL_TIMEOUT", 5)
        app.extensions["mail_relay"] = self

    def send(self, subject, text, to=None):
        if not self.url:
            raise ExternalServiceError("Mail relay is not configured")

        try:
            response = requests.post(
                self.url,
                auth=("api", self.api_key),
                data={
                    "from": self.sender,
                    "to": to or self.recipient,
                    "subject": subject,
                    "text": text,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error("❌ Error enviando correo por el relay: %s", e)
            raise ExternalServiceError("Mail relay error") from e


def format_contact_message(first_name, phone, email, message):
    return (
        f"Name: {first_name}\n"
        f"Phone: {phone}\n"
        f"Email: {email}\n"
        f"Message: {message}\n"
    )


def send_contact_message(relay, first_name, phone, email, message):
    relay.send(CONTACT_SUBJECT, format_contact_message(first_name, phone, email, message))
    logger.info("✉️ Formulario de contacto enviado (remitente %s)", email)
    return True
