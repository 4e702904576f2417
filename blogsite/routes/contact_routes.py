# blogsite/routes/contact_routes.py
import logging

from flask import Blueprint, current_app, jsonify

from blogsite.errors import BlogApiError, error_response
from blogsite.schemas import ContactRequest, parse_body
from blogsite.services.mailer import send_contact_message

logger = logging.getLogger(__name__)

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("/submit-form", methods=["POST"])
def submit_form():
    try:
        data = parse_body(ContactRequest)
    except BlogApiError as e:
        return error_response(e)

    relay = current_app.extensions["mail_relay"]
    try:
        send_contact_message(relay, data.firstName, data.phone, data.email, data.message)
        return jsonify({"success": True}), 200
    except Exception as e:
        logger.error("❌ Error enviando el formulario de contacto: %s", e)
        return jsonify({"success": False, "error": "Internal Server Error"}), 500
