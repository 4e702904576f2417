# blogsite/routes/upload_routes.py
import logging

from flask import Blueprint, current_app, jsonify

from blogsite.errors import BlogApiError, error_response

logger = logging.getLogger(__name__)

upload_bp = Blueprint("upload", __name__)


@upload_bp.route("/get-upload-url", methods=["GET"])
def get_upload_url():
    """El frontend sube el banner directo a Cloudinary con esta URL firmada."""
    signer = current_app.extensions["upload_signer"]
    try:
        signed = signer.generate_upload_url()
        return jsonify({
            "uploadURL": signed["url"],
            "expiresAt": signed["expires_at"].isoformat(),
        }), 200

    except BlogApiError as e:
        logger.error("❌ Error al firmar la URL de subida: %s", e.message)
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error inesperado al firmar la URL de subida: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500
