# blogsite/auth/decorators.py
import logging
from functools import wraps

from flask import request, current_app, g

from blogsite.auth.credentials import verify_token
from blogsite.errors import BlogApiError, error_response

logger = logging.getLogger(__name__)


def bearer_token():
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    return auth_header.split(" ", 1)[1].strip() or None


def jwt_required(f):
    """Exige un Bearer token válido y deja el id del usuario en g.current_user_id."""
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            g.current_user_id = verify_token(bearer_token(), current_app.config["JWT_SECRET_KEY"])
        except BlogApiError as e:
            logger.info("⚠️ Acceso rechazado a %s: %s", request.path, e.message)
            return error_response(e)

        return f(*args, **kwargs)
    return decorated
