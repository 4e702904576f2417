# blogsite/routes/auth.py
import logging

from flask import Blueprint, current_app, jsonify

from blogsite.auth.credentials import hash_password, verify_password, issue_token
from blogsite.errors import BlogApiError, Forbidden, NotFound, ValidationError, error_response
from blogsite.schemas import SignupRequest, SigninRequest, parse_body
from blogsite.stores import users
from blogsite.utils.validators import validate_signup

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def format_data_to_send(user):
    token = issue_token(
        user.id,
        current_app.config["JWT_SECRET_KEY"],
        expires_hours=current_app.config.get("JWT_EXPIRATION_HOURS"),
    )
    return {
        "access_token": token,
        "profile_img": user.profile_img,
        "username": user.username,
        "fullname": user.fullname,
    }


@auth_bp.route("/signup", methods=["POST"])
def signup():
    try:
        data = parse_body(SignupRequest)

        error = validate_signup(data.fullname, data.email, data.password)
        if error:
            raise ValidationError(error)

        hashed = hash_password(data.password, rounds=current_app.config.get("BCRYPT_ROUNDS"))
        username = users.generate_unique_username(data.email)
        user = users.create_user(data.fullname, data.email, hashed, username)

        return jsonify(format_data_to_send(user)), 200

    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error inesperado en signup: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500


@auth_bp.route("/signin", methods=["POST"])
def signin():
    try:
        data = parse_body(SigninRequest)

        try:
            user = users.find_by_email(data.email)
        except NotFound as e:
            raise Forbidden(e.message)

        if not verify_password(data.password, user.password):
            raise Forbidden("Incorrect password")

        logger.info("✅ Login exitoso: %s", user.username)
        return jsonify(format_data_to_send(user)), 200

    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error inesperado en signin: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500
