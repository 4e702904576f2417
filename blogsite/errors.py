# blogsite/errors.py
"""
Errores de la API. Cada uno sabe con qué código HTTP se responde,
las rutas los atrapan y los convierten con error_response().
"""
from flask import jsonify


class BlogApiError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogApiError):
    status_code = 403
    default_message = "Invalid request data"


class Unauthenticated(BlogApiError):
    status_code = 401
    default_message = "No access token"


class Forbidden(BlogApiError):
    status_code = 403
    default_message = "Access token is invalid"


class NotFound(BlogApiError):
    status_code = 404
    default_message = "Not found"


class NotFoundOrUnauthorized(NotFound):
    default_message = "Blog not found or you are not authorized to delete it"


class DraftAccessDenied(BlogApiError):
    # 500 igual que el backend original
    status_code = 500
    default_message = "you can not access draft blogs"


class DuplicateEmail(BlogApiError):
    # debería ser 409, se mantiene 500 por compatibilidad con los clientes
    status_code = 500
    default_message = "Email Already Exists"


class StorageError(BlogApiError):
    status_code = 500
    default_message = "Database error"


class ExternalServiceError(BlogApiError):
    status_code = 500
    default_message = "External service error"


def error_response(error):
    return jsonify({"error": error.message}), error.status_code
