# blogsite/auth/credentials.py
"""
Hash de contraseñas (bcrypt vía passlib) y tokens JWT.

No dependen de Flask: reciben el secreto y la configuración como argumentos.
"""
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from blogsite.errors import Unauthenticated, Forbidden

JWT_ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(password, rounds=None):
    context = pwd_context.copy(bcrypt__rounds=rounds) if rounds else pwd_context
    return context.hash(password)


def verify_password(password, hashed):
    # passlib compara en tiempo constante; un hash corrupto también es "no coincide"
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        return False


def issue_token(user_id, secret, expires_hours=None):
    now = datetime.now(timezone.utc)
    payload = {"id": user_id, "iat": now}
    if expires_hours:
        payload["exp"] = now + timedelta(hours=expires_hours)
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_token(token, secret):
    """Devuelve el id de usuario del token o levanta Unauthenticated / Forbidden."""
    if not token:
        raise Unauthenticated("No access token")

    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Forbidden("Access token expired")
    except jwt.InvalidTokenError:
        raise Forbidden("Access token is invalid")

    user_id = payload.get("id")
    if user_id is None:
        raise Forbidden("Access token is invalid")
    return user_id
