# blogsite/utils/validators.py
"""
Reglas de validación de los formularios. Funciones puras:
devuelven el mensaje de error o None si todo está bien.
"""
import re

EMAIL_RE = re.compile(r"^\w+([\.-]?\w+)*@\w+([\.-]?\w+)*(\.\w{2,3})+$", re.ASCII)
PASSWORD_RE = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}$")

MAX_DESCRIPTION_LENGTH = 200
MAX_TAGS = 10


def validate_fullname(fullname):
    if len(fullname or "") < 3:
        return "Fullname must be at least 3 letters long"
    return None


def validate_email(email):
    if not email:
        return "Enter Email"
    if not EMAIL_RE.fullmatch(email):
        return "Enter Valid Email"
    return None


def validate_password(password):
    if not PASSWORD_RE.fullmatch(password or ""):
        return ("Password should be 6 to 20 characters long with a numeric, "
                "1 lowercase and 1 uppercase letters")
    return None


def validate_signup(fullname, email, password):
    return validate_fullname(fullname) or validate_email(email) or validate_password(password)


def validate_blog(title, des, tags, content, draft):
    """Los borradores solo necesitan título; publicar exige todo lo demás."""
    if not title:
        return "Title cannot be empty"

    if draft:
        return None

    if not des or not tags or not content:
        return "Incomplete blog data"
    if len(des) > MAX_DESCRIPTION_LENGTH:
        return "Description must be between 1 to 200 characters"
    if not isinstance(tags, list) or len(tags) > MAX_TAGS:
        return "Provide 1 to 10 tags for the blog"
    return None
