# blogsite/schemas.py
"""
Un modelo pydantic por cada cuerpo de request.

Los campos tienen valores vacíos por defecto: la presencia la revisan los
validadores (blogsite.utils.validators) para mantener sus mensajes. Acá solo
se rechaza un cuerpo con forma incorrecta (no es JSON, tags no es lista, etc).
"""
from typing import Any, List, Optional

from flask import request
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from blogsite.errors import ValidationError


class RequestSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class SignupRequest(RequestSchema):
    fullname: str = ""
    email: str = ""
    password: str = ""


class SigninRequest(RequestSchema):
    email: str = ""
    password: str = ""


class CreateBlogRequest(RequestSchema):
    id: Optional[str] = None
    title: str = ""
    des: Optional[str] = ""
    banner: Optional[str] = ""
    tags: List[str] = []
    content: Any = None
    draft: Optional[bool] = False


class GetBlogRequest(RequestSchema):
    blog_id: str = ""
    draft: Optional[bool] = False
    mode: Optional[str] = ""

    @property
    def edit_mode(self):
        return self.mode == "edit"


class DeleteBlogRequest(RequestSchema):
    blog_id: str = ""


class ContactRequest(RequestSchema):
    firstName: str = ""
    phone: str = ""
    email: str = ""
    message: str = ""


def parse_body(schema):
    """Lee el JSON del request y lo valida contra el schema del endpoint."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise ValidationError(f"Invalid field '{field}': {first.get('msg')}") from e
