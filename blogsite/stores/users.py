# blogsite/stores/users.py
import logging
import secrets

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blogsite.errors import DuplicateEmail, NotFound, StorageError
from blogsite.extensions import db
from blogsite.models import User, OwnedBlog
from blogsite.models.user import DEFAULT_PROFILE_IMG
from blogsite.stores import committing

logger = logging.getLogger(__name__)

USERNAME_SUFFIX_LENGTH = 5


def generate_unique_username(email):
    """
    Parte local del email; si ya está tomada se le agrega un sufijo aleatorio.
    No es atómico: la restricción UNIQUE de users.username frena la carrera.
    """
    username = email.split("@")[0]
    if User.query.filter_by(username=username).first():
        username += secrets.token_urlsafe(USERNAME_SUFFIX_LENGTH)[:USERNAME_SUFFIX_LENGTH]
    return username


def create_user(fullname, email, password_hash, username):
    user = User(
        fullname=fullname,
        email=email,
        username=username,
        password=password_hash,
        profile_img=DEFAULT_PROFILE_IMG.format(username=username),
    )
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if User.query.filter_by(email=email).first():
            raise DuplicateEmail() from e
        logger.error("❌ Error creando usuario %s: %s", username, e)
        raise StorageError("Failed to create user") from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("❌ Error creando usuario %s: %s", username, e)
        raise StorageError("Failed to create user") from e

    logger.info("✅ Usuario creado: %s", username)
    return user


def find_by_email(email):
    user = User.query.filter_by(email=email).first()
    if not user:
        raise NotFound("Email not found")
    return user


def increment_post_count(user_id, delta):
    with committing("update total posts number"):
        User.query.filter_by(id=user_id).update(
            {User.total_posts: User.total_posts + delta}, synchronize_session=False
        )


def add_owned_blog(user_id, blog_ref):
    with committing("add blog to author") as session:
        session.add(OwnedBlog(user_id=user_id, blog_ref=blog_ref))


def remove_owned_blog(user_id, blog_ref):
    with committing("remove blog from author"):
        OwnedBlog.query.filter_by(user_id=user_id, blog_ref=blog_ref).delete(
            synchronize_session=False
        )


def increment_read_count(username, delta):
    """Best-effort: si falla se loguea y se sigue, nunca rompe la lectura."""
    try:
        User.query.filter_by(username=username).update(
            {User.total_reads: User.total_reads + delta}, synchronize_session=False
        )
        db.session.commit()
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("⚠️ No se pudo sumar la lectura al autor %s: %s", username, e)
        return False
