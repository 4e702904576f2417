# blogsite/stores/blogs.py
"""
Operaciones sobre blogs.

Crear y borrar tocan dos tablas (blogs y user_blogs/users) en commits
separados, sin transacción que las abarque: si la segunda escritura falla
la primera queda hecha y se loguea con el blog_id para arreglarlo a mano.
"""
import logging
import secrets

from slugify import slugify
from sqlalchemy.exc import SQLAlchemyError

from blogsite.errors import DraftAccessDenied, NotFound, NotFoundOrUnauthorized, StorageError
from blogsite.models import Blog
from blogsite.stores import committing
from blogsite.stores import users

logger = logging.getLogger(__name__)

BLOG_ID_TOKEN_BYTES = 16
SLUG_MAX_LENGTH = 200  # blogs.blog_id es String(255), el token ocupa 23 más


def make_blog_id(title):
    # "Hello World!" -> "Hello-World-<token>"
    base = slugify(
        title, lowercase=False, regex_pattern=r"[^a-zA-Z0-9]+", max_length=SLUG_MAX_LENGTH
    ) or "blog"
    return f"{base}-{secrets.token_urlsafe(BLOG_ID_TOKEN_BYTES)}"


def list_latest_published(limit):
    try:
        blogs = (
            Blog.query.filter_by(draft=False)
            .order_by(Blog.published_at.desc(), Blog.id.desc())
            .limit(limit)
            .all()
        )
        return [blog.to_summary() for blog in blogs]
    except SQLAlchemyError as e:
        logger.error("❌ Error listando los últimos blogs: %s", e)
        raise StorageError("Failed to list latest blogs") from e


def upsert_blog(author_id, data):
    """Con data.id edita ese blog del autor; sin id crea uno nuevo. Devuelve el blog_id."""
    draft = bool(data.draft)

    if data.id:
        blog = Blog.query.filter_by(blog_id=data.id, author_id=author_id).first()
        if not blog:
            raise NotFoundOrUnauthorized("Blog not found or you are not authorized to edit it")

        with committing("update blog"):
            blog.title = data.title
            blog.des = data.des
            blog.banner = data.banner
            blog.content = data.content
            blog.tags = data.tags
            blog.draft = draft

        logger.info("📝 Blog editado: %s", data.id)
        return data.id

    blog = Blog(
        blog_id=make_blog_id(data.title),
        title=data.title,
        des=data.des,
        banner=data.banner,
        content=data.content,
        tags=data.tags,
        draft=draft,
        author_id=author_id,
    )
    with committing("save blog") as session:
        session.add(blog)
    blog_id, blog_ref = blog.blog_id, blog.id

    # Segunda escritura: contador del autor (+0 si es borrador) y su lista de blogs
    try:
        users.increment_post_count(author_id, 0 if draft else 1)
        users.add_owned_blog(author_id, blog_ref)
    except StorageError:
        logger.error("❌ Blog %s guardado pero sin vincular al autor %s", blog_id, author_id)
        raise StorageError("Failed to update total posts number")

    logger.info("✅ Blog creado: %s (draft=%s)", blog_id, draft)
    return blog_id


def fetch_for_read(blog_id, draft_allowed=False, edit_mode=False):
    """
    Suma la lectura y después revisa el acceso a borradores: un borrador
    pedido sin draft=true mueve el contador igual y responde error.
    """
    increment = 0 if edit_mode else 1

    with committing("read blog"):
        updated = Blog.query.filter_by(blog_id=blog_id).update(
            {Blog.total_reads: Blog.total_reads + increment}, synchronize_session=False
        )
    if not updated:
        raise NotFound("Blog not found")

    blog = Blog.query.filter_by(blog_id=blog_id).first()
    if blog is None:
        raise NotFound("Blog not found")

    if blog.draft and not draft_allowed:
        raise DraftAccessDenied()

    if increment:
        users.increment_read_count(blog.author.username, increment)

    return blog


def delete_owned_blog(blog_id, author_id):
    blog = Blog.query.filter_by(blog_id=blog_id, author_id=author_id).first()
    if not blog:
        raise NotFoundOrUnauthorized()

    blog_ref = blog.id
    with committing("delete blog") as session:
        session.delete(blog)

    try:
        users.remove_owned_blog(author_id, blog_ref)
    except StorageError:
        logger.error("❌ Blog %s borrado pero sigue en la lista del autor %s", blog_id, author_id)
        raise

    logger.info("🗑️ Blog borrado: %s", blog_id)
