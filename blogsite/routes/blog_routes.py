# blogsite/routes/blog_routes.py
import logging

from flask import Blueprint, current_app, g, jsonify

from blogsite.auth.decorators import jwt_required
from blogsite.errors import BlogApiError, ValidationError, error_response
from blogsite.schemas import CreateBlogRequest, DeleteBlogRequest, GetBlogRequest, parse_body
from blogsite.stores import blogs
from blogsite.utils.validators import validate_blog

logger = logging.getLogger(__name__)

blog_bp = Blueprint("blogs", __name__)


# 🟣 Últimos blogs publicados
@blog_bp.route("/latest-blogs", methods=["GET"])
def latest_blogs():
    try:
        latest = blogs.list_latest_published(current_app.config["LATEST_BLOGS_LIMIT"])
        return jsonify({"blogs": latest}), 200
    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error al obtener los blogs: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500


# 🟢 Crear o editar (con id) un blog
@blog_bp.route("/create-blog", methods=["POST"])
@jwt_required
def create_blog():
    try:
        data = parse_body(CreateBlogRequest)

        error = validate_blog(data.title, data.des, data.tags, data.content, data.draft)
        if error:
            raise ValidationError(error)

        blog_id = blogs.upsert_blog(g.current_user_id, data)
        return jsonify({"id": blog_id}), 200

    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error al guardar el blog: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500


# 🔵 Leer un blog (suma lectura salvo en modo edición)
@blog_bp.route("/get-blog", methods=["POST"])
def get_blog():
    try:
        data = parse_body(GetBlogRequest)
        blog = blogs.fetch_for_read(data.blog_id, draft_allowed=bool(data.draft), edit_mode=data.edit_mode)
        return jsonify({"blog": blog.to_dict()}), 200

    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error al leer el blog: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500


# 🔴 Borrar un blog propio
@blog_bp.route("/delete-blog", methods=["POST"])
@jwt_required
def delete_blog():
    try:
        data = parse_body(DeleteBlogRequest)
        blogs.delete_owned_blog(data.blog_id, g.current_user_id)
        return jsonify({"message": "Blog deleted successfully"}), 200

    except BlogApiError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("❌ Error al borrar el blog: %s", e)
        return jsonify({"error": "Internal Server Error"}), 500
