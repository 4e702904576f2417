# blogsite/__init__.py
import logging

import cloudinary
from flask import Flask

from blogsite.config import Config
from blogsite.extensions import db, migrate, cors, mail_relay, upload_signer
from blogsite.routes import register_routes

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("blogsite").setLevel(level)
    app.logger.setLevel(level)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    cloudinary.config(
        cloud_name=app.config["CLOUDINARY_CLOUD_NAME"],
        api_key=app.config["CLOUDINARY_API_KEY"],
        api_secret=app.config["CLOUDINARY_API_SECRET"],
    )

    # db, CORS y los clientes de correo y Cloudinary
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": "*"}},
        allow_headers=["Content-Type", "Authorization"]
    )
    mail_relay.init_app(app)
    upload_signer.init_app(app)

    # signup/signin, blogs, URL de subida y formulario de contacto
    register_routes(app)

    if app.config.get("CREATE_TABLES_ON_STARTUP"):
        from blogsite import models  # noqa: F401  registra las tablas en db.metadata
        with app.app_context():
            db.create_all()

    return app
