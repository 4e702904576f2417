# blogsite/config.py
import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # 🗄️ Base de datos
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///blogsite.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CREATE_TABLES_ON_STARTUP = os.environ.get("CREATE_TABLES_ON_STARTUP", "1") == "1"

    # 🔐 JWT y contraseñas
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "supersecret")
    JWT_EXPIRATION_HOURS = int(os.environ.get("JWT_EXPIRATION_HOURS", 8))  # 0 = sin expiración
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 10))

    # 🖼️ Cloudinary
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "blog_banners")

    # ✉️ Relay de correo (API HTTP estilo Mailgun)
    MAIL_RELAY_URL = os.environ.get("MAIL_RELAY_URL")
    MAIL_API_KEY = os.environ.get("MAIL_API_KEY")
    MAIL_SENDER = os.environ.get("MAIL_SENDER", "no-reply@blogsite.dev")
    MAIL_RECIPIENT = os.environ.get("MAIL_RECIPIENT", "contact@blogsite.dev")
    MAIL_TIMEOUT = int(os.environ.get("MAIL_TIMEOUT", 5))

    LATEST_BLOGS_LIMIT = 5
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    CREATE_TABLES_ON_STARTUP = True
    JWT_SECRET_KEY = "test-secret"
    BCRYPT_ROUNDS = 4
    CLOUDINARY_CLOUD_NAME = "demo"
    CLOUDINARY_API_KEY = "123456789012345"
    CLOUDINARY_API_SECRET = "test-api-secret"
    MAIL_RELAY_URL = "https://mail.example.test/v3/messages"
    MAIL_API_KEY = "key-test"
    LOG_LEVEL = "DEBUG"
