# blogsite/routes/__init__.py
from flask import Flask

def register_routes(app: Flask):
    """Monta las rutas de auth, blogs, subida y contacto en la raíz, sin prefijo."""
    # los blueprints importan stores -> models -> extensions, por eso van acá adentro
    from .auth import auth_bp
    from .blog_routes import blog_bp
    from .upload_routes import upload_bp
    from .contact_routes import contact_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(upload_bp)
    app.register_blueprint(contact_bp)
