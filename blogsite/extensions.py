# blogsite/extensions.py
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

from blogsite.services.mailer import MailRelay
from blogsite.services.uploads import CloudinaryUploadSigner

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()

# Clientes compartidos por todo el proceso; las rutas los leen de app.extensions
mail_relay = MailRelay()
upload_signer = CloudinaryUploadSigner()
