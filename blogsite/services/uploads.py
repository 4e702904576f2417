# blogsite/services/uploads.py
import secrets
import time
from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode

import cloudinary.utils
from cloudinary.exceptions import Error as CloudinaryError

from blogsite.errors import ExternalServiceError

# Cloudinary acepta una firma durante una hora desde su timestamp
SIGNATURE_TTL = timedelta(hours=1)
UPLOAD_FORMAT = "jpg"


class CloudinaryUploadSigner:
    """Genera URLs firmadas para que el frontend suba el banner directo a Cloudinary."""

    def __init__(self, app=None):
        self.options = {}
        self.folder = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.options = {
            "cloud_name": app.config.get("CLOUDINARY_CLOUD_NAME"),
            "api_key": app.config.get("CLOUDINARY_API_KEY"),
            "api_secret": app.config.get("CLOUDINARY_API_SECRET"),
        }
        self.folder = app.config.get("UPLOAD_FOLDER")
        app.extensions["upload_signer"] = self

    def generate_upload_url(self):
        now = time.time()
        # 🖼️ nombre aleatorio + timestamp en ms
        public_id = f"{secrets.token_urlsafe(12)}-{int(now * 1000)}"
        params = {
            "public_id": public_id,
            "folder": self.folder,
            "timestamp": int(now),
            "format": UPLOAD_FORMAT,
        }

        try:
            signed = cloudinary.utils.sign_request(params, self.options)
            endpoint = cloudinary.utils.cloudinary_api_url(
                "upload", resource_type="image", cloud_name=self.options.get("cloud_name")
            )
        except (ValueError, CloudinaryError) as e:
            raise ExternalServiceError(f"Could not sign upload URL: {e}") from e

        return {
            "url": f"{endpoint}?{urlencode(signed)}",
            "expires_at": datetime.fromtimestamp(now, tz=timezone.utc) + SIGNATURE_TTL,
        }
