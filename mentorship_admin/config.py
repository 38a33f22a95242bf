import os
import json
import logging

import firebase_admin
from firebase_admin import credentials

from mentorship_admin.core.settings import settings

logger = logging.getLogger("mentorship_admin.config")


def init_firebase():
    """Initialize Firebase admin SDK.

    Behavior:
    - If the default app already exists, do nothing.
    - If FIREBASE_CERT_JSON env var is present, parse it as JSON and use it.
    - Else if the FIREBASE_CERT_PATH file (default 'firebase_key.json') exists, use that path.
    - Else, do nothing (avoid raising at import time).
    """
    if firebase_admin._apps:
        return

    fb_json = settings.firebase_cert_json
    if fb_json:
        try:
            cred = credentials.Certificate(json.loads(fb_json))
            firebase_admin.initialize_app(cred)
            return
        except (ValueError, IOError) as e:
            # Fall through to file-based loading which may still work
            logger.warning(f"Failed to init Firebase from FIREBASE_CERT_JSON: {e}")

    fb_path = settings.firebase_cert_path
    if fb_path and os.path.exists(fb_path):
        try:
            cred = credentials.Certificate(fb_path)
            firebase_admin.initialize_app(cred)
            return
        except (ValueError, IOError) as e:
            logger.warning(f"Failed to init Firebase from path {fb_path}: {e}")

    logger.warning("No Firebase credentials found; skipping Firebase initialization.")
