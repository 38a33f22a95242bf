"""Firebase initialisation reads its credentials from settings."""
from unittest.mock import patch

import firebase_admin

from mentorship_admin.config import init_firebase
from mentorship_admin.core.settings import settings


def test_init_firebase_uses_configured_cert_path(tmp_path, monkeypatch):
    key_file = tmp_path / "service-account.json"
    key_file.write_text("{}")
    monkeypatch.setattr(settings, "firebase_cert_json", None)
    monkeypatch.setattr(settings, "firebase_cert_path", str(key_file))

    with patch.object(firebase_admin, "_apps", {}), \
            patch("mentorship_admin.config.credentials.Certificate") as certificate, \
            patch("mentorship_admin.config.firebase_admin.initialize_app") as initialize_app:
        init_firebase()

    certificate.assert_called_once_with(str(key_file))
    initialize_app.assert_called_once_with(certificate.return_value)


def test_init_firebase_prefers_inline_json(monkeypatch):
    monkeypatch.setattr(settings, "firebase_cert_json", '{"project_id": "mentorship"}')

    with patch.object(firebase_admin, "_apps", {}), \
            patch("mentorship_admin.config.credentials.Certificate") as certificate, \
            patch("mentorship_admin.config.firebase_admin.initialize_app"):
        init_firebase()

    certificate.assert_called_once_with({"project_id": "mentorship"})


def test_init_firebase_skips_missing_key_file(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "firebase_cert_json", None)
    monkeypatch.setattr(settings, "firebase_cert_path", str(tmp_path / "absent.json"))

    with patch.object(firebase_admin, "_apps", {}), \
            patch("mentorship_admin.config.firebase_admin.initialize_app") as initialize_app:
        init_firebase()

    initialize_app.assert_not_called()
