import json
from unittest.mock import patch

import pytest
from google.oauth2 import service_account
from speech_common import GoogleCloudConfig, StartupError, load_credentials

from config import load_config


def test_load_config_defaults(monkeypatch):
    for name in (
        "PORT",
        "STATIC_DIR",
        "CORS_ALLOW_ORIGINS",
        "LIVE_CLOSE_ON_RECOGNITION_ERROR",
        "GOOGLE_CREDENTIALS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.server.port == 3000
    assert config.server.static_dir is None
    assert config.server.cors_allow_origins == ("*",)
    assert config.google.credentials_path.name == "key.json"
    assert config.synthesis.language_code == "en-US"
    assert config.synthesis.audio_encoding == "MP3"
    assert config.batch_recognition.sample_rate_hertz == 16000
    assert config.live_recognition.encoding == "WEBM_OPUS"
    assert config.live_recognition.sample_rate_hertz == 48000
    assert config.live_recognition.close_on_recognition_error is False
    assert config.transcoder.channels == 1


def test_load_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path))
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LIVE_CLOSE_ON_RECOGNITION_ERROR", "true")
    monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", str(tmp_path / "sa.json"))

    config = load_config()

    assert config.server.port == 8080
    assert config.server.static_dir == tmp_path
    assert config.server.cors_allow_origins == ("http://a.test", "http://b.test")
    assert config.live_recognition.close_on_recognition_error is True
    assert config.google.credentials_path == tmp_path / "sa.json"


def test_missing_credentials_file_is_fatal(tmp_path):
    config = GoogleCloudConfig(credentials_path=tmp_path / "key.json")

    with pytest.raises(StartupError, match="Missing Google credentials"):
        load_credentials(config)


def test_malformed_credentials_file_is_fatal(tmp_path):
    path = tmp_path / "key.json"
    path.write_text("{not json")

    with pytest.raises(StartupError, match="Unreadable"):
        load_credentials(GoogleCloudConfig(credentials_path=path))


def test_incomplete_service_account_is_fatal(tmp_path):
    path = tmp_path / "key.json"
    path.write_text(json.dumps({"type": "service_account"}))

    with pytest.raises(StartupError, match="Invalid Google credentials"):
        load_credentials(GoogleCloudConfig(credentials_path=path))


def test_valid_credentials_are_loaded(tmp_path):
    path = tmp_path / "key.json"
    info = {"type": "service_account", "project_id": "demo"}
    path.write_text(json.dumps(info))
    sentinel = object()

    with patch.object(
        service_account.Credentials,
        "from_service_account_info",
        return_value=sentinel,
    ) as from_info:
        credentials = load_credentials(GoogleCloudConfig(credentials_path=path))

    assert credentials is sentinel
    from_info.assert_called_once_with(info)
