"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel
from speech_common import GoogleCloudConfig

SERVICE_DIR = Path(__file__).resolve().parent


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: tuple[str, ...] = ("*",)
    static_dir: Path | None = None


class UploadConfig(BaseModel, frozen=True):
    """Temporary upload storage configuration."""

    upload_dir: Path


class SynthesisConfig(BaseModel, frozen=True):
    """Text-to-Speech voice and output configuration."""

    language_code: str = "en-US"
    ssml_gender: str = "NEUTRAL"
    audio_encoding: str = "MP3"
    content_type: str = "audio/mpeg"
    fallback_text: str = "Sorry, text to speech failed. Please try again."


class BatchRecognitionConfig(BaseModel, frozen=True):
    """Speech-to-Text configuration for uploaded files."""

    encoding: str = "LINEAR16"
    sample_rate_hertz: int = 16000
    language_code: str = "en-US"
    enable_automatic_punctuation: bool = True


class LiveRecognitionConfig(BaseModel, frozen=True):
    """Speech-to-Text configuration for live microphone streams."""

    encoding: str = "WEBM_OPUS"
    sample_rate_hertz: int = 48000
    language_code: str = "en-US"
    enable_automatic_punctuation: bool = True
    interim_results: bool = True
    close_on_recognition_error: bool = False
    drain_timeout_seconds: float = 5.0


class TranscoderConfig(BaseModel, frozen=True):
    """Target profile for normalized audio."""

    sample_rate_hertz: int = 16000
    channels: int = 1
    codec: str = "pcm_s16le"
    output_suffix: str = ".wav"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    uploads: UploadConfig
    google: GoogleCloudConfig
    synthesis: SynthesisConfig
    batch_recognition: BatchRecognitionConfig
    live_recognition: LiveRecognitionConfig
    transcoder: TranscoderConfig


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    static_dir = os.getenv("STATIC_DIR")
    stt_language = os.getenv("STT_LANGUAGE_CODE", "en-US")

    return AppConfig(
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_allow_origins=tuple(
                origin.strip()
                for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
                if origin.strip()
            ),
            static_dir=Path(static_dir) if static_dir else None,
        ),
        uploads=UploadConfig(
            upload_dir=Path(os.getenv("UPLOAD_DIR", str(SERVICE_DIR / "uploads"))),
        ),
        google=GoogleCloudConfig(
            credentials_path=Path(
                os.getenv("GOOGLE_CREDENTIALS_PATH", str(SERVICE_DIR / "key.json"))
            ),
        ),
        synthesis=SynthesisConfig(
            language_code=os.getenv("TTS_LANGUAGE_CODE", "en-US"),
            ssml_gender=os.getenv("TTS_VOICE_GENDER", "NEUTRAL"),
        ),
        batch_recognition=BatchRecognitionConfig(language_code=stt_language),
        live_recognition=LiveRecognitionConfig(
            language_code=stt_language,
            close_on_recognition_error=_get_bool(
                "LIVE_CLOSE_ON_RECOGNITION_ERROR", False
            ),
            drain_timeout_seconds=float(os.getenv("LIVE_DRAIN_TIMEOUT_SECONDS", "5")),
        ),
        transcoder=TranscoderConfig(),
    )
