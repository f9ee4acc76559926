from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from speech_common import GoogleCloudConfig

from config import (
    AppConfig,
    BatchRecognitionConfig,
    LiveRecognitionConfig,
    ServerConfig,
    SynthesisConfig,
    TranscoderConfig,
    UploadConfig,
)
from dependencies import Services
from domain import TextExtractor, TranscriptBuilder
from handlers import SynthesisHandler, TranscriptionHandler
from routes import live_router, transcribe_router, tts_router

from fakes import (
    FakeRecognizer,
    FakeStreamingRecognizer,
    FakeSynthesizer,
    FakeTranscoder,
    results_for,
)


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        server=ServerConfig(),
        uploads=UploadConfig(upload_dir=tmp_path / "uploads"),
        google=GoogleCloudConfig(credentials_path=tmp_path / "key.json"),
        synthesis=SynthesisConfig(),
        batch_recognition=BatchRecognitionConfig(),
        live_recognition=LiveRecognitionConfig(drain_timeout_seconds=1.0),
        transcoder=TranscoderConfig(),
    )


@pytest.fixture
def upload_dir(app_config) -> Path:
    return app_config.uploads.upload_dir


@pytest.fixture
def synthesizer() -> FakeSynthesizer:
    return FakeSynthesizer()


@pytest.fixture
def transcoder() -> FakeTranscoder:
    return FakeTranscoder()


@pytest.fixture
def recognizer() -> FakeRecognizer:
    return FakeRecognizer(results_for("hello", "world"))


@pytest.fixture
def streaming_recognizer() -> FakeStreamingRecognizer:
    return FakeStreamingRecognizer()


@pytest.fixture
def synthesis_handler(synthesizer, app_config) -> SynthesisHandler:
    return SynthesisHandler(synthesizer, TextExtractor(), app_config.synthesis)


@pytest.fixture
def transcription_handler(transcoder, recognizer, app_config) -> TranscriptionHandler:
    return TranscriptionHandler(
        transcoder, recognizer, TranscriptBuilder(), app_config.transcoder
    )


@pytest.fixture
def app(
    app_config, synthesis_handler, transcription_handler, streaming_recognizer
) -> FastAPI:
    app = FastAPI()
    app.include_router(tts_router)
    app.include_router(transcribe_router)
    app.include_router(live_router)
    app.state.services = Services(
        config=app_config,
        synthesis_handler=synthesis_handler,
        transcription_handler=transcription_handler,
        streaming_recognizer=streaming_recognizer,
    )
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
