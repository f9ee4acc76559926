"""Dependency injection configuration for the speech-relay service."""

from dataclasses import dataclass

from google.auth.credentials import Credentials
from google.cloud import speech, texttospeech
from starlette.requests import HTTPConnection

from config import AppConfig, LiveRecognitionConfig, UploadConfig
from domain import AudioTranscoder, TextExtractor, TranscriptBuilder
from handlers import SynthesisHandler, TranscriptionHandler
from infrastructure import (
    GoogleSpeechRecognizer,
    GoogleSpeechSynthesizer,
    GoogleStreamingRecognizer,
)
from infrastructure.interfaces import StreamingRecognizer


@dataclass(frozen=True)
class Services:
    """Process-wide components, built once during startup."""

    config: AppConfig
    synthesis_handler: SynthesisHandler
    transcription_handler: TranscriptionHandler
    streaming_recognizer: StreamingRecognizer


def build_services(config: AppConfig, credentials: Credentials) -> Services:
    """
    Creates the Google clients and the handlers that use them.

    Must run inside the event loop: the async gRPC clients bind to it.
    """
    tts_client = texttospeech.TextToSpeechAsyncClient(credentials=credentials)
    stt_client = speech.SpeechAsyncClient(credentials=credentials)

    synthesis_handler = SynthesisHandler(
        GoogleSpeechSynthesizer(tts_client, config.synthesis),
        TextExtractor(),
        config.synthesis,
    )
    transcription_handler = TranscriptionHandler(
        AudioTranscoder(config.transcoder),
        GoogleSpeechRecognizer(stt_client, config.batch_recognition),
        TranscriptBuilder(),
        config.transcoder,
    )
    return Services(
        config=config,
        synthesis_handler=synthesis_handler,
        transcription_handler=transcription_handler,
        streaming_recognizer=GoogleStreamingRecognizer(
            stt_client, config.live_recognition
        ),
    )


def _services(connection: HTTPConnection) -> Services:
    return connection.app.state.services


def get_synthesis_handler(connection: HTTPConnection) -> SynthesisHandler:
    """Returns the configured synthesis handler."""
    return _services(connection).synthesis_handler


def get_transcription_handler(connection: HTTPConnection) -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    return _services(connection).transcription_handler


def get_streaming_recognizer(connection: HTTPConnection) -> StreamingRecognizer:
    """Returns the configured streaming recognizer."""
    return _services(connection).streaming_recognizer


def get_upload_config(connection: HTTPConnection) -> UploadConfig:
    """Returns the temporary upload configuration."""
    return _services(connection).config.uploads


def get_live_config(connection: HTTPConnection) -> LiveRecognitionConfig:
    """Returns the live streaming configuration."""
    return _services(connection).config.live_recognition
