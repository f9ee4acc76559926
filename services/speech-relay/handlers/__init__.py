"""Request and session handlers."""

from .live_session import LiveTranscriptionSession
from .synthesis_handler import SynthesisHandler
from .transcription_handler import TranscriptionHandler

__all__ = ["LiveTranscriptionSession", "SynthesisHandler", "TranscriptionHandler"]
