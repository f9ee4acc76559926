"""Infrastructure layer exports."""

from .google_stt import (
    GoogleRecognitionChannel,
    GoogleSpeechRecognizer,
    GoogleStreamingRecognizer,
)
from .google_tts import GoogleSpeechSynthesizer

__all__ = [
    "GoogleRecognitionChannel",
    "GoogleSpeechRecognizer",
    "GoogleSpeechSynthesizer",
    "GoogleStreamingRecognizer",
]
