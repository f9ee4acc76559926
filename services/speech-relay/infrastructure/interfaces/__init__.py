"""Infrastructure interface exports."""

from .speech_recognizer import RecognitionChannel, SpeechRecognizer, StreamingRecognizer
from .speech_synthesizer import SpeechSynthesizer

__all__ = [
    "RecognitionChannel",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "StreamingRecognizer",
]
