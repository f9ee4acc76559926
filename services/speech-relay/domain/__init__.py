"""Domain layer exports."""

from .audio_transcoder import AudioTranscoder
from .models import (
    Alternative,
    RecognitionResult,
    SessionState,
    SynthesisResult,
    TranscriptionJob,
    TranscriptSegment,
    UploadedDocument,
)
from .text_extractor import TextExtractor
from .transcript_builder import TranscriptBuilder

__all__ = [
    "Alternative",
    "AudioTranscoder",
    "RecognitionResult",
    "SessionState",
    "SynthesisResult",
    "TextExtractor",
    "TranscriptBuilder",
    "TranscriptionJob",
    "TranscriptSegment",
    "UploadedDocument",
]
