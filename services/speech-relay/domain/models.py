"""Domain models for the speech-relay service."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class UploadedDocument(BaseModel, frozen=True):
    """A document uploaded for synthesis, stored at a temporary path."""

    path: Path
    filename: str

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()


class SynthesisResult(BaseModel, frozen=True):
    """Audio produced by the synthesis engine."""

    audio_content: bytes
    content_type: str = "audio/mpeg"
    is_fallback: bool = False


class TranscriptionJob(BaseModel, frozen=True):
    """An uploaded audio file and its normalized sibling artifact."""

    upload_path: Path
    normalized_path: Path

    @classmethod
    def for_upload(cls, upload_path: Path, suffix: str = ".wav") -> "TranscriptionJob":
        return cls(
            upload_path=upload_path,
            normalized_path=upload_path.with_name(upload_path.name + suffix),
        )


class Alternative(BaseModel, frozen=True):
    """A single recognition hypothesis."""

    transcript: str
    confidence: float = 0.0


class RecognitionResult(BaseModel, frozen=True):
    """One result entry returned by batch recognition."""

    alternatives: list[Alternative] = []


class TranscriptSegment(BaseModel, frozen=True):
    """A partial or final transcript emitted by streaming recognition."""

    text: str
    is_final: bool = False


class SessionState(str, Enum):
    """Lifecycle of a live transcription session."""

    CONNECTING = "connecting"
    STREAMING = "streaming"
    CLOSING = "closing"
    CLOSED = "closed"
