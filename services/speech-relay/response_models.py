"""Response models for the speech-relay API."""

from pydantic import BaseModel


class TranscriptResponse(BaseModel):
    """Response returned after a successful file transcription."""

    transcript: str


class ErrorResponse(BaseModel):
    """JSON error body for transcription failures."""

    error: str
