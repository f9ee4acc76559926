"""Abstract interfaces for batch and streaming speech recognition."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from domain.models import RecognitionResult, TranscriptSegment


class SpeechRecognizer(ABC):
    """Abstract base class for non-streaming recognition backends."""

    @abstractmethod
    async def recognize(self, audio_content: bytes) -> list[RecognitionResult]:
        """
        Recognizes speech in a complete audio payload.

        Args:
            audio_content: Normalized audio bytes.

        Returns:
            Result entries in engine order.

        Raises:
            RecognitionError: If the engine call fails.
        """
        pass


class RecognitionChannel(ABC):
    """A single duplex streaming recognition call."""

    @abstractmethod
    def write(self, chunk: bytes) -> None:
        """Queues an audio chunk for the engine, preserving order."""
        pass

    @abstractmethod
    def end(self) -> None:
        """Signals end-of-input (half-close). Trailing results may still arrive."""
        pass

    @abstractmethod
    def segments(self) -> AsyncIterator[TranscriptSegment]:
        """
        Yields transcripts in emission order until the engine closes the stream.

        Raises:
            RecognitionError: If the engine reports an error.
        """
        pass


class StreamingRecognizer(ABC):
    """Abstract base class for streaming recognition backends."""

    @abstractmethod
    def open_channel(self) -> RecognitionChannel:
        """Opens a new recognition channel. Channels are never shared."""
        pass
