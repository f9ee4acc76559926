"""Abstract interface for speech synthesis."""

from abc import ABC, abstractmethod


class SpeechSynthesizer(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    async def synthesize(self, text: str) -> bytes:
        """
        Synthesizes speech for the given text.

        Args:
            text: Non-empty text to speak.

        Returns:
            Encoded audio bytes.

        Raises:
            SynthesisError: If the engine call fails.
        """
        pass
