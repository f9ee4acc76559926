"""Handler for text-to-speech requests."""

from speech_common import EngineFailure
from speech_common.logging import setup_logging

from config import SynthesisConfig
from domain import SynthesisResult, TextExtractor, UploadedDocument
from exceptions import (
    EmptyInputError,
    SynthesisUnavailableError,
    UnsupportedMediaTypeError,
)
from infrastructure.interfaces import SpeechSynthesizer
from utils import remove_files

logger = setup_logging()


class SynthesisHandler:
    """Orchestrates text resolution, synthesis and the spoken fallback."""

    def __init__(
        self,
        synthesizer: SpeechSynthesizer,
        text_extractor: TextExtractor,
        config: SynthesisConfig,
    ):
        self._synthesizer = synthesizer
        self._text_extractor = text_extractor
        self._config = config

    async def synthesize(
        self, text: str | None = None, document: UploadedDocument | None = None
    ) -> SynthesisResult:
        """
        Synthesizes speech from text or from an uploaded document.

        Args:
            text: Text to speak. Takes precedence when non-empty.
            document: Uploaded .txt/.pdf/.docx used when no text was sent.

        Returns:
            SynthesisResult with MP3 audio, possibly the spoken apology.

        Raises:
            UnsupportedMediaTypeError: If the document type is not supported.
            EmptyInputError: If no usable text was found.
            SynthesisUnavailableError: If primary and fallback synthesis fail.
        """
        if not text and document is not None:
            if not self._text_extractor.is_supported(document.extension):
                remove_files(document.path)
                raise UnsupportedMediaTypeError(document.extension)

        try:
            if not text and document is not None:
                text = await self._extract(document)

            if not text or not text.strip():
                raise EmptyInputError()

            audio = await self._synthesizer.synthesize(text)
            return SynthesisResult(
                audio_content=audio, content_type=self._config.content_type
            )
        except EngineFailure as e:
            logger.warning(
                "Synthesis failed, speaking fallback message",
                extra={"engine": e.engine, "error": str(e)},
            )
            return await self._fallback()

    async def _extract(self, document: UploadedDocument) -> str:
        """Extracts text and always removes the uploaded file."""
        try:
            return await self._text_extractor.extract(document)
        finally:
            remove_files(document.path)

    async def _fallback(self) -> SynthesisResult:
        try:
            audio = await self._synthesizer.synthesize(self._config.fallback_text)
        except EngineFailure as e:
            logger.exception("Fallback synthesis failed")
            raise SynthesisUnavailableError(e) from e
        return SynthesisResult(
            audio_content=audio,
            content_type=self._config.content_type,
            is_fallback=True,
        )
