"""Google Cloud implementation of the SpeechSynthesizer interface."""

from google.cloud import texttospeech
from speech_common.logging import setup_logging

from config import SynthesisConfig
from exceptions import SynthesisError

from .interfaces import SpeechSynthesizer

logger = setup_logging()


class GoogleSpeechSynthesizer(SpeechSynthesizer):
    """Handles speech synthesis using Google Cloud Text-to-Speech."""

    def __init__(
        self, client: texttospeech.TextToSpeechAsyncClient, config: SynthesisConfig
    ):
        self._client = client
        self._voice = texttospeech.VoiceSelectionParams(
            language_code=config.language_code,
            ssml_gender=texttospeech.SsmlVoiceGender[config.ssml_gender],
        )
        self._audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding[config.audio_encoding],
        )

    async def synthesize(self, text: str) -> bytes:
        try:
            response = await self._client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=self._voice,
                audio_config=self._audio_config,
            )
        except Exception as e:
            logger.exception("Google Text-to-Speech call failed")
            raise SynthesisError(f"Speech synthesis failed: {e}", cause=e) from e

        logger.info(
            "Speech synthesized",
            extra={"characters": len(text), "audio_bytes": len(response.audio_content)},
        )
        return response.audio_content
