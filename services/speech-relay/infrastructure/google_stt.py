"""Google Cloud implementations of the recognition interfaces."""

import asyncio
from collections.abc import AsyncIterator

from google.cloud import speech
from speech_common.logging import setup_logging

from config import BatchRecognitionConfig, LiveRecognitionConfig
from domain.models import Alternative, RecognitionResult, TranscriptSegment
from exceptions import RecognitionError

from .interfaces import RecognitionChannel, SpeechRecognizer, StreamingRecognizer

logger = setup_logging()


class GoogleSpeechRecognizer(SpeechRecognizer):
    """Handles non-streaming recognition using Google Cloud Speech-to-Text."""

    def __init__(
        self, client: speech.SpeechAsyncClient, config: BatchRecognitionConfig
    ):
        self._client = client
        self._config = speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding[config.encoding],
            sample_rate_hertz=config.sample_rate_hertz,
            language_code=config.language_code,
            enable_automatic_punctuation=config.enable_automatic_punctuation,
        )

    async def recognize(self, audio_content: bytes) -> list[RecognitionResult]:
        try:
            response = await self._client.recognize(
                config=self._config,
                audio=speech.RecognitionAudio(content=audio_content),
            )
        except Exception as e:
            logger.exception("Google Speech-to-Text call failed")
            raise RecognitionError(str(e), cause=e) from e

        results = [
            RecognitionResult(
                alternatives=[
                    Alternative(
                        transcript=alternative.transcript,
                        confidence=alternative.confidence,
                    )
                    for alternative in result.alternatives
                ]
            )
            for result in response.results
        ]
        logger.info("Audio recognized", extra={"result_count": len(results)})
        return results


class GoogleRecognitionChannel(RecognitionChannel):
    """One streaming_recognize call fed from an in-order audio queue."""

    def __init__(
        self,
        client: speech.SpeechAsyncClient,
        streaming_config: speech.StreamingRecognitionConfig,
    ):
        self._client = client
        self._streaming_config = streaming_config
        self._audio: asyncio.Queue[bytes | None] = asyncio.Queue()
        self._ended = False
        self._terminated = False

    def write(self, chunk: bytes) -> None:
        if self._terminated:
            return
        if self._ended:
            raise RuntimeError("Cannot write to a half-closed recognition channel")
        self._audio.put_nowait(chunk)

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        self._audio.put_nowait(None)

    async def _requests(self) -> AsyncIterator[speech.StreamingRecognizeRequest]:
        yield speech.StreamingRecognizeRequest(streaming_config=self._streaming_config)
        while True:
            chunk = await self._audio.get()
            if chunk is None:
                return
            yield speech.StreamingRecognizeRequest(audio_content=chunk)

    async def segments(self) -> AsyncIterator[TranscriptSegment]:
        try:
            responses = await self._client.streaming_recognize(
                requests=self._requests()
            )
            async for response in responses:
                segment = _first_segment(response)
                if segment is not None:
                    yield segment
        except Exception as e:
            logger.exception("Google streaming recognition failed")
            raise RecognitionError(str(e), cause=e) from e
        finally:
            self._terminate()

    def _terminate(self) -> None:
        """Stops accepting audio once the call is over and releases queued chunks."""
        self._terminated = True
        while not self._audio.empty():
            self._audio.get_nowait()


def _first_segment(
    response: speech.StreamingRecognizeResponse,
) -> TranscriptSegment | None:
    """Returns the top alternative of the first result, if there is one."""
    if not response.results:
        return None
    result = response.results[0]
    if not result.alternatives:
        return None
    return TranscriptSegment(
        text=result.alternatives[0].transcript, is_final=result.is_final
    )


class GoogleStreamingRecognizer(StreamingRecognizer):
    """Opens streaming recognition channels on Google Cloud Speech-to-Text."""

    def __init__(self, client: speech.SpeechAsyncClient, config: LiveRecognitionConfig):
        self._client = client
        self._streaming_config = speech.StreamingRecognitionConfig(
            config=speech.RecognitionConfig(
                encoding=speech.RecognitionConfig.AudioEncoding[config.encoding],
                sample_rate_hertz=config.sample_rate_hertz,
                language_code=config.language_code,
                enable_automatic_punctuation=config.enable_automatic_punctuation,
            ),
            interim_results=config.interim_results,
        )

    def open_channel(self) -> RecognitionChannel:
        logger.info("Opening streaming recognition channel")
        return GoogleRecognitionChannel(self._client, self._streaming_config)
