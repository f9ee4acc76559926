"""Live transcription bridge between a client socket and a recognition stream."""

import asyncio
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from speech_common.logging import setup_logging

from config import LiveRecognitionConfig
from domain import SessionState
from exceptions import RecognitionError
from infrastructure.interfaces import RecognitionChannel, StreamingRecognizer

logger = setup_logging()

RECOGNITION_ERROR_MESSAGE = "Speech recognition error"

SendJson = Callable[[dict[str, Any]], Awaitable[None]]
CloseClient = Callable[[int], Awaitable[None]]


class LiveTranscriptionSession:
    """
    Pairs one client connection with one streaming recognition channel.

    Audio frames are forwarded in arrival order; every transcript the engine
    emits, interim or final, is pushed back to the client as it arrives.
    Closing the client half-closes the recognition channel exactly once.
    """

    def __init__(
        self,
        recognizer: StreamingRecognizer,
        send_json: SendJson,
        close_client: CloseClient,
        config: LiveRecognitionConfig,
    ):
        self.session_id = str(uuid.uuid4())
        self.state = SessionState.CONNECTING
        self._recognizer = recognizer
        self._send_json = send_json
        self._close_client = close_client
        self._config = config
        self._channel: RecognitionChannel | None = None
        self._relay_task: asyncio.Task | None = None
        self._recognition_open = False

    async def start(self) -> None:
        """Opens the recognition channel and starts relaying transcripts."""
        self._channel = self._recognizer.open_channel()
        self._recognition_open = True
        self._relay_task = asyncio.create_task(self._relay_transcripts())
        self.state = SessionState.STREAMING
        logger.info("Live session started", extra={"session_id": self.session_id})

    def forward_audio(self, chunk: bytes) -> None:
        """Forwards one raw audio frame to the recognition channel."""
        if self.state is not SessionState.STREAMING or self._channel is None:
            logger.warning(
                "Dropping audio frame for inactive session",
                extra={"session_id": self.session_id, "state": self.state.value},
            )
            return
        if not self._recognition_open:
            logger.debug(
                "Recognition stream ended, dropping audio frame",
                extra={"session_id": self.session_id},
            )
            return
        self._channel.write(chunk)

    async def close(self) -> None:
        """Half-closes the recognition channel and waits for it to drain."""
        if self.state in (SessionState.CLOSING, SessionState.CLOSED):
            return
        self.state = SessionState.CLOSING

        if self._channel is not None:
            self._channel.end()

        if self._relay_task is not None:
            try:
                await asyncio.wait_for(
                    self._relay_task, timeout=self._config.drain_timeout_seconds
                )
            except asyncio.TimeoutError:
                logger.warning(
                    "Recognition stream did not drain in time",
                    extra={"session_id": self.session_id},
                )

        self.state = SessionState.CLOSED
        logger.info("Live session closed", extra={"session_id": self.session_id})

    async def _relay_transcripts(self) -> None:
        try:
            async for segment in self._channel.segments():
                logger.info(
                    "Transcript received",
                    extra={
                        "session_id": self.session_id,
                        "transcript": segment.text,
                        "is_final": segment.is_final,
                    },
                )
                await self._notify({"transcript": segment.text})
        except RecognitionError:
            self._recognition_open = False
            await self._notify({"error": RECOGNITION_ERROR_MESSAGE})
            if self._config.close_on_recognition_error:
                await self._close_client_after_error()
        finally:
            self._recognition_open = False

    async def _notify(self, message: dict[str, Any]) -> None:
        """Sends a JSON message to the client while it is still connected."""
        if self.state is not SessionState.STREAMING:
            logger.debug(
                "Client gone, dropping message", extra={"session_id": self.session_id}
            )
            return
        try:
            await self._send_json(message)
        except Exception as e:
            logger.warning(
                "Failed to send message to client",
                extra={"session_id": self.session_id, "error": str(e)},
            )

    async def _close_client_after_error(self) -> None:
        if self.state is not SessionState.STREAMING:
            return
        try:
            await self._close_client(1011)
        except Exception as e:
            logger.warning(
                "Failed to close client connection",
                extra={"session_id": self.session_id, "error": str(e)},
            )
