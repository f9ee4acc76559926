"""WebSocket endpoint for live microphone transcription."""

from typing import Annotated

from fastapi import APIRouter, Depends, WebSocket
from speech_common.logging import setup_logging

from config import LiveRecognitionConfig
from dependencies import get_live_config, get_streaming_recognizer
from handlers import LiveTranscriptionSession
from infrastructure.interfaces import StreamingRecognizer

logger = setup_logging()

router = APIRouter(tags=["live"])

RecognizerDep = Annotated[StreamingRecognizer, Depends(get_streaming_recognizer)]
LiveConfigDep = Annotated[LiveRecognitionConfig, Depends(get_live_config)]


@router.websocket("/")
async def live_transcription(
    websocket: WebSocket, recognizer: RecognizerDep, config: LiveConfigDep
):
    """Streams binary audio frames to recognition and pushes back transcripts."""
    await websocket.accept()

    async def close_client(code: int) -> None:
        await websocket.close(code=code)

    session = LiveTranscriptionSession(
        recognizer=recognizer,
        send_json=websocket.send_json,
        close_client=close_client,
        config=config,
    )
    logger.info(
        "Client connected for live transcription",
        extra={"session_id": session.session_id},
    )

    await session.start()
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            chunk = message.get("bytes")
            if chunk is None:
                logger.debug(
                    "Ignoring non-binary frame",
                    extra={"session_id": session.session_id},
                )
                continue
            session.forward_audio(chunk)
    finally:
        await session.close()
        logger.info(
            "Client disconnected", extra={"session_id": session.session_id}
        )
