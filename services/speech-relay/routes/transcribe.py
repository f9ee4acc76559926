"""Uploaded-file transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from speech_common import EngineFailure
from speech_common.logging import setup_logging

from config import UploadConfig
from dependencies import get_transcription_handler, get_upload_config
from exceptions import MissingUploadError, UploadStorageError
from handlers import TranscriptionHandler
from response_models import ErrorResponse, TranscriptResponse
from utils import save_upload

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]
UploadConfigDep = Annotated[UploadConfig, Depends(get_upload_config)]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@router.post(
    "/transcribe",
    response_model=TranscriptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe(
    handler: HandlerDep,
    upload_config: UploadConfigDep,
    file: Annotated[UploadFile | None, File()] = None,
):
    """Converts an uploaded audio file to 16 kHz mono WAV and transcribes it."""
    if file is None or not file.filename:
        return _error(400, str(MissingUploadError("file")))

    logger.info(
        "Received transcription request",
        extra={"file_name": file.filename, "content_type": file.content_type},
    )

    try:
        upload_path = await save_upload(file, upload_config.upload_dir)
    except UploadStorageError as e:
        return _error(500, str(e))

    try:
        transcript = await handler.transcribe(upload_path)
    except EngineFailure as e:
        logger.error(
            "Transcription failed",
            extra={"file_name": file.filename, "engine": e.engine, "error": str(e)},
        )
        return _error(500, str(e))

    return TranscriptResponse(transcript=transcript)
