"""Text-to-speech endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import PlainTextResponse
from speech_common.logging import setup_logging

from config import UploadConfig
from dependencies import get_synthesis_handler, get_upload_config
from domain import UploadedDocument
from exceptions import (
    EmptyInputError,
    SynthesisUnavailableError,
    UnsupportedMediaTypeError,
    UploadStorageError,
)
from handlers import SynthesisHandler
from utils import save_upload

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["tts"])

HandlerDep = Annotated[SynthesisHandler, Depends(get_synthesis_handler)]
UploadConfigDep = Annotated[UploadConfig, Depends(get_upload_config)]


@router.post("/tts", response_class=Response)
async def text_to_speech(
    handler: HandlerDep,
    upload_config: UploadConfigDep,
    text: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File()] = None,
) -> Response:
    """
    Converts text, or an uploaded .txt/.pdf/.docx document, to MP3 speech.

    Falls back to a spoken apology when synthesis fails.
    """
    document = None
    if not text and file is not None and file.filename:
        try:
            path = await save_upload(file, upload_config.upload_dir)
        except UploadStorageError as e:
            return PlainTextResponse(str(e), status_code=500)
        document = UploadedDocument(path=path, filename=file.filename)

    logger.info(
        "Received TTS request",
        extra={
            "has_text": bool(text),
            "file_name": document.filename if document else None,
        },
    )

    try:
        result = await handler.synthesize(text=text, document=document)
    except (UnsupportedMediaTypeError, EmptyInputError) as e:
        return PlainTextResponse(str(e), status_code=400)
    except SynthesisUnavailableError as e:
        return PlainTextResponse(str(e), status_code=500)

    logger.info(
        "TTS request completed",
        extra={
            "is_fallback": result.is_fallback,
            "audio_bytes": len(result.audio_content),
        },
    )
    return Response(content=result.audio_content, media_type=result.content_type)
