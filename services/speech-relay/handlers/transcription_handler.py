"""Handler for uploaded-file transcription."""

import asyncio
from pathlib import Path

from speech_common.logging import setup_logging

from config import TranscoderConfig
from domain import AudioTranscoder, TranscriptBuilder, TranscriptionJob
from infrastructure.interfaces import SpeechRecognizer
from utils import remove_files

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates upload-to-transcript operations."""

    def __init__(
        self,
        transcoder: AudioTranscoder,
        recognizer: SpeechRecognizer,
        transcript_builder: TranscriptBuilder,
        config: TranscoderConfig,
    ):
        self._transcoder = transcoder
        self._recognizer = recognizer
        self._transcript_builder = transcript_builder
        self._config = config

    async def transcribe(self, upload_path: Path) -> str:
        """
        Normalizes an uploaded audio file and transcribes it.

        Both the upload and the normalized artifact are removed afterwards,
        whatever the outcome.

        Args:
            upload_path: Unique path of the saved upload.

        Returns:
            The space-joined transcript.

        Raises:
            TranscodingError: If conversion fails (recognition is not attempted).
            RecognitionError: If the recognition engine fails.
        """
        job = TranscriptionJob.for_upload(upload_path, self._config.output_suffix)
        logger.info(
            "Processing transcription job",
            extra={
                "upload_path": str(job.upload_path),
                "normalized_path": str(job.normalized_path),
            },
        )

        try:
            await self._transcoder.convert(job.upload_path, job.normalized_path)
            audio_content = await asyncio.to_thread(job.normalized_path.read_bytes)
            results = await self._recognizer.recognize(audio_content)
        finally:
            remove_files(job.upload_path, job.normalized_path)

        transcript = self._transcript_builder.build(results)
        logger.info(
            "Transcription job completed",
            extra={
                "upload_path": str(job.upload_path),
                "characters": len(transcript),
                "confidence": self._transcript_builder.confidence(results),
            },
        )
        return transcript
