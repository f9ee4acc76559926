"""Core business logic for audio normalization."""

import asyncio
from pathlib import Path

import moviepy
from speech_common.logging import setup_logging

from config import TranscoderConfig
from exceptions import TranscodingError

logger = setup_logging()


class AudioTranscoder:
    """Converts arbitrary audio files to mono 16 kHz WAV."""

    def __init__(self, config: TranscoderConfig):
        self._config = config

    async def convert(self, source_path: Path, target_path: Path) -> Path:
        """
        Converts an audio file to the normalized profile.

        Args:
            source_path: Any audio container ffmpeg can decode.
            target_path: Where the normalized WAV is written.

        Returns:
            The path of the normalized file.

        Raises:
            TranscodingError: If conversion fails.
        """
        try:
            await asyncio.to_thread(self._convert, source_path, target_path)
        except Exception as e:
            logger.exception(
                "Audio conversion failed", extra={"file_name": str(source_path)}
            )
            raise TranscodingError(source_path.name, e) from e

        logger.info(
            "Audio converted successfully",
            extra={"source_file": str(source_path), "target_file": str(target_path)},
        )
        return target_path

    def _convert(self, source_path: Path, target_path: Path) -> None:
        """Performs the actual conversion using moviepy."""
        clip = moviepy.AudioFileClip(str(source_path))
        try:
            clip.write_audiofile(
                str(target_path),
                fps=self._config.sample_rate_hertz,
                nbytes=2,
                codec=self._config.codec,
                ffmpeg_params=["-ac", str(self._config.channels)],
                logger=None,
            )
        finally:
            clip.close()
