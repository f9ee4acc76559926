"""Plain-text extraction from uploaded documents."""

import asyncio
from pathlib import Path

import docx
from pypdf import PdfReader
from speech_common.logging import setup_logging

from exceptions import TextExtractionError, UnsupportedMediaTypeError

from .models import UploadedDocument

logger = setup_logging()


def _read_txt(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_pdf(path: Path) -> str:
    reader = PdfReader(path)
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _read_docx(path: Path) -> str:
    document = docx.Document(str(path))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


class TextExtractor:
    """Extracts text from .txt, .pdf and .docx documents."""

    _readers = {
        ".txt": _read_txt,
        ".pdf": _read_pdf,
        ".docx": _read_docx,
    }

    def is_supported(self, extension: str) -> bool:
        return extension.lower() in self._readers

    async def extract(self, document: UploadedDocument) -> str:
        """
        Extracts plain text from a document based on its declared extension.

        Args:
            document: The uploaded document and its original file name.

        Returns:
            The extracted text (may be empty).

        Raises:
            UnsupportedMediaTypeError: If the extension is not supported.
            TextExtractionError: If the document cannot be read.
        """
        reader = self._readers.get(document.extension)
        if reader is None:
            raise UnsupportedMediaTypeError(document.extension)

        try:
            text = await asyncio.to_thread(reader, document.path)
        except Exception as e:
            logger.exception(
                "Text extraction failed",
                extra={"file_name": document.filename},
            )
            raise TextExtractionError(document.filename, e) from e

        logger.info(
            "Text extracted from document",
            extra={"file_name": document.filename, "characters": len(text)},
        )
        return text
