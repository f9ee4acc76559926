"""Custom exceptions for the speech-relay service."""

from speech_common import EngineFailure


class UnsupportedMediaTypeError(Exception):
    """Raised when an uploaded document has an extension we cannot read."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(
            "Unsupported file type. Please upload .txt, .pdf, or .docx"
        )


class EmptyInputError(Exception):
    """Raised when no usable text was supplied for synthesis."""

    def __init__(self):
        super().__init__("No text found for TTS")


class MissingUploadError(Exception):
    """Raised when a required file upload is absent."""

    def __init__(self, field_name: str = "file"):
        self.field_name = field_name
        super().__init__(f"No file uploaded in field '{field_name}'")


class SynthesisError(EngineFailure):
    """Raised when the Text-to-Speech engine call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__("text-to-speech", message, cause)


class SynthesisUnavailableError(Exception):
    """Raised when both the primary and the fallback synthesis fail."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("TTS failed completely.")


class RecognitionError(EngineFailure):
    """Raised when the Speech-to-Text engine call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__("speech-to-text", message, cause)


class TranscodingError(EngineFailure):
    """Raised when audio conversion fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        detail = f": {cause}" if cause else ""
        super().__init__(
            "transcoder", f"Failed to convert '{file_name}'{detail}", cause
        )


class TextExtractionError(EngineFailure):
    """Raised when text cannot be extracted from a supported document."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(
            "text-extractor", f"Failed to extract text from '{file_name}'", cause
        )


class UploadStorageError(Exception):
    """Raised when an uploaded file cannot be written to the upload directory."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__("Failed to store uploaded file")
