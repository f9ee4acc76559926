"""Exceptions shared across speech services."""


class StartupError(Exception):
    """Raised when the service cannot start (e.g. missing credentials)."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(reason)


class EngineFailure(Exception):
    """Raised when a downstream engine (cloud service or transcoder) fails."""

    def __init__(self, engine: str, message: str, cause: Exception | None = None):
        self.engine = engine
        self.cause = cause
        super().__init__(message)
