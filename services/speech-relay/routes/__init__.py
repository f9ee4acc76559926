"""API routers."""

from .live import router as live_router
from .transcribe import router as transcribe_router
from .tts import router as tts_router

__all__ = ["live_router", "transcribe_router", "tts_router"]
