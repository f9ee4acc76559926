"""
Speech Relay Service.

This module provides the HTTP/WebSocket entry point. It handles:
- Text-to-speech for plain text and uploaded documents (/api/tts).
- Transcription of uploaded audio files (/api/transcribe).
- Live microphone transcription over WebSocket (/).
- Optional serving of the static frontend.
- Distributed tracing with Datadog.
- Structured JSON logging.
"""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from speech_common import StartupError, load_credentials
from speech_common.logging import setup_logging

from config import AppConfig, load_config
from dependencies import build_services
from routes import live_router, transcribe_router, tts_router

patch_all()
logger = setup_logging()


def create_app(config: AppConfig) -> FastAPI:
    """Builds the application; credentials are loaded before serving starts."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            credentials = load_credentials(config.google)
        except StartupError:
            logger.critical(
                "Startup aborted: Google credentials unavailable",
                extra={"credentials_path": str(config.google.credentials_path)},
            )
            raise
        config.uploads.upload_dir.mkdir(parents=True, exist_ok=True)
        app.state.services = build_services(config, credentials)
        logger.info(
            "Speech relay ready",
            extra={"host": config.server.host, "port": config.server.port},
        )
        yield

    app = FastAPI(title="Speech Relay Service", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(tts_router)
    app.include_router(transcribe_router)
    app.include_router(live_router)

    if config.server.static_dir is not None:
        app.mount(
            "/",
            StaticFiles(directory=config.server.static_dir, html=True),
            name="frontend",
        )

    return app


_config = load_config()
app = create_app(_config)


def main():
    """Starts the HTTP/WebSocket server."""
    logger.info("Starting speech-relay service")
    uvicorn.run(
        app,
        host=_config.server.host,
        port=_config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
