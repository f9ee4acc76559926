import logging
import sys

from pythonjsonlogger.json import JsonFormatter

# Loggers owned by the server stack: uvicorn for HTTP, websockets for the
# live transcription socket.
SERVER_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "websockets.server",
    "websockets.protocol",
)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configures structured JSON logging on stdout for the relay.

    Every record carries timestamp, level, logger name, message and the
    Datadog trace_id/span_id injected by ddtrace. The server loggers are
    pointed at the same handler and stop propagating so that each line is
    emitted once.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = []
        server_logger.addHandler(stream_handler)
        server_logger.propagate = False

    return root_logger
