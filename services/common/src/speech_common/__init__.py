from speech_common.config import GoogleCloudConfig
from speech_common.credentials import load_credentials
from speech_common.exceptions import EngineFailure, StartupError
from speech_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "load_credentials",
    "GoogleCloudConfig",
    "EngineFailure",
    "StartupError",
]
