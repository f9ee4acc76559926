"""Service-account credential loading."""

import json

from google.oauth2 import service_account

from speech_common.config import GoogleCloudConfig
from speech_common.exceptions import StartupError
from speech_common.logging import setup_logging

logger = setup_logging()


def load_credentials(config: GoogleCloudConfig) -> service_account.Credentials:
    """
    Loads Google service-account credentials from the configured JSON key file.

    Args:
        config: Google Cloud configuration holding the key file location.

    Returns:
        Immutable service-account credentials shared by all engine clients.

    Raises:
        StartupError: If the key file is missing, unreadable or invalid.
    """
    path = config.credentials_path
    if not path.is_file():
        raise StartupError(f"Missing Google credentials file at '{path}'")

    try:
        info = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise StartupError(f"Unreadable Google credentials file at '{path}'", e) from e

    try:
        credentials = service_account.Credentials.from_service_account_info(info)
    except (ValueError, KeyError, TypeError) as e:
        raise StartupError(f"Invalid Google credentials in '{path}'", e) from e

    logger.info(
        "Google credentials loaded",
        extra={"credentials_path": str(path), "project_id": info.get("project_id")},
    )
    return credentials
