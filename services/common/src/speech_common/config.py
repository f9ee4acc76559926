"""Shared configuration models for Google Cloud components."""

from pathlib import Path

from pydantic import BaseModel


class GoogleCloudConfig(BaseModel, frozen=True):
    """Google Cloud service-account configuration."""

    credentials_path: Path
