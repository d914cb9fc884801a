"""Configuration for yt-extractor."""

from .settings import Settings, DEFAULT_SETTINGS
from .credentials import EnvFileCredentialProvider, StaticCredentialProvider

__all__ = ["Settings", "DEFAULT_SETTINGS", "EnvFileCredentialProvider", "StaticCredentialProvider"]
