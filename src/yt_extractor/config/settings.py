"""
Configuration settings for yt-extractor.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_ENV_FILE = "~/.config/fabric/.env"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _coerce(name: str, value, kind):
    """Convert a settings-file value to the type of its field."""
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE | _FALSE:
            return value.strip().lower() in _TRUE
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
    elif kind is float:
        if value is None:
            return None
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                return float(value)
            except ValueError:
                pass
    elif isinstance(value, str):
        return value

    raise ValueError(f"Invalid settings file: {name!r} has invalid value {value!r}")


# Expected type per field; float fields also accept None
FIELD_TYPES = {
    "lang": str,
    "comment_limit": int,
    "expand_replies": bool,
    "reply_expansion_threshold": int,
    "env_file": str,
    "api_key_env": str,
    "request_timeout": float,
    "user_agent": str,
    "pretty_json": bool,
}


@dataclass
class Settings:
    """Configuration settings for the extractor."""

    # Transcript language (accepted but not used for track selection yet)
    lang: str = "en"

    # Comment collection
    comment_limit: int = 100
    expand_replies: bool = False
    reply_expansion_threshold: int = 5

    # Credentials
    env_file: str = DEFAULT_ENV_FILE
    api_key_env: str = "YOUTUBE_API_KEY"

    # HTTP
    request_timeout: Optional[float] = None  # None = transport default
    user_agent: str = DEFAULT_USER_AGENT

    # Output
    pretty_json: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """
        Create Settings from a dictionary, ignoring unknown keys.

        Raises:
            ValueError: If ``data`` is not a mapping or a value has the wrong type.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid settings file: expected a mapping, got {type(data).__name__}"
            )

        values = {}
        for f in fields(cls):
            if f.name in data:
                values[f.name] = _coerce(f.name, data[f.name], FIELD_TYPES[f.name])
        return cls(**values)

    @classmethod
    def from_file(cls, path: str) -> "Settings":
        """Load Settings from a YAML or JSON file."""
        path = Path(path)

        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in ('.yaml', '.yml'):
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid settings file {path}: {e}") from e
            else:
                data = json.load(f)

        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return {
            "lang": self.lang,
            "comment_limit": self.comment_limit,
            "expand_replies": self.expand_replies,
            "reply_expansion_threshold": self.reply_expansion_threshold,
            "env_file": self.env_file,
            "api_key_env": self.api_key_env,
            "request_timeout": self.request_timeout,
            "user_agent": self.user_agent,
            "pretty_json": self.pretty_json,
        }


DEFAULT_SETTINGS = Settings()
