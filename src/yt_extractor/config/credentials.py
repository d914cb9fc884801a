"""
API key lookup for the YouTube Data API.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..errors import MissingCredentialError
from .settings import DEFAULT_ENV_FILE

logger = logging.getLogger(__name__)


class EnvFileCredentialProvider:
    """Read the API key from the process environment, seeded from an env file."""

    def __init__(self, env_file: str = DEFAULT_ENV_FILE, env_var: str = "YOUTUBE_API_KEY"):
        """
        Args:
            env_file: Path to a dotenv file. ``~`` is expanded.
            env_var: Name of the variable holding the key.
        """
        self.env_file = Path(env_file).expanduser()
        self.env_var = env_var

    def get_api_key(self) -> str:
        """
        Return the configured API key.

        Variables already present in the environment take precedence over
        the env file.

        Raises:
            MissingCredentialError: If the key is not set anywhere.
        """
        if self.env_file.is_file():
            load_dotenv(self.env_file, override=False)
        else:
            logger.debug("Env file not found: %s", self.env_file)

        api_key: Optional[str] = os.getenv(self.env_var)
        if not api_key:
            raise MissingCredentialError(
                f"{self.env_var} not found in {self.env_file}. To add it, run "
                f"\"echo {self.env_var}=[Your API Key] >> {self.env_file}\"."
            )
        return api_key


class StaticCredentialProvider:
    """Hand out a key that is already known."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    def get_api_key(self) -> str:
        if not self.api_key:
            raise MissingCredentialError("Empty API key")
        return self.api_key
