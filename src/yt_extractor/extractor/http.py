"""
Plain HTTP fetching for watch pages and caption payloads.
"""

import logging
from typing import Optional

import requests

from ..config.settings import DEFAULT_USER_AGENT
from ..errors import FetchError

logger = logging.getLogger(__name__)


class HtmlFetcher:
    """Fetch raw response bodies over HTTP."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        accept_language: str = "en",
    ):
        """
        Initialize the fetcher.

        Args:
            session: Session to reuse. A new one is created if omitted.
            timeout: Request timeout in seconds. None leaves it to requests.
            user_agent: User-Agent header sent with every request.
            accept_language: Accept-Language header sent with every request.
        """
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept-Language": accept_language,
        })
        self.timeout = timeout

    def get(self, url: str) -> str:
        """
        Fetch a URL and return its body as text.

        Raises:
            FetchError: On connection failure or a non-2xx status.
        """
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"failed to fetch {url}: {e}") from e
        return resp.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HtmlFetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
