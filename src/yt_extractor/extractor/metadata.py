"""
Video metadata and comment retrieval through the YouTube Data API v3.
"""

import logging
from typing import Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..errors import MetadataServiceError

logger = logging.getLogger(__name__)


class YouTubeDataService:
    """Thin wrapper over the Data API calls the extractor needs."""

    def __init__(self, api_key: Optional[str] = None, client=None):
        """
        Initialize the service.

        Args:
            api_key: YouTube Data API key. Ignored when ``client`` is given.
            client: Pre-built ``googleapiclient`` resource (mainly for tests).
        """
        if client is None:
            if not api_key:
                raise MetadataServiceError("An API key is required to build the YouTube client")
            client = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        self.client = client

    def _execute(self, request, what: str) -> dict:
        try:
            return request.execute()
        except HttpError as e:
            raise MetadataServiceError(f"YouTube API error while {what}: {e}") from e
        except (httplib2.HttpLib2Error, OSError) as e:
            raise MetadataServiceError(f"Network error while {what}: {e}") from e

    def get_video_duration(self, video_id: str) -> str:
        """
        Return the ISO-8601 duration string of a video.

        Raises:
            MetadataServiceError: On API failure or if the video does not exist.
        """
        response = self._execute(
            self.client.videos().list(part="contentDetails", id=video_id),
            f"getting video details for {video_id}",
        )
        items = response.get("items", [])
        if not items:
            raise MetadataServiceError(f"video not found: {video_id}")
        return items[0].get("contentDetails", {}).get("duration", "")

    def list_comment_threads(
        self,
        video_id: str,
        page_size: int,
        page_token: Optional[str] = None,
    ) -> tuple[list[dict], Optional[str]]:
        """
        Fetch one page of comment threads.

        Returns:
            Tuple of (thread items, next page token or None).
        """
        kwargs = {
            "part": "snippet,replies",
            "videoId": video_id,
            "textFormat": "plainText",
            "maxResults": page_size,
        }
        if page_token:
            kwargs["pageToken"] = page_token

        response = self._execute(
            self.client.commentThreads().list(**kwargs),
            f"listing comment threads for {video_id}",
        )
        return response.get("items", []), response.get("nextPageToken")

    def list_replies(self, parent_id: str) -> list[dict]:
        """Fetch the first page (up to 100) of replies to a comment."""
        response = self._execute(
            self.client.comments().list(
                part="snippet",
                parentId=parent_id,
                textFormat="plainText",
                maxResults=100,
            ),
            f"listing replies to {parent_id}",
        )
        return response.get("items", [])
