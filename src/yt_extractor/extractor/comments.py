"""
Paginated comment thread collection.
"""

import logging
from typing import Optional

from ..errors import MetadataServiceError
from ..models.video import Comment

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100
REPLY_EXPANSION_THRESHOLD = 5


def _text(comment: dict) -> str:
    return comment.get("snippet", {}).get("textDisplay", "")


class CommentCollector:
    """Collect top-level comments and their replies for a video."""

    def __init__(self, service, reply_expansion_threshold: int = REPLY_EXPANSION_THRESHOLD):
        """
        Initialize the collector.

        Args:
            service: Object with ``list_comment_threads`` and ``list_replies``
                     (see YouTubeDataService).
            reply_expansion_threshold: Threads with more replies than this
                     get a dedicated reply fetch when expansion is on.
        """
        self.service = service
        self.reply_expansion_threshold = reply_expansion_threshold

    def collect(
        self,
        video_id: str,
        threshold: int = 100,
        expand_replies: bool = False,
    ) -> list[Comment]:
        """
        Collect up to ``threshold`` comment threads.

        One page is requested per 100 comments plus one more, so the last
        page may overshoot; the result is truncated to ``threshold``. A
        failed page ends collection with whatever was gathered so far.

        Args:
            video_id: YouTube video ID.
            threshold: Maximum number of comments to return.
            expand_replies: Fetch full reply lists for busy threads.

        Returns:
            Comments in API page order.
        """
        if threshold <= 0:
            return []

        if threshold < MAX_PAGE_SIZE:
            page_size, pages = threshold, 1
        else:
            page_size, pages = MAX_PAGE_SIZE, threshold // MAX_PAGE_SIZE + 1

        comments: list[Comment] = []
        page_token: Optional[str] = None

        for page in range(pages):
            try:
                items, page_token = self.service.list_comment_threads(
                    video_id, page_size, page_token
                )
            except MetadataServiceError as e:
                logger.warning("Failed to fetch comments (page %d): %s", page + 1, e)
                break

            for item in items:
                comments.append(self._build_comment(item, expand_replies))

            logger.debug("Page %d: %d threads, %d total", page + 1, len(items), len(comments))
            if not page_token:
                break

        return comments[:threshold]

    def _build_comment(self, thread: dict, expand_replies: bool) -> Comment:
        snippet = thread.get("snippet", {})
        top_level = snippet.get("topLevelComment", {})

        if expand_replies and snippet.get("totalReplyCount", 0) > self.reply_expansion_threshold:
            replies = self._fetch_replies(top_level.get("id", ""))
        else:
            replies = [_text(r) for r in thread.get("replies", {}).get("comments", [])]

        return Comment(top_level=_text(top_level), replies=replies)

    def _fetch_replies(self, parent_id: str) -> list[str]:
        try:
            items = self.service.list_replies(parent_id)
        except MetadataServiceError as e:
            logger.warning("Failed to fetch replies for comment %s: %s", parent_id, e)
            return []
        return [_text(r) for r in items]
