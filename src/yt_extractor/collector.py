"""
Core YouTube collector that orchestrates extraction for a single video.
"""

import logging
from typing import Optional

from .config import Settings, DEFAULT_SETTINGS, EnvFileCredentialProvider
from .errors import InvalidVideoURL, MetadataServiceError, TranscriptNotFound
from .extractor import (
    CommentCollector,
    HtmlFetcher,
    TranscriptResolver,
    WatchPageCaptionSource,
    YouTubeDataService,
    extract_video_id,
    parse_duration,
)
from .models.video import Comment, VideoResult

logger = logging.getLogger(__name__)


class YouTubeCollector:
    """
    Main collector class that orchestrates YouTube data extraction.

    Duration comes from the Data API, the transcript from the watch page and
    comments from the Data API again. Any collaborator can be injected;
    missing ones are built from settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        service=None,
        fetcher=None,
        resolver: Optional[TranscriptResolver] = None,
        comment_collector: Optional[CommentCollector] = None,
        credentials=None,
    ):
        """
        Initialize the YouTube collector.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            service: Metadata/comment service (YouTubeDataService-like).
            fetcher: HTML fetcher used for the watch page and caption payloads.
            resolver: Transcript resolver. Built on ``fetcher`` if omitted.
            comment_collector: Comment collector. Built on ``service`` if omitted.
            credentials: Provider with ``get_api_key()``, used only when
                         ``service`` has to be built.
        """
        self.settings = settings or DEFAULT_SETTINGS

        if service is None:
            credentials = credentials or EnvFileCredentialProvider(
                self.settings.env_file, self.settings.api_key_env
            )
            service = YouTubeDataService(api_key=credentials.get_api_key())
        self.service = service

        # Only a fetcher built here is closed by close()
        self._owned_fetcher = None
        if resolver is None:
            if fetcher is None:
                fetcher = self._owned_fetcher = HtmlFetcher(
                    timeout=self.settings.request_timeout,
                    user_agent=self.settings.user_agent,
                    accept_language=self.settings.lang,
                )
            resolver = TranscriptResolver(WatchPageCaptionSource(fetcher), lang=self.settings.lang)
        self.resolver = resolver

        self.comment_collector = comment_collector or CommentCollector(
            self.service,
            reply_expansion_threshold=self.settings.reply_expansion_threshold,
        )

    def close(self) -> None:
        """Release HTTP resources created by this collector."""
        if self._owned_fetcher is not None:
            self._owned_fetcher.close()
            self._owned_fetcher = None

    def __enter__(self) -> "YouTubeCollector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def collect(
        self,
        url: str,
        include_comments: bool = False,
        comment_limit: Optional[int] = None,
        expand_replies: Optional[bool] = None,
    ) -> VideoResult:
        """
        Collect duration, transcript and optionally comments for a video.

        Args:
            url: YouTube video URL.
            include_comments: Fetch comments as well.
            comment_limit: Maximum comments. Defaults to settings.
            expand_replies: Fetch full reply lists. Defaults to settings.

        Returns:
            VideoResult for the video.

        Raises:
            InvalidVideoURL: If no video ID is found in ``url``.
            MetadataServiceError: If the video details cannot be fetched.
            InvalidDurationFormat: If the reported duration is malformed.
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidVideoURL(url)
        logger.info("Processing: https://www.youtube.com/watch?v=%s", video_id)

        duration = self.get_duration(video_id)
        logger.info("Duration: %d min", duration)

        transcript = self.get_transcript(video_id)

        comments: list[Comment] = []
        if include_comments:
            comments = self.get_comments(
                video_id,
                comment_limit if comment_limit is not None else self.settings.comment_limit,
                expand_replies if expand_replies is not None else self.settings.expand_replies,
            )

        return VideoResult(
            video_id=video_id,
            transcript=transcript,
            duration=duration,
            comments=comments,
        )

    def get_duration(self, video_id: str) -> int:
        """Video length in whole minutes."""
        return parse_duration(self.service.get_video_duration(video_id))

    def get_transcript(self, video_id: str) -> str:
        """Transcript text, or a placeholder describing why it is missing."""
        try:
            transcript = self.resolver.resolve(video_id)
        except TranscriptNotFound as e:
            logger.warning("Transcript unavailable for %s: %s", video_id, e)
            return f"Transcript not available. ({e})"
        logger.info("Transcript: %d chars", len(transcript))
        return transcript

    def get_comments(self, video_id: str, limit: int, expand_replies: bool) -> list[Comment]:
        """Comments for a video; empty on service failure."""
        try:
            comments = self.comment_collector.collect(
                video_id, threshold=limit, expand_replies=expand_replies
            )
        except MetadataServiceError as e:
            logger.warning("Failed to fetch comments for %s: %s", video_id, e)
            return []
        logger.info("Comments: %d", len(comments))
        return comments
