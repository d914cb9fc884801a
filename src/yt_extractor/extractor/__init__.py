"""Extractors for YouTube video data."""

from .video_source import extract_video_id
from .duration import parse_duration
from .http import HtmlFetcher
from .metadata import YouTubeDataService
from .transcript import TranscriptResolver, TranscriptSource, WatchPageCaptionSource
from .comments import CommentCollector

__all__ = [
    "extract_video_id",
    "parse_duration",
    "HtmlFetcher",
    "YouTubeDataService",
    "TranscriptResolver",
    "TranscriptSource",
    "WatchPageCaptionSource",
    "CommentCollector",
]
