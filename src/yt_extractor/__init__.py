"""
yt-extractor
============

Extract metadata from a single YouTube video: duration, transcript text and
comment threads with replies.

Duration and comments come from the YouTube Data API v3. The transcript is
scraped from the caption track embedded in the video's watch page.

Example:
    $ yt "https://www.youtube.com/watch?v=xxx"
    $ yt --duration "https://youtu.be/xxx"
    $ yt --comments --length 300 --all "https://youtu.be/xxx"
"""

__version__ = "1.0.0"

from .collector import YouTubeCollector
from .models.video import CaptionTrack, Comment, VideoResult
from .errors import (
    ExtractorError,
    InvalidVideoURL,
    InvalidDurationFormat,
    TranscriptNotFound,
    MetadataServiceError,
    FetchError,
    MissingCredentialError,
)

__all__ = [
    # Collector
    "YouTubeCollector",
    # Models
    "CaptionTrack",
    "Comment",
    "VideoResult",
    # Errors
    "ExtractorError",
    "InvalidVideoURL",
    "InvalidDurationFormat",
    "TranscriptNotFound",
    "MetadataServiceError",
    "FetchError",
    "MissingCredentialError",
    # Meta
    "__version__",
]
