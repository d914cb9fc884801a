"""
Exceptions raised by the extraction pipeline.

Fatal errors (bad URL, metadata service failure, malformed duration) abort a
run. TranscriptNotFound and comment-side MetadataServiceError are recovered
by the collector and folded into the result.
"""


class ExtractorError(Exception):
    """Base class for all yt-extractor errors."""


class InvalidVideoURL(ExtractorError):
    """No video ID could be found in the given URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid YouTube URL: {url}")
        self.url = url


class InvalidDurationFormat(ExtractorError):
    """A duration string does not look like ISO-8601 PT#H#M#S."""

    def __init__(self, value: str):
        super().__init__(f"invalid duration string: {value}")
        self.value = value


class TranscriptNotFound(ExtractorError):
    """No caption track could be located or fetched for a video."""


class FetchError(ExtractorError):
    """An HTTP fetch of a page or caption payload failed."""


class MetadataServiceError(ExtractorError):
    """The YouTube Data API returned an error or an unusable response."""


class MissingCredentialError(ExtractorError):
    """The YouTube API key is not configured."""
