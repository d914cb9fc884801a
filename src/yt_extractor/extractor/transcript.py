"""
Transcript extraction from YouTube watch pages.

There is no official transcript endpoint, so the caption track list is
scraped from the player configuration embedded in the watch page:

1. Fetch ``https://www.youtube.com/watch?v=<id>``
2. Find the <script> payload that mentions ``captionTracks``
3. Decode the ``"captionTracks": [...]`` array
4. Fetch the first track's ``baseUrl`` (timed-text XML)
5. Join the text of every <text> node with single spaces

The scraping lives in a TranscriptSource so another strategy can replace it
without touching the flattening in TranscriptResolver.
"""

import json
import logging
import re

from bs4 import BeautifulSoup

from ..errors import FetchError, TranscriptNotFound
from ..models.video import CaptionTrack

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
CAPTION_TRACKS_MARKER = "captionTracks"
CAPTION_TRACKS_PATTERN = re.compile(r'"captionTracks":(\[.*?\])')


class TranscriptSource:
    """Where caption tracks and their payloads come from."""

    def caption_tracks(self, video_id: str) -> list[CaptionTrack]:
        raise NotImplementedError

    def fetch_track(self, track: CaptionTrack) -> str:
        raise NotImplementedError


class WatchPageCaptionSource(TranscriptSource):
    """Scrape caption tracks out of the watch page HTML."""

    def __init__(self, fetcher):
        """
        Args:
            fetcher: Object with ``get(url) -> str`` that raises FetchError.
        """
        self.fetcher = fetcher

    def caption_tracks(self, video_id: str) -> list[CaptionTrack]:
        url = WATCH_URL.format(video_id=video_id)
        try:
            html = self.fetcher.get(url)
        except FetchError as e:
            raise TranscriptNotFound(str(e)) from e
        return parse_caption_tracks(html)

    def fetch_track(self, track: CaptionTrack) -> str:
        try:
            return self.fetcher.get(track.base_url)
        except FetchError as e:
            raise TranscriptNotFound(str(e)) from e


def parse_caption_tracks(html: str) -> list[CaptionTrack]:
    """
    Find the caption track list in a watch page.

    Scripts are scanned in document order. A script whose captionTracks
    array is missing, malformed or empty is skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    for script in soup.find_all("script"):
        text = script.string or script.get_text()
        if CAPTION_TRACKS_MARKER not in text:
            continue

        match = CAPTION_TRACKS_PATTERN.search(text)
        if not match:
            continue

        try:
            raw_tracks = json.loads(match.group(1))
        except ValueError:
            logger.debug("Undecodable captionTracks array, skipping script")
            continue

        tracks = [
            CaptionTrack.from_dict(t)
            for t in raw_tracks
            if isinstance(t, dict) and t.get("baseUrl")
        ]
        if tracks:
            return tracks

    return []


def flatten_timed_text(payload: str) -> str:
    """Join the text of every <text> segment with a single space."""
    soup = BeautifulSoup(payload, "html.parser")
    return " ".join(node.get_text() for node in soup.find_all("text"))


class TranscriptResolver:
    """Resolve a video ID into flat transcript text."""

    def __init__(self, source: TranscriptSource, lang: str = "en"):
        """
        Initialize the resolver.

        Args:
            source: Caption track source.
            lang: Requested language. Stored only; the first track is
                  always selected.
        """
        self.source = source
        self.lang = lang

    def resolve(self, video_id: str) -> str:
        """
        Return the transcript text of a video.

        Raises:
            TranscriptNotFound: If no track exists or a fetch fails.
        """
        tracks = self.source.caption_tracks(video_id)
        if not tracks:
            raise TranscriptNotFound("transcript not found")

        track = tracks[0]
        logger.info(
            "Using caption track %s%s",
            track.language_code or "?",
            " (auto-generated)" if track.is_generated else "",
        )
        return flatten_timed_text(self.source.fetch_track(track))
