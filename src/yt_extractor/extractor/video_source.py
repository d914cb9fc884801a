"""
Video ID extraction from YouTube URLs.
"""

import re
from typing import Optional


# watch?v=, /embed/, /v/, /e/, youtu.be/ and /<anything>/<path>/ forms
VIDEO_ID_PATTERN = re.compile(
    r'(?:https?://)?(?:www\.)?'
    r'(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)'
    r'([a-zA-Z0-9_-]{11})'
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Args:
        url: YouTube video URL in any of the common shapes.

    Returns:
        Video ID, or None if the URL does not match.
    """
    match = VIDEO_ID_PATTERN.search(url or "")
    if match:
        return match.group(1)
    return None
