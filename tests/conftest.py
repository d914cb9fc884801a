"""Shared fakes standing in for the YouTube Data API and the web."""

import pytest

from yt_extractor.errors import FetchError, MetadataServiceError


def make_thread(text, replies=(), total_replies=None, comment_id=None):
    """Build a commentThreads item shaped like the Data API response."""
    thread = {
        "snippet": {
            "topLevelComment": {
                "id": comment_id or f"id-{text}",
                "snippet": {"textDisplay": text},
            },
            "totalReplyCount": len(replies) if total_replies is None else total_replies,
        },
    }
    if replies:
        thread["replies"] = {
            "comments": [{"snippet": {"textDisplay": r}} for r in replies],
        }
    return thread


def make_reply(text):
    return {"snippet": {"textDisplay": text}}


class FakeService:
    """In-memory metadata/comment service that records every call."""

    def __init__(self, duration="PT10M", pages=None, replies=None,
                 fail_on_page=None, fail_replies_for=(), duration_error=None):
        self.duration = duration
        self.pages = pages or []
        self.replies = replies or {}
        self.fail_on_page = fail_on_page
        self.fail_replies_for = set(fail_replies_for)
        self.duration_error = duration_error
        self.thread_calls = []
        self.reply_calls = []

    def get_video_duration(self, video_id):
        if self.duration_error:
            raise self.duration_error
        return self.duration

    def list_comment_threads(self, video_id, page_size, page_token=None):
        index = int(page_token) if page_token else 0
        self.thread_calls.append((video_id, page_size, page_token))
        if self.fail_on_page is not None and index == self.fail_on_page:
            raise MetadataServiceError("quota exceeded")
        if index >= len(self.pages):
            return [], None
        next_token = str(index + 1) if index + 1 < len(self.pages) else None
        return self.pages[index], next_token

    def list_replies(self, parent_id):
        self.reply_calls.append(parent_id)
        if parent_id in self.fail_replies_for:
            raise MetadataServiceError("replies disabled")
        return [make_reply(r) for r in self.replies.get(parent_id, [])]


class FakeFetcher:
    """Serve canned bodies by URL; unknown URLs fail like a 404."""

    def __init__(self, bodies=None):
        self.bodies = bodies or {}
        self.requested = []

    def get(self, url):
        self.requested.append(url)
        if url not in self.bodies:
            raise FetchError(f"failed to fetch {url}: 404")
        return self.bodies[url]


@pytest.fixture
def fake_service():
    return FakeService()


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
