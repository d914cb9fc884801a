"""
Video data models for YouTube metadata extraction.

Field names in the serialized output follow the layout consumed by existing
tooling: ``transcript``/``duration``/``comments`` for the full record and
``TopLevel``/``Replies`` for each comment.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CaptionTrack:
    """A caption track descriptor embedded in a watch page."""
    base_url: str
    language_code: str = ""
    name: str = ""
    kind: str = ""

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"

    @classmethod
    def from_dict(cls, data: dict) -> "CaptionTrack":
        name = data.get("name") or {}
        if isinstance(name, dict):
            simple = name.get("simpleText")
            if simple is None:
                simple = "".join(run.get("text", "") for run in name.get("runs", []))
            name = simple
        return cls(
            base_url=data.get("baseUrl", ""),
            language_code=data.get("languageCode", ""),
            name=name or "",
            kind=data.get("kind", ""),
        )


@dataclass
class Comment:
    """A top-level comment and its replies, in API order."""
    top_level: str
    replies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "TopLevel": self.top_level,
            "Replies": list(self.replies),
        }


@dataclass
class VideoResult:
    """Everything extracted for a single video."""
    video_id: str
    transcript: str
    duration: int
    comments: list[Comment] = field(default_factory=list)

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def to_dict(self) -> dict:
        return {
            "transcript": self.transcript,
            "duration": self.duration,
            "comments": [c.to_dict() for c in self.comments],
        }
