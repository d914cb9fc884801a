"""Data models for extracted YouTube video data."""

from .video import CaptionTrack, Comment, VideoResult

__all__ = ["CaptionTrack", "Comment", "VideoResult"]
