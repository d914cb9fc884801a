"""
Rendering of extraction results to text and JSON.

Four projections are supported: the full record, or just the duration,
the transcript or the comments.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

from ..models.video import VideoResult


class OutputMode(str, Enum):
    FULL = "full"
    DURATION = "duration"
    TRANSCRIPT = "transcript"
    COMMENTS = "comments"

    @property
    def needs_comments(self) -> bool:
        return self in (OutputMode.FULL, OutputMode.COMMENTS)


class JsonStorage:
    """Render a VideoResult and optionally store it on disk."""

    def __init__(self, output_path: Optional[str] = None, pretty: bool = True):
        """
        Initialize JSON storage.

        Args:
            output_path: File to write renderings to (used by ``save``).
            pretty: Use 2-space indented JSON.
        """
        self.output_path = output_path
        self.pretty = pretty

    def _dumps(self, data) -> str:
        return json.dumps(data, ensure_ascii=False, indent=2 if self.pretty else None)

    def render(self, result: VideoResult, mode: OutputMode = OutputMode.FULL) -> str:
        mode = OutputMode(mode)
        if mode is OutputMode.DURATION:
            return str(result.duration)
        if mode is OutputMode.TRANSCRIPT:
            return result.transcript
        if mode is OutputMode.COMMENTS:
            return self._dumps([c.to_dict() for c in result.comments])
        return self._dumps(result.to_dict())

    def save(self, result: VideoResult, mode: OutputMode = OutputMode.FULL) -> Path:
        """
        Write the rendering of ``result`` to ``output_path``.

        Returns:
            Path of the written file.
        """
        if not self.output_path:
            raise ValueError("No output path configured")

        path = Path(self.output_path)
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.render(result, mode))
            f.write("\n")

        return path
