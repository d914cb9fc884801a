"""
ISO-8601 duration parsing (the PT#H#M#S subset used by the Data API).
"""

import re

from ..errors import InvalidDurationFormat


DURATION_PATTERN = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?', re.IGNORECASE)


def parse_duration(value: str) -> int:
    """
    Convert a duration such as ``PT1H2M3S`` to whole minutes.

    Seconds only count through floor division, so ``PT45S`` is 0 minutes.
    A bare ``PT`` matches with every group empty and yields 0.

    Raises:
        InvalidDurationFormat: If the string contains no ``PT`` duration.
    """
    match = DURATION_PATTERN.search(value or "")
    if not match:
        raise InvalidDurationFormat(value)

    hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return hours * 60 + minutes + seconds // 60
