from __future__ import annotations

from collections.abc import Sequence

from .events import SseEvent
from .stream_parser import is_boundary, is_comment, split_field

JSON_THRESHOLD = 0.5


def is_valid_sse_format(text: str) -> bool:
    """True if `text` has at least one `data` field line.

    Checked line by line; no event needs to be committed.
    """

    if not text or not text.strip():
        return False

    for line in text.split("\n"):
        if is_boundary(line) or is_comment(line):
            continue
        parts = split_field(line)
        if parts is not None and parts[0] == "data":
            return True
    return False


def should_auto_enable_json(events: Sequence[SseEvent]) -> bool:
    """True if at least half of the events carry a JSON object payload."""

    if not events:
        return False
    with_json = sum(1 for e in events if e.parsed_payload is not None)
    return with_json / len(events) >= JSON_THRESHOLD
