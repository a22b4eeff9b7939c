from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .events import ParseResult, SseEvent
from .json_probe import probe_json_object

logger = logging.getLogger(__name__)

EMPTY_STREAM = "Empty stream provided"
NO_EVENTS = "No valid events found in stream"

# parseInt-style: leading whitespace, optional sign, digits; the rest is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass
class _PendingEvent:
    """Fields seen since the last blank line."""

    data_lines: list[str] = field(default_factory=list)
    event_type: str | None = None
    id: str | None = None
    retry_ms: int | None = None
    raw_lines: list[str] = field(default_factory=list)


def is_boundary(line: str) -> bool:
    return not line.strip()


def is_comment(line: str) -> bool:
    return line.startswith(":")


def split_field(line: str) -> tuple[str, str] | None:
    """Split a field line at its first colon.

    Returns None for colon-less lines. One leading space of the value is
    dropped; any further whitespace is part of the value.
    """

    name, sep, value = line.partition(":")
    if not sep:
        return None
    if value.startswith(" "):
        value = value[1:]
    return name, value


def parse_retry(value: str) -> int | None:
    m = _LEADING_INT.match(value)
    if m is None:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # Past the interpreter's int conversion digit limit.
        return None


def _apply_field(pending: _PendingEvent, name: str, value: str, *, line_no: int, diagnostics: list[str]) -> None:
    if name == "event":
        pending.event_type = value
    elif name == "data":
        pending.data_lines.append(value)
    elif name == "id":
        pending.id = value
    elif name == "retry":
        retry = parse_retry(value)
        if retry is None:
            logger.debug("ignoring retry value %r at line %d", value, line_no)
            diagnostics.append(f"Invalid retry value at line {line_no}: {value}")
        else:
            pending.retry_ms = retry
    # Unknown fields are ignored.


def _commit(pending: _PendingEvent, *, sequence: int) -> SseEvent | None:
    if not pending.data_lines:
        if pending.raw_lines:
            logger.debug("discarding block without data: %r", pending.raw_lines)
        return None

    data = "\n".join(pending.data_lines)
    return SseEvent(
        sequence=sequence,
        data=data,
        event_type=pending.event_type,
        id=pending.id,
        retry_ms=pending.retry_ms,
        raw_text="\n".join(pending.raw_lines),
        parsed_payload=probe_json_object(data),
    )


def parse_sse_stream(raw: str) -> ParseResult:
    """Parse SSE wire text into events plus advisory diagnostics.

    Never raises for malformed content; callers inspect `diagnostics`.
    Lines are split on "\\n" only, so a CRLF stream keeps a trailing "\\r"
    on every field value.
    """

    if not raw or not raw.strip():
        return ParseResult(events=(), diagnostics=(EMPTY_STREAM,))

    events: list[SseEvent] = []
    diagnostics: list[str] = []
    pending = _PendingEvent()

    def flush() -> None:
        ev = _commit(pending, sequence=len(events) + 1)
        if ev is not None:
            events.append(ev)

    for line_no, line in enumerate(raw.split("\n"), 1):
        if is_boundary(line):
            flush()
            pending = _PendingEvent()
            continue

        if is_comment(line):
            continue

        pending.raw_lines.append(line)

        parts = split_field(line)
        if parts is None:
            continue
        name, value = parts
        _apply_field(pending, name, value, line_no=line_no, diagnostics=diagnostics)

    # Streams need not end with a blank line.
    flush()

    if not events and not diagnostics:
        diagnostics.append(NO_EVENTS)

    logger.debug("parsed %d event(s), %d diagnostic(s)", len(events), len(diagnostics))
    return ParseResult(events=tuple(events), diagnostics=tuple(diagnostics))
