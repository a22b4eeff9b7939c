from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_EVENT_TYPE = "message"


@dataclass(frozen=True)
class SseEvent:
    sequence: int
    data: str

    # None means the stream never sent an `event:` field for this block.
    event_type: str | None = None
    id: str | None = None
    retry_ms: int | None = None

    # Contributing field lines (comments and blank separators excluded).
    raw_text: str | None = None

    # Only set when `data` decodes to a JSON object.
    parsed_payload: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "event_type": self.event_type,
            "data": self.data,
            "id": self.id,
            "retry_ms": self.retry_ms,
            "raw_text": self.raw_text,
            "parsed_payload": self.parsed_payload,
        }


@dataclass(frozen=True)
class ParseResult:
    events: tuple[SseEvent, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return bool(self.events) and not self.diagnostics

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "events": [e.to_dict() for e in self.events],
            "diagnostics": list(self.diagnostics),
        }


def display_event_type(event: SseEvent) -> str:
    """Event type as a browser EventSource would dispatch it."""

    return event.event_type if event.event_type is not None else DEFAULT_EVENT_TYPE
