from __future__ import annotations

from collections.abc import Sequence

from .analysis import should_auto_enable_json
from .config import JSON_MODES
from .events import ParseResult, SseEvent, display_event_type
from .json_probe import MISSING, format_value_for_display

COLUMNS = ("#", "event", "id", "retry", "data")


def resolve_json_mode(mode: str, events: Sequence[SseEvent]) -> bool:
    if mode not in JSON_MODES:
        raise ValueError(f"json mode must be one of {', '.join(JSON_MODES)}: {mode!r}")
    if mode == "auto":
        return should_auto_enable_json(events)
    return mode == "on"


def _truncate(s: str, width: int) -> str:
    if len(s) <= width:
        return s
    return s[: max(width - 3, 0)] + "..."


def _data_cell(event: SseEvent, *, json_mode: bool, placeholder: str) -> str:
    if json_mode and event.parsed_payload is not None:
        return ", ".join(
            f"{k}={format_value_for_display(v, placeholder=placeholder)}" for k, v in event.parsed_payload.items()
        )
    return event.data.replace("\n", "\\n")


def _row(event: SseEvent, *, json_mode: bool, placeholder: str, max_data_width: int) -> tuple[str, ...]:
    def opt(v: object) -> str:
        return format_value_for_display(MISSING if v is None else v, placeholder=placeholder)

    return (
        str(event.sequence),
        display_event_type(event),
        opt(event.id),
        opt(event.retry_ms),
        _truncate(_data_cell(event, json_mode=json_mode, placeholder=placeholder), max_data_width),
    )


def render_table(
    result: ParseResult,
    *,
    json_mode: bool = False,
    placeholder: str = "-",
    max_data_width: int = 80,
) -> str:
    """Render parsed events as a fixed-width text table."""

    rows = [COLUMNS] + [
        _row(e, json_mode=json_mode, placeholder=placeholder, max_data_width=max_data_width) for e in result.events
    ]
    widths = [max(len(r[i]) for r in rows) for i in range(len(COLUMNS))]

    lines = []
    for i, r in enumerate(rows):
        # Last column is left unpadded to avoid trailing whitespace.
        cells = [c.ljust(w) for c, w in zip(r[:-1], widths[:-1])] + [r[-1]]
        lines.append("  ".join(cells))
        if i == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)
