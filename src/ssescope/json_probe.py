from __future__ import annotations

import json
from typing import Any


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Distinguishes "field absent" from an explicit JSON null when formatting.
MISSING: Any = _Missing()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not a JSON value: {name}")


def probe_json_object(text: str) -> dict[str, Any] | None:
    """Decode `text` as JSON, keeping the result only if it is an object."""

    try:
        obj = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        # ValueError covers JSONDecodeError, NaN/Infinity and over-long integers.
        return None
    if isinstance(obj, dict):
        return obj
    # Arrays, scalars and null are valid JSON but not payload objects.
    return None


def format_value_for_display(value: Any, *, placeholder: str = "-") -> str:
    if value is MISSING:
        return placeholder
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
