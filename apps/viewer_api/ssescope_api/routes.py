from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException

# Running from a checkout: make src/ importable without installing ssescope.
_SRC_DIR = Path(__file__).resolve().parents[3] / "src"
if _SRC_DIR.is_dir() and str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from ssescope.analysis import is_valid_sse_format  # noqa: E402
from ssescope.events import ParseResult  # noqa: E402
from ssescope.render import resolve_json_mode  # noqa: E402
from ssescope.samples import get_sample, list_samples  # noqa: E402
from ssescope.stream_parser import parse_sse_stream  # noqa: E402

router = APIRouter()


def _text_from(body: Any) -> str:
    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str):
        raise HTTPException(status_code=400, detail="text required")
    return text


def _result_payload(text: str, result: ParseResult, json_mode: str = "auto") -> dict[str, Any]:
    try:
        resolved = resolve_json_mode(json_mode, result.events)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    out = result.to_dict()
    out["json_mode"] = resolved
    out["valid_format"] = is_valid_sse_format(text)
    return out


@router.post("/v1/parse")
def parse(body: dict[str, Any]) -> dict[str, Any]:
    text = _text_from(body)
    mode = body.get("json_mode")
    mode = mode if isinstance(mode, str) and mode else "auto"
    return _result_payload(text, parse_sse_stream(text), mode)


@router.post("/v1/validate")
def validate(body: dict[str, Any]) -> dict[str, Any]:
    return {"valid": is_valid_sse_format(_text_from(body))}


@router.get("/v1/samples")
def samples() -> list[dict[str, Any]]:
    return [{"id": s.id, "name": s.name, "description": s.description} for s in list_samples()]


@router.get("/v1/samples/{sample_id}")
def sample(sample_id: str) -> dict[str, Any]:
    try:
        s = get_sample(sample_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail="sample not found") from e

    return {
        "id": s.id,
        "name": s.name,
        "description": s.description,
        "data": s.data,
        "result": _result_payload(s.data, parse_sse_stream(s.data)),
    }
