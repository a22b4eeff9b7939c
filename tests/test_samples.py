from __future__ import annotations

import pytest

from ssescope.analysis import is_valid_sse_format, should_auto_enable_json
from ssescope.samples import MINIMAL_SAMPLE, SAMPLE_SSE_STREAM, get_sample, list_samples
from ssescope.stream_parser import parse_sse_stream


def test_sample_ids_are_unique() -> None:
    ids = [s.id for s in list_samples()]
    assert len(ids) == len(set(ids))
    assert "comprehensive" in ids and "basic" in ids


def test_every_sample_parses_cleanly() -> None:
    for s in list_samples():
        res = parse_sse_stream(s.data)
        assert res.events, s.id
        assert res.diagnostics == (), s.id
        assert is_valid_sse_format(s.data), s.id


def test_get_sample_unknown() -> None:
    with pytest.raises(KeyError):
        get_sample("nope")


def test_aliases() -> None:
    assert SAMPLE_SSE_STREAM == get_sample("comprehensive").data
    assert MINIMAL_SAMPLE == get_sample("basic").data


def test_retry_sample_drops_data_less_block_and_colonless_id() -> None:
    res = parse_sse_stream(get_sample("retry").data)

    assert [e.data for e in res.events] == [
        "Initial message with retry set",
        "Another message",
        "Retry interval updated",
        "Event ID will be reset next",
        "This event has no ID (lastEventId is now empty)",
        "Back to normal operation",
    ]
    assert res.events[0].retry_ms is None
    assert res.events[2].retry_ms == 10000
    assert res.events[3].id is None


def test_openai_sample_is_json() -> None:
    res = parse_sse_stream(get_sample("openai").data)

    assert should_auto_enable_json(res.events)
    assert res.events[0].event_type == "response.created"
    assert res.events[-1].parsed_payload["sequence_number"] == 16
