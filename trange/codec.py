"""Structured encoding of ranges as ``{"start": ..., "end": ...}`` pairs.

Timestamps are written as ISO 8601 with their UTC offset and read back with
python-dateutil's strict ISO parser. Decoding always goes through
`Range.between`, so an inverted pair is rejected the same way as in code.
"""

import json
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from dateutil.parser import isoparse

from trange.errors import RangeError
from trange.range import Range


def to_dict(rng: Range) -> dict[str, str]:
    return {"start": rng.start.isoformat(), "end": rng.end.isoformat()}


def _parse(payload: Mapping[str, Any], edge: str) -> datetime:
    try:
        raw = payload[edge]
    except KeyError:
        raise RangeError(
            f"Range payload is missing {edge!r}.\n"
            f"Got keys: {sorted(payload)}\n"
            f'Example: {{"start": "2021-06-12T13:00:00+00:00", '
            f'"end": "2021-06-12T14:00:00+00:00"}}'
        ) from None
    try:
        instant = isoparse(raw)
    except (AttributeError, TypeError, ValueError) as exc:
        raise RangeError(f"Range {edge} is not an ISO 8601 timestamp: {raw!r}") from exc
    if instant.tzinfo is None:
        raise RangeError(
            f"Range {edge} must carry a UTC offset, got {raw!r}.\n"
            f"Fix: append 'Z' or an offset such as '+02:00'"
        )
    return instant


def from_dict(payload: Mapping[str, Any]) -> Range:
    if not isinstance(payload, Mapping):
        raise RangeError(
            f"Range payload must be a mapping, got {type(payload).__name__}"
        )
    return Range.between(_parse(payload, "start"), _parse(payload, "end"))


def dumps(ranges: Iterable[Range], **kwargs: Any) -> str:
    """Encode ranges as a JSON array; extra keyword arguments go to `json.dumps`."""
    return json.dumps([to_dict(rng) for rng in ranges], **kwargs)


def loads(text: str) -> list[Range]:
    payload = json.loads(text)
    if not isinstance(payload, list):
        raise RangeError(
            f"Expected a JSON array of ranges, got {type(payload).__name__}"
        )
    return [from_dict(item) for item in payload]
