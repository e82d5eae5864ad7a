"""Server-sent event framing for pipeline events."""

import json
from typing import Iterator

from pydantic import ValidationError

from .exceptions import EventParseError
from .pipeline import StreamEvent


def encode_event(event: StreamEvent) -> str:
    """Frame an event as an `event:`/`data:` record terminated by a blank line."""
    return f"event: {event.type}\ndata: {json.dumps(event.payload)}\n\n"


def parse_record(record: str) -> StreamEvent:
    """Parse one event-stream record into a StreamEvent.

    Args:
        record: The record text without its terminating blank line.

    Returns:
        StreamEvent: The decoded event.

    Raises:
        EventParseError: If the record has no event name, no data, undecodable JSON or an unknown type.
    """
    event_type = None
    data_lines = []
    for line in record.splitlines():
        if not line or line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if field == "event":
            event_type = value
        elif field == "data":
            data_lines.append(value)

    if event_type is None:
        raise EventParseError(f"Record has no event name: {record!r}")
    if not data_lines:
        raise EventParseError(f"Record '{event_type}' has no data")

    try:
        payload = json.loads("\n".join(data_lines))
    except json.JSONDecodeError as e:
        raise EventParseError(f"Record '{event_type}' has invalid JSON data: {e}") from e
    if not isinstance(payload, dict):
        raise EventParseError(f"Record '{event_type}' data is not a JSON object")

    try:
        return StreamEvent(type=event_type, payload=payload)
    except ValidationError as e:
        raise EventParseError(f"Unknown event type: {event_type}") from e


class RecordBuffer:
    """Collects text chunks and yields complete records as their blank-line terminators arrive."""

    def __init__(self):
        self._buffer = ""
        self._carriage_return = False

    def feed(self, chunk: str) -> Iterator[str]:
        if self._carriage_return:
            chunk = "\r" + chunk
        # A trailing CR may be the first half of a CRLF split across chunks.
        self._carriage_return = chunk.endswith("\r")
        if self._carriage_return:
            chunk = chunk[:-1]
        self._buffer += chunk.replace("\r\n", "\n").replace("\r", "\n")
        while "\n\n" in self._buffer:
            record, self._buffer = self._buffer.split("\n\n", 1)
            if record.strip():
                yield record

    def flush(self) -> Iterator[str]:
        """Yield whatever is left once the stream has ended."""
        record, self._buffer = self._buffer, ""
        self._carriage_return = False
        if record.strip():
            yield record
