"""Client side of the pipeline: reads the event stream and keeps a per-step view of the results."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

import httpx

from .exceptions import EventParseError, PipelineHTTPError
from .pipeline import STEPS, StreamEvent
from .sse import RecordBuffer, parse_record

logger = logging.getLogger(__name__)

STEP_TITLES = {
    "extraction": "Extracted Key Information",
    "nouns": "Extracted Nouns",
    "rephrase": "Rephrased Article",
    "scoring": "Scoring Result",
    "seo": "SEO Metadata",
    "crosscheck": "Cross-Check Result",
}

PROCESSING_ERROR = "Error processing the response stream."
STREAM_CUT_SHORT = "The response stream ended before the pipeline finished."


@dataclass
class PipelineView:
    """What the operator sees: one slot per step plus overall status."""

    slots: dict[str, Optional[str]] = field(default_factory=lambda: {step.name: None for step in STEPS})
    active: Optional[str] = None
    finished: bool = False
    error: Optional[str] = None
    processing_errors: list[str] = field(default_factory=list)

    @property
    def stopped(self) -> bool:
        return self.finished or self.error is not None

    def apply(self, event: StreamEvent) -> bool:
        """Update the view from one event. Returns False when the event was not applied."""
        if self.stopped:
            return False

        if event.type == "error":
            self.error = str(event.payload.get("error") or "An error occurred.")
            return True

        if event.type == "complete":
            self.finished = True
            return True

        step = next((step for step in STEPS if step.name == event.type), None)
        if step is None or step.payload_key not in event.payload:
            self.processing_errors.append(PROCESSING_ERROR)
            logger.warning(f"Ignoring event '{event.type}' with payload keys {sorted(event.payload)}")
            return False

        self.slots[step.name] = str(event.payload[step.payload_key])
        self.active = step.name
        return True


def consume(chunks: Iterable[str], view: Optional[PipelineView] = None) -> Iterator[PipelineView]:
    """Feed text chunks through the record splitter and yield the view after every applied event.

    Malformed records are recorded as processing errors and reading continues. Nothing is read after an
    `error` event. A stream that ends with neither `complete` nor `error` leaves the view failed.
    """
    view = view or PipelineView()
    buffer = RecordBuffer()

    def records() -> Iterator[str]:
        for chunk in chunks:
            yield from buffer.feed(chunk)
        yield from buffer.flush()

    for record in records():
        try:
            event = parse_record(record)
        except EventParseError as e:
            logger.warning(f"Error parsing stream data: {e}")
            view.processing_errors.append(PROCESSING_ERROR)
            continue

        if view.apply(event):
            yield view
        if view.error is not None:
            return

    if not view.stopped:
        logger.warning("Response stream ended before the pipeline finished")
        view.error = STREAM_CUT_SHORT
        yield view


def _error_details(response: httpx.Response) -> tuple[str, Optional[str]]:
    try:
        body = response.json()
    except ValueError:
        return response.text or "An unknown error occurred.", None
    if not isinstance(body, dict):
        return str(body), None
    return str(body.get("error") or "An unknown error occurred."), body.get("details")


def stream_article(
    base_url: str,
    article_url: str,
    additional_text: str = "",
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> Iterator[PipelineView]:
    """POST an article to the pipeline endpoint and yield the view as each event arrives.

    Args:
        base_url: Root URL of the API, e.g. "http://localhost:8000".
        article_url: URL of the article to process.
        additional_text: Optional context forwarded to the extraction step.
        client: Existing httpx client to reuse (a TestClient works too).
        timeout: Read timeout for a fresh client; None waits as long as the pipeline takes.

    Raises:
        PipelineHTTPError: If the endpoint answers with a non-2xx status.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=httpx.Timeout(timeout, connect=10.0))

    try:
        with client.stream(
            "POST",
            f"{base_url.rstrip('/')}/api/process-article",
            json={"articleUrl": article_url, "additionalText": additional_text},
        ) as response:
            if response.status_code >= 400:
                response.read()
                message, details = _error_details(response)
                raise PipelineHTTPError(response.status_code, message, details)
            yield from consume(response.iter_text())
    finally:
        if owns_client:
            client.close()
