"""Exceptions raised across the news playground."""

from typing import Optional


class NewsPlaygroundError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(NewsPlaygroundError):
    """The environment does not describe a usable configuration."""


class CompletionError(NewsPlaygroundError):
    """The completion service failed to produce text."""


class CompletionTimeoutError(CompletionError):
    """The completion service did not answer within the configured bound."""


class EmptyCompletionError(CompletionError):
    """The completion service answered with no text."""


class PipelineError(NewsPlaygroundError):
    """A pipeline step failed; carries the failing step's name."""

    def __init__(self, step: str, message: str):
        super().__init__(message)
        self.step = step
        self.message = message


class EventParseError(NewsPlaygroundError):
    """An event-stream record could not be decoded."""


class PipelineHTTPError(NewsPlaygroundError):
    """The pipeline endpoint rejected the request before streaming."""

    def __init__(self, status_code: int, message: str, details: Optional[str] = None):
        super().__init__(f"API error: {status_code} - {details or message}")
        self.status_code = status_code
        self.message = message
        self.details = details
