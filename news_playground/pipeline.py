"""Six-step article pipeline: each step sends a fixed instruction plus the earlier results to the completion service."""

import logging
from dataclasses import dataclass
from typing import Any, AsyncGenerator, Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .completion import CompletionService
from .configuration import Configuration
from .exceptions import CompletionError, EmptyCompletionError, PipelineError
from .prompts import (
    CROSS_CHECK_PROMPT,
    EXTRACTION_PROMPT,
    NOUN_EXTRACTION_PROMPT,
    REPHRASING_PROMPT,
    SCORING_PROMPT,
    SEO_PROMPT,
)

logger = logging.getLogger(__name__)

EventType = Literal["extraction", "nouns", "rephrase", "scoring", "seo", "crosscheck", "complete", "error"]


# ============================================================================
# Data Models
# ============================================================================


class PipelineRequest(BaseModel):
    """One article submission."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    article_url: str = Field(alias="articleUrl", description="URL of the news article")
    additional_text: str = Field(default="", alias="additionalText", description="Optional context or instructions")

    @field_validator("article_url")
    @classmethod
    def _require_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("URL is required")
        return value

    @field_validator("additional_text", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class PipelineState:
    """Results accumulated during one run. Each field is written at most once."""

    FIELDS = ("key_info", "nouns", "rephrase_article", "scoring_result", "seo_metadata", "cross_check_result")

    def __init__(self):
        self._values: dict[str, str] = {}

    def __getattr__(self, name: str) -> Optional[str]:
        if name in PipelineState.FIELDS:
            return self._values.get(name)
        raise AttributeError(name)

    def record(self, field: str, value: str) -> None:
        if field not in PipelineState.FIELDS:
            raise KeyError(f"Unknown pipeline field: {field}")
        if field in self._values:
            raise ValueError(f"Pipeline field already set: {field}")
        self._values[field] = value

    def as_dict(self) -> dict[str, Optional[str]]:
        return {field: self._values.get(field) for field in PipelineState.FIELDS}


class StreamEvent(BaseModel):
    """One record of the event stream sent back to the caller."""

    model_config = ConfigDict(frozen=True)

    type: EventType
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def for_step(cls, step: "Step", text: str) -> "StreamEvent":
        return cls(type=step.name, payload={step.payload_key: text})

    @classmethod
    def complete(cls) -> "StreamEvent":
        return cls(type="complete")

    @classmethod
    def error(cls, message: str) -> "StreamEvent":
        return cls(type="error", payload={"error": message})


@dataclass(frozen=True)
class StepOutcome:
    """Either the text a step produced or the reason it failed."""

    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "StepOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, reason: str) -> "StepOutcome":
        return cls(error=reason)


# ============================================================================
# Step Definitions
# ============================================================================


@dataclass(frozen=True)
class Step:
    """A pipeline step and the earlier steps whose output it reads."""

    name: str
    field: str
    payload_key: str
    instruction: str
    requires: tuple[str, ...]
    build_input: Callable[[PipelineRequest, PipelineState], str]


def _extraction_input(request: PipelineRequest, state: PipelineState) -> str:
    return f"{request.article_url}\n{request.additional_text}"


def _nouns_input(request: PipelineRequest, state: PipelineState) -> str:
    return request.article_url


def _rephrase_input(request: PipelineRequest, state: PipelineState) -> str:
    return f"ARTICLE: {request.article_url}\nExtracted Details: {state.key_info}"


def _review_input(request: PipelineRequest, state: PipelineState) -> str:
    return f"ARTICLE: {request.article_url}\nExtracted Details: {state.key_info}\nRephrased Article: {state.rephrase_article}"


def _crosscheck_input(request: PipelineRequest, state: PipelineState) -> str:
    return "\n".join(
        [
            f"Article: {request.article_url}",
            f"Extracted Details: {state.key_info}",
            f"Extracted Nouns: {state.nouns}",
            f"Rephrased Article: {state.rephrase_article}",
            f"Scoring Result: {state.scoring_result}",
            f"SEO Metadata: {state.seo_metadata}",
        ]
    )


STEPS: tuple[Step, ...] = (
    Step("extraction", "key_info", "keyInfo", EXTRACTION_PROMPT, (), _extraction_input),
    Step("nouns", "nouns", "nouns", NOUN_EXTRACTION_PROMPT, (), _nouns_input),
    Step("rephrase", "rephrase_article", "rephraseArticle", REPHRASING_PROMPT, ("extraction",), _rephrase_input),
    Step("scoring", "scoring_result", "scoringResult", SCORING_PROMPT, ("extraction", "rephrase"), _review_input),
    Step("seo", "seo_metadata", "seoMetadata", SEO_PROMPT, ("extraction", "rephrase"), _review_input),
    Step(
        "crosscheck",
        "cross_check_result",
        "crossCheckResult",
        CROSS_CHECK_PROMPT,
        ("extraction", "nouns", "rephrase", "scoring", "seo"),
        _crosscheck_input,
    ),
)


def validate_steps(steps: tuple[Step, ...]) -> None:
    """Check that every step only depends on steps ordered before it."""
    seen: set[str] = set()
    for step in steps:
        if step.name in seen:
            raise ValueError(f"Duplicate step: {step.name}")
        missing = [name for name in step.requires if name not in seen]
        if missing:
            raise ValueError(f"Step '{step.name}' depends on steps that have not run yet: {', '.join(missing)}")
        seen.add(step.name)


validate_steps(STEPS)


# ============================================================================
# Orchestrator
# ============================================================================


class ArticlePipeline:
    """Runs the steps strictly one after another against a completion service."""

    def __init__(
        self,
        service: CompletionService,
        config: Optional[Configuration] = None,
        steps: tuple[Step, ...] = STEPS,
    ):
        validate_steps(steps)
        self.service = service
        self.config = config or Configuration()
        self.steps = steps

    async def run_step(self, step: Step, request: PipelineRequest, state: PipelineState) -> StepOutcome:
        """Call the completion service for one step and wrap the answer."""
        text = step.build_input(request, state)
        try:
            answer = await self.service.complete(step.instruction, text)
            if not isinstance(answer, str):
                raise CompletionError(f"Completion service returned no text for step '{step.name}'")
            if not answer.strip() and not self.config.allow_empty_output:
                raise EmptyCompletionError(f"Completion service returned an empty response for step '{step.name}'")
        except Exception as e:
            logger.error(f"❌ Step '{step.name}' failed: {e}")
            return StepOutcome.failure(str(e) or type(e).__name__)
        return StepOutcome.success(answer)

    async def _outcomes(self, request: PipelineRequest) -> AsyncGenerator[tuple[Step, StepOutcome, PipelineState], None]:
        state = PipelineState()
        for step in self.steps:
            logger.info(f"🚀 Running step '{step.name}' for {request.article_url}")
            outcome = await self.run_step(step, request, state)
            if outcome.ok:
                state.record(step.field, outcome.text)
                logger.info(f"✅ Step '{step.name}' finished ({len(outcome.text)} chars)")
            yield step, outcome, state
            if not outcome.ok:
                return

    async def stream(self, request: PipelineRequest) -> AsyncGenerator[StreamEvent, None]:
        """Yield one event per finished step, then `complete`; or stop at the first `error`.

        Closing the generator early cancels the remaining steps.
        """
        outcomes = self._outcomes(request)
        try:
            async for step, outcome, _ in outcomes:
                if not outcome.ok:
                    yield StreamEvent.error(outcome.error)
                    return
                yield StreamEvent.for_step(step, outcome.text)
        finally:
            await outcomes.aclose()
        logger.info(f"🎯 Pipeline complete for {request.article_url}")
        yield StreamEvent.complete()

    async def run(self, request: PipelineRequest) -> PipelineState:
        """Run every step and return the accumulated results.

        Raises:
            PipelineError: On the first failing step.
        """
        state = PipelineState()
        async for step, outcome, state in self._outcomes(request):
            if not outcome.ok:
                raise PipelineError(step.name, outcome.error)
        return state
