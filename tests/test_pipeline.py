"""Tests for the step orchestrator."""

import asyncio

import pytest
from conftest import ScriptedCompletionService
from pydantic import ValidationError

from news_playground import ArticlePipeline, Configuration, PipelineRequest, PipelineState
from news_playground.exceptions import PipelineError
from news_playground.pipeline import STEPS, Step, validate_steps
from news_playground.prompts import CROSS_CHECK_PROMPT, EXTRACTION_PROMPT, SCORING_PROMPT

STEP_NAMES = ["extraction", "nouns", "rephrase", "scoring", "seo", "crosscheck"]
URL = "https://example.com/a"


async def collect(pipeline: ArticlePipeline, request: PipelineRequest) -> list:
    return [event async for event in pipeline.stream(request)]


def reply_with_step_names(number: int, instruction: str, text: str) -> str:
    return f"<result {STEP_NAMES[number - 1]}>"


async def test_events_follow_step_order_and_end_with_complete(pipeline):
    events = await collect(pipeline, PipelineRequest(articleUrl=URL))

    assert [event.type for event in events] == STEP_NAMES + ["complete"]
    assert events[-1].payload == {}


async def test_every_step_payload_carries_stub_output(pipeline):
    events = await collect(pipeline, PipelineRequest(articleUrl=URL))

    payloads = {event.type: event.payload for event in events}
    assert payloads["extraction"] == {"keyInfo": "OK"}
    assert payloads["nouns"] == {"nouns": "OK"}
    assert payloads["rephrase"] == {"rephraseArticle": "OK"}
    assert payloads["scoring"] == {"scoringResult": "OK"}
    assert payloads["seo"] == {"seoMetadata": "OK"}
    assert payloads["crosscheck"] == {"crossCheckResult": "OK"}


@pytest.mark.parametrize("failing_call", range(1, 7))
async def test_failure_stops_pipeline_with_single_error(config, failing_call):
    service = ScriptedCompletionService(fail_on=failing_call, message="rate limited")
    pipeline = ArticlePipeline(service, config)

    events = await collect(pipeline, PipelineRequest(articleUrl=URL))

    assert [event.type for event in events] == STEP_NAMES[: failing_call - 1] + ["error"]
    assert events[-1].payload == {"error": "rate limited"}
    assert len(service.calls) == failing_call


async def test_scoring_failure_yields_extraction_nouns_rephrase_error(config):
    service = ScriptedCompletionService(fail_on=4)

    events = await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    assert [event.type for event in events] == ["extraction", "nouns", "rephrase", "error"]


async def test_step_inputs_contain_their_dependencies(config):
    service = ScriptedCompletionService(reply=reply_with_step_names)
    pipeline = ArticlePipeline(service, config)

    await collect(pipeline, PipelineRequest(articleUrl=URL, additionalText="extra context"))

    inputs = dict(zip(STEP_NAMES, (text for _, text in service.calls)))
    assert inputs["extraction"] == f"{URL}\nextra context"
    assert inputs["nouns"] == URL
    assert inputs["rephrase"] == f"ARTICLE: {URL}\nExtracted Details: <result extraction>"
    for name in ("scoring", "seo"):
        assert "<result extraction>" in inputs[name]
        assert "<result rephrase>" in inputs[name]
        assert "<result nouns>" not in inputs[name]
    for name in ("extraction", "nouns", "rephrase", "scoring", "seo"):
        assert f"<result {name}>" in inputs["crosscheck"]
    assert all(URL in text for text in inputs.values())


async def test_steps_send_their_fixed_instruction(config):
    service = ScriptedCompletionService()

    await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    instructions = [instruction for instruction, _ in service.calls]
    assert instructions[0] == EXTRACTION_PROMPT
    assert instructions[3] == SCORING_PROMPT
    assert instructions[5] == CROSS_CHECK_PROMPT
    assert SCORING_PROMPT in CROSS_CHECK_PROMPT


async def test_missing_additional_text_is_empty(config):
    service = ScriptedCompletionService()

    await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL, additionalText=None))

    assert service.calls[0][1] == f"{URL}\n"


async def test_empty_completion_fails_step_by_default(config):
    service = ScriptedCompletionService(reply=lambda number, *_: "   " if number == 3 else "OK")

    events = await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    assert [event.type for event in events] == ["extraction", "nouns", "error"]
    assert "empty response" in events[-1].payload["error"]


async def test_empty_completion_accepted_when_allowed():
    service = ScriptedCompletionService(reply="")
    config = Configuration(api_key="sk-test", allow_empty_output=True)

    events = await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    assert events[-1].type == "complete"
    assert events[0].payload == {"keyInfo": ""}


async def test_non_text_completion_is_a_failure(config):
    service = ScriptedCompletionService(reply=lambda *_: None)

    events = await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    assert [event.type for event in events] == ["error"]


async def test_error_prefixed_output_is_regular_content(config):
    service = ScriptedCompletionService(reply="Error: this is what the model wrote")

    events = await collect(ArticlePipeline(service, config), PipelineRequest(articleUrl=URL))

    assert events[-1].type == "complete"


async def test_reinvocation_recomputes_every_step(pipeline, service):
    request = PipelineRequest(articleUrl=URL)

    await collect(pipeline, request)
    await collect(pipeline, request)

    assert len(service.calls) == 12


async def test_closing_stream_stops_remaining_steps(pipeline, service):
    events = pipeline.stream(PipelineRequest(articleUrl=URL))

    first = await events.__anext__()
    second = await events.__anext__()
    await events.aclose()

    assert (first.type, second.type) == ("extraction", "nouns")
    assert len(service.calls) == 2


async def test_cancelled_call_is_not_reported_as_error(config):
    started = asyncio.Event()

    class HangingService:
        async def complete(self, instruction, text):
            started.set()
            await asyncio.sleep(3600)

    events = []

    async def consume():
        async for event in ArticlePipeline(HangingService(), config).stream(PipelineRequest(articleUrl=URL)):
            events.append(event)

    task = asyncio.create_task(consume())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert events == []


async def test_run_returns_accumulated_state(config):
    service = ScriptedCompletionService(reply=reply_with_step_names)

    state = await ArticlePipeline(service, config).run(PipelineRequest(articleUrl=URL))

    assert state.key_info == "<result extraction>"
    assert state.cross_check_result == "<result crosscheck>"
    assert all(value is not None for value in state.as_dict().values())


async def test_run_raises_with_failing_step(config):
    service = ScriptedCompletionService(fail_on=5, message="boom")

    with pytest.raises(PipelineError) as excinfo:
        await ArticlePipeline(service, config).run(PipelineRequest(articleUrl=URL))

    assert excinfo.value.step == "seo"
    assert excinfo.value.message == "boom"


def test_state_fields_are_set_once():
    state = PipelineState()
    state.record("key_info", "first")

    with pytest.raises(ValueError):
        state.record("key_info", "second")
    with pytest.raises(KeyError):
        state.record("unknown", "value")
    assert state.key_info == "first"
    assert state.nouns is None


def test_request_requires_non_blank_url():
    with pytest.raises(ValidationError):
        PipelineRequest(articleUrl="   ")
    with pytest.raises(ValidationError):
        PipelineRequest(additionalText="context")


def test_declared_dependencies_precede_each_step():
    validate_steps(STEPS)
    assert [step.name for step in STEPS] == STEP_NAMES


def test_out_of_order_dependencies_are_rejected():
    rephrase, extraction = STEPS[2], STEPS[0]

    with pytest.raises(ValueError, match="have not run yet"):
        validate_steps((rephrase, extraction))


def test_duplicate_steps_are_rejected():
    extraction: Step = STEPS[0]

    with pytest.raises(ValueError, match="Duplicate"):
        validate_steps((extraction, extraction))
