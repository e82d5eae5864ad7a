from typing import Callable, Optional, Union

import pytest
from fastapi.testclient import TestClient

from news_playground import ArticlePipeline, Configuration, create_app


class ScriptedCompletionService:
    """Completion service stub that records every call.

    `reply` is either a fixed string or a callable receiving (call_number, instruction, text).
    `fail_on` makes the given 1-based call raise instead.
    """

    def __init__(self, reply: Union[str, Callable[[int, str, str], str]] = "OK", fail_on: Optional[int] = None, message: str = "quota exceeded"):
        self.reply = reply
        self.fail_on = fail_on
        self.message = message
        self.calls: list[tuple[str, str]] = []

    async def complete(self, instruction: str, text: str) -> str:
        self.calls.append((instruction, text))
        number = len(self.calls)
        if number == self.fail_on:
            raise RuntimeError(self.message)
        if callable(self.reply):
            return self.reply(number, instruction, text)
        return self.reply


@pytest.fixture()
def config() -> Configuration:
    return Configuration(api_key="sk-test")


@pytest.fixture()
def service() -> ScriptedCompletionService:
    return ScriptedCompletionService()


@pytest.fixture()
def pipeline(service, config) -> ArticlePipeline:
    return ArticlePipeline(service, config)


@pytest.fixture()
def make_client(config):
    def _make(service) -> TestClient:
        return TestClient(create_app(service=service, config=config))

    return _make
