"""Tests for model routing."""

import pytest
from langchain_openai import ChatOpenAI

from news_playground.llm import OPENROUTER_BASE_URL, get_llm


def test_gpt_models_use_openai():
    llm = get_llm("gpt-4o-search-preview", api_key="sk-test")

    assert isinstance(llm, ChatOpenAI)
    assert llm.model_name == "gpt-4o-search-preview"


def test_provider_prefixed_models_use_openrouter():
    llm = get_llm("openai/gpt-4o-mini", api_key="sk-test")

    assert isinstance(llm, ChatOpenAI)
    assert llm.openai_api_base == OPENROUTER_BASE_URL


def test_custom_base_url_is_kept():
    llm = get_llm("gpt-4o", api_key="sk-test", base_url="https://gateway.example.com/v1")

    assert llm.openai_api_base == "https://gateway.example.com/v1"


def test_unknown_model_raises_value_error():
    with pytest.raises(ValueError, match="Invalid model: mystery-model"):
        get_llm("mystery-model", api_key="sk-test")
