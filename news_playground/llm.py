from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


def get_llm(
    model: str,
    api_key: str,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> BaseChatModel:
    """Initialize and return a chat model based on the model ID.

    Args:
        model (str): Identifier for the language model to initialize.
        api_key (str): Credential of the provider the model routes to: OpenRouter for "provider/model" IDs,
            Google for "gemini*", OpenAI otherwise.
        base_url (str, optional): OpenAI-compatible endpoint overriding the provider default.
        timeout (float, optional): Request timeout in seconds handed to the client.

    Returns:
        BaseChatModel: Initialized language model instance.

    Raises:
        ValueError: If the model ID is invalid or initialization fails.
    """
    try:
        if "/" in model:
            llm = ChatOpenAI(
                model=model,
                api_key=api_key,
                base_url=base_url or OPENROUTER_BASE_URL,
                timeout=timeout,
            )
        elif model.startswith(("gpt", "o1")):
            llm = ChatOpenAI(
                model=model,
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
            )
        elif model.startswith("gemini"):
            llm = ChatGoogleGenerativeAI(
                model=model,
                api_key=api_key,
                timeout=timeout,
            )
        else:
            llm = init_chat_model(model=model, api_key=api_key, base_url=base_url, timeout=timeout)
    except Exception as e:
        raise ValueError(f"Invalid model: {model}\n{e}") from e
    return llm
