"""Completion service used by every pipeline step: instruction + input in, text out."""

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from .configuration import Configuration
from .exceptions import CompletionError, CompletionTimeoutError
from .llm import get_llm

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionService(Protocol):
    """Anything that turns an instruction and an input text into a completion."""

    async def complete(self, instruction: str, text: str) -> str: ...


# The instruction is a variable value rather than template text, so braces inside prompts stay literal.
PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", "{instruction}"),
        ("human", "{text}"),
    ]
)


class ChatCompletionService:
    """Completion service backed by a LangChain chat model."""

    def __init__(self, config: Configuration, llm: Optional[BaseChatModel] = None):
        self.config = config
        if llm is None:
            llm = get_llm(
                model=config.model,
                api_key=config.require_api_key(),
                base_url=config.base_url,
                timeout=config.step_timeout,
            )
        self.chain = PROMPT | llm | StrOutputParser()

    async def complete(self, instruction: str, text: str) -> str:
        """Run one completion.

        Raises:
            CompletionTimeoutError: If the call exceeds `step_timeout`.
            CompletionError: For any other provider failure, with its message preserved.
        """
        try:
            answer = await asyncio.wait_for(
                self.chain.ainvoke({"instruction": instruction, "text": text}),
                timeout=self.config.step_timeout,
            )
        except asyncio.TimeoutError as e:
            raise CompletionTimeoutError(f"Completion timed out after {self.config.step_timeout:g}s") from e
        except Exception as e:
            logger.error(f"Error during AI processing step: {e}")
            raise CompletionError(str(e) or type(e).__name__) from e
        return answer
