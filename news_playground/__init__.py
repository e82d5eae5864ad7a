"""News Playground - pipes a news article URL through six LLM steps and streams the results"""

from .api import create_app
from .client import PipelineView, consume, stream_article
from .completion import ChatCompletionService, CompletionService
from .configuration import Configuration
from .pipeline import STEPS, ArticlePipeline, PipelineRequest, PipelineState, StreamEvent

__all__ = [
    "ArticlePipeline",
    "ChatCompletionService",
    "CompletionService",
    "Configuration",
    "PipelineRequest",
    "PipelineState",
    "PipelineView",
    "STEPS",
    "StreamEvent",
    "consume",
    "create_app",
    "stream_article",
]

__version__ = "0.1.0"
