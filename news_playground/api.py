"""
News Article Processing API
Streams the six pipeline steps back to the browser as server-sent events
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from .completion import ChatCompletionService, CompletionService
from .configuration import Configuration
from .pipeline import ArticlePipeline, PipelineRequest
from .sse import encode_event

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def create_app(service: Optional[CompletionService] = None, config: Optional[Configuration] = None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        service: Completion service shared by every request. Built from `config` on first use when omitted.
        config: Process-wide configuration. Read from the environment when omitted.

    Returns:
        FastAPI: The configured application.
    """
    app = FastAPI(title="News Article AI Playground", description="Six-step article pipeline streamed as server-sent events")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.service = service

    def get_pipeline() -> ArticlePipeline:
        if app.state.config is None:
            app.state.config = Configuration.from_env()
        if app.state.service is None:
            app.state.service = ChatCompletionService(app.state.config)
        return ArticlePipeline(app.state.service, app.state.config)

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {"status": "healthy"}

    @app.post("/api/process-article")
    async def process_article(request: Request):
        """Run the pipeline for one article and stream each step as it finishes."""
        try:
            try:
                body = await request.json()
            except ValueError as e:
                logger.warning(f"JSON parsing error: {e}")
                return JSONResponse({"error": "Invalid JSON payload", "details": str(e)}, status_code=400)

            article_url = body.get("articleUrl") if isinstance(body, dict) else None
            if not isinstance(article_url, str) or not article_url.strip():
                logger.warning("Rejected request without articleUrl")
                return JSONResponse({"error": "URL is required"}, status_code=400)

            try:
                payload = PipelineRequest.model_validate(body)
            except ValidationError as e:
                logger.warning(f"Rejected invalid request: {e}")
                return JSONResponse({"error": "Invalid request", "details": str(e)}, status_code=400)

            pipeline = get_pipeline()
        except Exception as e:
            logger.error(f"API request error: {e}")
            return JSONResponse({"error": str(e)}, status_code=500)

        logger.info(f"📰 Processing article: {payload.article_url}")

        async def event_source() -> AsyncGenerator[str, None]:
            events = pipeline.stream(payload)
            try:
                async for event in events:
                    if await request.is_disconnected():
                        logger.warning(f"Client disconnected, stopping pipeline for {payload.article_url}")
                        break
                    yield encode_event(event)
            finally:
                await events.aclose()

        return StreamingResponse(event_source(), media_type="text/event-stream", headers=SSE_HEADERS)

    return app
