import logging
from typing import Any, Iterator, Optional

import gradio as gr
import httpx

from .client import STEP_TITLES, PipelineView, stream_article
from .configuration import Configuration
from .exceptions import PipelineHTTPError
from .pipeline import STEPS

logger = logging.getLogger(__name__)


def render(view: PipelineView, status: Optional[str] = None) -> list[Any]:
    """Map a view onto the status box, the six result boxes and the six accordions."""
    if status is None:
        if view.error is not None:
            status = f"**Error:** {view.error}"
        elif view.finished:
            status = "✅ Pipeline complete"
        else:
            status = "Processing steps..."
    if view.processing_errors:
        status += f"\n\n⚠️ {view.processing_errors[-1]}"

    slots = [gr.update(value=view.slots[step.name] or "") for step in STEPS]
    accordions = [gr.update(open=step.name == view.active) for step in STEPS]
    return [status, *slots, *accordions]


def build_ui(config: Optional[Configuration] = None) -> gr.Blocks:
    config = config or Configuration.from_env()

    def process(article_url: str, additional_text: str) -> Iterator[list[Any]]:
        view = PipelineView()
        if not article_url.strip():
            yield render(view, status="**Error:** URL is required")
            return

        yield render(view)
        try:
            for view in stream_article(config.api_url, article_url, additional_text):
                yield render(view)
        except PipelineHTTPError as e:
            yield render(view, status=f"**Error:** {e}")
        except httpx.HTTPError as e:
            logger.error(f"Fetch error: {e}")
            yield render(view, status=f"**Error:** {e}")

    with gr.Blocks(title="News Article AI Playground") as ui:
        gr.Markdown("# News Article AI Playground")
        article_url = gr.Textbox(label="Article URL", placeholder="Enter article URL (e.g., https://example.com/news/article-title)")
        additional_text = gr.Textbox(label="Additional Text (Optional)", placeholder="Provide additional context or instructions for the AI...", lines=4)
        submit = gr.Button("Process Article", variant="primary")
        status = gr.Markdown("Enter a URL and click 'Process Article' to see the AI output here.")

        slots = []
        accordions = []
        for step in STEPS:
            with gr.Accordion(STEP_TITLES[step.name], open=False) as accordion:
                slots.append(gr.Markdown())
            accordions.append(accordion)

        submit.click(process, inputs=[article_url, additional_text], outputs=[status, *slots, *accordions])

    return ui


if __name__ == "__main__":
    config = Configuration.from_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    build_ui(config).launch()
