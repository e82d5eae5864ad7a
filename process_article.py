"""
News Article Processing Example

This example demonstrates how to:
1. Run the six pipeline steps for a single article URL
2. Print each step's result
3. Stop at the first failing step

Usage:
    python process_article.py <article-url> [additional text]
"""

import asyncio
import logging
import sys

from news_playground import ArticlePipeline, ChatCompletionService, Configuration, PipelineRequest
from news_playground.client import STEP_TITLES
from news_playground.exceptions import NewsPlaygroundError, PipelineError
from news_playground.pipeline import STEPS

DEFAULT_URL = "https://www.nytimes.com/2025/05/19/us/politics/senate-crypto-regulation-bill.html"


async def process(url: str, additional_text: str = "") -> None:
    config = Configuration.from_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    pipeline = ArticlePipeline(ChatCompletionService(config), config)

    state = await pipeline.run(PipelineRequest(article_url=url, additional_text=additional_text))
    for step in STEPS:
        print(f"\n📝 {STEP_TITLES[step.name].upper()}:")
        print(getattr(state, step.field))


def main():
    """Main example function."""
    url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL
    additional_text = " ".join(sys.argv[2:])

    print("📰 News Article Processing Example")
    print("=" * 50)

    try:
        asyncio.run(process(url, additional_text))
        print("\n✅ All steps completed successfully!")
    except PipelineError as e:
        print(f"❌ Step '{e.step}' failed: {e.message}")
        sys.exit(1)
    except NewsPlaygroundError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
