"""
Deployment entry point.
Builds the FastAPI app from the environment and serves it with uvicorn.
"""

import logging
import os

from news_playground import Configuration, create_app

config = Configuration.from_env()
logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

app = create_app(config=config)

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
