"""Entry point: ``python main.py`` or ``uvicorn main:app``."""

import logging
import os

import uvicorn

from product_service.api import create_app
from product_service.config import get_config, get_environment

config = get_config()
logging.basicConfig(
    level=config.logging.level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.getLogger(__name__).info(
    f"Starting product catalog ({get_environment()} environment, {config.store.backend} store)"
)

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8080")))
