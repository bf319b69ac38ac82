"""
Run the server: python -m ai_pm
"""
import logging

import uvicorn

from .config import get_settings
from .main import app

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
