"""
app/__main__.py

Run the API with uvicorn:

    python -m app
"""

import uvicorn

from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
