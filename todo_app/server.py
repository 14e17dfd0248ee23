"""Run the todo API under uvicorn."""

import logging

import uvicorn

from todo_app.core.config import settings
from todo_app.core.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    logger.info("Server listen on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "todo_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
