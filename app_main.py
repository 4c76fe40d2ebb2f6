"""Application entry point for the QuizLink host."""

from __future__ import annotations

from quizlink.server.api_server import run_api_server
from quizlink.utils.logging_config import configure_logging
from quizlink.utils.settings import load_settings


def main() -> None:
    """Load settings, initialize logging, and serve the API."""
    settings = load_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting QuizLink; share links will point at %s", settings.public_origin)
    run_api_server(settings)


if __name__ == "__main__":
    main()
