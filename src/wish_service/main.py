"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from wish_service.api.app import create_app
from wish_service.app_logging import configure_logging
from wish_service.config import Settings
from wish_service.containers import build_container


def main() -> None:
    """Run the wish service on the configured host and port."""
    settings = Settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info(
        "Server is running on http://localhost:%s", settings.port
    )
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
