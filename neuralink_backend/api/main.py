"""Process entrypoint that serves the API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from neuralink_backend.api.api_config import get_api_config
from neuralink_backend.api.app import create_app
from neuralink_backend.common.logging import configure_logging
from neuralink_backend.common.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging()
    config = get_api_config()
    app = create_app(config)

    logger.info("%s running on port %s", settings.PROJECT_NAME, settings.PORT)
    logger.info("Health check: http://localhost:%s/api/health", settings.PORT)
    logger.info("Environment: %s", config.environment)

    # Access lines come from the app's own logger, so uvicorn's copy is disabled.
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=False,
        server_header=False,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
