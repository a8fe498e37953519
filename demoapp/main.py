"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import logging

import uvicorn

from demoapp.bootstrap import bootstrap_create_application
from demoapp.config import config_load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> None:
    """Start the web server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    application = bootstrap_create_application(settings=settings)
    logger.info("Listening on :%s", settings.port)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
