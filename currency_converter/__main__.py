import logging

import uvicorn

from currency_converter.core.config import get_settings
from currency_converter.main import app

logger = logging.getLogger("currency_converter.server")


def main() -> None:
    settings = get_settings()
    logger.info("serving %s on http://%s:%d", settings.app_name, settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        log_config=None,  # keep the JSON handler from init_logging
    )


if __name__ == "__main__":
    main()
