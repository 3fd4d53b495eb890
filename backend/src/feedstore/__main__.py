import logging

import uvicorn

from feedstore.app import create_app
from feedstore.conf import VERSION, load_settings, setup_logger

logger = logging.getLogger(__name__)


def main():
    settings = load_settings()
    setup_logger(settings)
    settings.feeds_path.mkdir(parents=True, exist_ok=True)
    logger.info("Feedstore %s serving feeds from %s", VERSION, settings.feeds_path)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
