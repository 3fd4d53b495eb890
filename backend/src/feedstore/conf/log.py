import logging

from .config import Settings

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s  %(message)s"
DATE_FORMAT = "%Y-%m-%d %X"


def setup_logger(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_path is not None:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
