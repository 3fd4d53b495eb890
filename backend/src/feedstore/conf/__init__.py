from .config import VERSION, Settings, load_settings
from .log import setup_logger

__all__ = ["VERSION", "Settings", "load_settings", "setup_logger"]
