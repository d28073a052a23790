import logging
from typing import Any, Dict, Optional

from config import load_config

PACKAGE_LOGGERS = ("models", "utils")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(config: Optional[Dict[str, Any]] = None) -> None:
    """Apply the configured log level to the card and scheduler loggers."""
    if config is None:
        config = load_config()
    level = config.get("logging", {}).get("level", "INFO")
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
