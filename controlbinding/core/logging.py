import sys
from typing import Optional
from loguru import logger
import os


def setup_logging(debug_mode: bool = True, log_dir: str = None, log_level: Optional[str] = None):
    """
    Configures Loguru logger.

    `log_level` (usually `BindingSettings.log_level`) sets the console level;
    without it `debug_mode` picks DEBUG or INFO. Binding diagnostics (skipped
    bindings, invalid modes) go through the same logger, so integrators see
    them next to their own output.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = log_level or ("DEBUG" if debug_mode else "INFO")
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        logger.add(os.path.join(log_dir, "binding_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info("Logging initialized.")
