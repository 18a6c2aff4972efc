import logging
import sys
from pathlib import Path
from datetime import datetime

from megacities.utils.config import settings

# Global logger dictionary to keep track of all created loggers
LOGGERS = {}

def get_logger(name="megacities"):
    """Get or create a logger with the given name."""
    global LOGGERS

    if name in LOGGERS:
        return LOGGERS[name]

    logger = logging.getLogger(name)
    LOGGERS[name] = logger
    return logger

def configure_logging():
    """Configure structured logging for the application"""
    # Check if logging has already been configured
    if logging.getLogger().handlers:
        return get_logger("megacities")

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"megacities_{current_time}.log"

    # Configure the root logger
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Configure third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app_logger = get_logger("megacities")
    app_logger.info("Logging configured successfully")
    return app_logger

# Initialize the root logger - will be called when this module is imported
root_logger = configure_logging()
