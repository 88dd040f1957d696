# sitescore/core/logging.py
# -----------------------------------------------------------------------------
# Loguru setup
# - rotating file sink + stderr, level from settings
# - imported once by the application entrypoint
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from sitescore.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(exist_ok=True, parents=True)

logger.remove()  # drop the default handler
logger.add(sys.stderr, level=settings.LOG_LEVEL)
logger.add(
    LOG_DIR / "app.log",
    rotation=settings.LOG_ROTATION,
    retention=settings.LOG_RETENTION,
    enqueue=True,  # safe across worker processes
    backtrace=True,
    diagnose=True,
    level=settings.LOG_LEVEL,
)
