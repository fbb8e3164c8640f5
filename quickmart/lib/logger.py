# ================== LOGURU LOGGER CONFIG =====================
import sys
import os
from loguru import logger

LOG_DIR = os.environ.get("LOG_DIR") or "logs"
os.makedirs(LOG_DIR, exist_ok=True)

log_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, colorize=True, format=log_format, level="INFO")
logger.add(
    os.path.join(LOG_DIR, "quickmart_service.json"),
    rotation="100 MB",
    retention="10 days",
    compression="zip",
    serialize=True,
    level="DEBUG",
    enqueue=True,
    catch=True,
)


def log_request_error(message, status, error=None):
    if status >= 500:
        logger.opt(exception=error).error(f"[{status}] {message}")
    else:
        logger.warning(f"[{status}] {message}")

