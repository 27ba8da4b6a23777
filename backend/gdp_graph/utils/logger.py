import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from ..config.settings import settings

# ---------------------------------------------------
# Named logger shared by every module
# ---------------------------------------------------
log = logging.getLogger("GDPGraph")
log.setLevel(logging.DEBUG)
log.propagate = False

console_format = logging.Formatter(
    "[%(asctime)s] [%(levelname)s] %(message)s",
    "%Y-%m-%d %H:%M:%S"
)

file_format = logging.Formatter(
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    "%Y-%m-%d %H:%M:%S"
)

# ---------------------------------------------------
# Console: level from LOG_LEVEL
# ---------------------------------------------------
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(settings.LOG_LEVEL.upper())
console_handler.setFormatter(console_format)
log.addHandler(console_handler)

# ---------------------------------------------------
# File: only when LOG_FILE is set, keeps debug output
# ---------------------------------------------------
if settings.LOG_FILE:
    os.makedirs(os.path.dirname(settings.LOG_FILE) or ".", exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_FILE,
        maxBytes=1_000_000,
        backupCount=2
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_format)
    log.addHandler(file_handler)
