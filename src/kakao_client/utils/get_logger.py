import logging
import os
from datetime import UTC, datetime
from logging.handlers import TimedRotatingFileHandler

import pytz

# Setup Environment
TIMEZONE = pytz.timezone(os.getenv("KAKAO_LOG_TIMEZONE", "Asia/Seoul"))
LOG_DIR = os.getenv("KAKAO_LOG_DIR", "/tmp/log/kakao_client")

"""
Multi-logger setup
logs to console and optionally to a rotating file
"""

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.INFO


def set_level(level):
    global Default_Level
    Default_Level = level
    for logger in Logger_Cache.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        local_time = utc_dt.astimezone(self.local_tz)

        record.local_time = local_time.strftime("%I:%M:%S %p")
        record.name = record.name[0:24]
        if record.levelno == logging.WARN:
            self._style._fmt = "%(local_time)-10s %(name)-24s:%(levelname)-8s =====> Warning %(message)s"

        elif record.levelno == logging.ERROR:
            self._style._fmt = "\n%(local_time)-10s %(name)-24s =====> ERROR \n%(message)s\n---END ERROR ---\n"

        else:
            self._style._fmt = "%(local_time)-10s %(name)-24s:%(levelname)-8s %(message)s"

        return super().format(record)


class LocalFileFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        record.utc_time = utc_dt.strftime("%Y-%m-%d %H:%M:%S")
        if record.levelno in (logging.WARN, logging.ERROR):
            self._style._fmt = "\n===== ERROR Source: %(name)s =====\n%(utc_time)s:%(message)s\n---END ERROR ---\n"
        else:
            self._style._fmt = "%(utc_time)s:%(name)15s:%(levelname)s %(message)s"

        return super().format(record)


def _file_handler(filename: str, level) -> logging.Handler:
    if os.path.dirname(filename):
        fullpath = filename
        os.makedirs(os.path.dirname(filename), exist_ok=True)
    else:
        os.makedirs(LOG_DIR, exist_ok=True)
        fullpath = os.path.join(LOG_DIR, filename)
    try:
        fh = TimedRotatingFileHandler(fullpath, when="midnight", backupCount=30)
    except FileNotFoundError:
        fh = logging.FileHandler(fullpath)
    fh.setLevel(level)
    fh.setFormatter(LocalFileFormatter())
    return fh


def get_logger(name: str, level=None) -> logging.Logger:
    """Return a logger with the specified name."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(LocalTimeFormatter())
    logger.addHandler(ch)

    logger.propagate = False

    Logger_Cache[name] = logger

    return logger


def log_to_file(filename: str) -> None:
    """Also write every cached logger to ``filename`` (relative names go under LOG_DIR)."""
    fh = _file_handler(filename, Default_Level)
    for logger in Logger_Cache.values():
        logger.addHandler(fh)
