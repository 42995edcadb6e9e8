"""
Logging for SkyCycle.

One "skycycle" logger with two console sinks: routine messages (DEBUG/INFO)
go to stdout, problems (WARNING and above) to stderr. Each component logs
through a child logger ("skycycle.controller", "skycycle.render_loop", ...)
so records name the part of the engine they came from.

Per-tick records are sampled. The frame loop ticks FRAME_RATE times per
second, so only every TICK_LOG_EVERY-th record logged with
extra={"tick": True} reaches stdout.
"""

import logging
import sys
from skycycle.config import LOG_LEVEL, TICK_LOG_EVERY

ROOT_NAME = "skycycle"

# Format: "2025-01-15 14:30:45 - skycycle.controller - DEBUG - Message"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LevelFilter(logging.Filter):
    """Filter log records by level range."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


class TickSampler(logging.Filter):
    """
    Pass one in every `every` tick records.

    Records without the `tick` marker always pass.
    """

    def __init__(self, every: int):
        super().__init__()
        self.every = max(1, every)
        self.seen = 0

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "tick", False):
            return True
        self.seen += 1
        return (self.seen - 1) % self.every == 0


def _console_handler(stream, level_min: int, level_max: int) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_min)
    handler.addFilter(LevelFilter(level_min, level_max))
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = LOG_LEVEL, tick_log_every: int = TICK_LOG_EVERY) -> logging.Logger:
    """
    Configure the skycycle logger and its console sinks.

    Args:
        level: Level for the whole engine (child loggers inherit it)
        tick_log_every: Keep one in this many per-tick records

    Returns:
        The "skycycle" logger
    """
    logger = logging.getLogger(ROOT_NAME)
    logger.setLevel(level)

    # uvicorn configures the root logger; keep engine output in our sinks only
    logger.propagate = False

    # Safe to call again (tests, module reload)
    logger.handlers.clear()

    stdout_handler = _console_handler(sys.stdout, logging.DEBUG, logging.INFO)
    stdout_handler.addFilter(TickSampler(tick_log_every))
    stderr_handler = _console_handler(sys.stderr, logging.WARNING, logging.CRITICAL)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """Child logger for one engine component, e.g. get_logger("render_loop")."""
    return logging.getLogger(f"{ROOT_NAME}.{component}")


# Engine logger, configured on first import
logger = setup_logging()
