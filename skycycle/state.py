"""
Day-night cycle state.

CycleConfig is owned by the CycleController and written each frame, while the
control panel may change it from the API thread at any time. Changes take
effect on the next tick.
"""

import math
import threading
from typing import Any

from skycycle.config import AUTO_PLAY, CYCLE_DURATION_SECONDS, START_TIME
from skycycle.lighting_math import wrap_unit
from skycycle.logger import get_logger

logger = get_logger("state")


class ConfigurationError(ValueError):
    """Raised when a cycle setting is rejected at configuration time."""


def validate_duration(seconds: float) -> float:
    """
    Validate a cycle duration.

    Raises:
        ConfigurationError: If the duration is not a positive finite number
    """
    seconds = float(seconds)
    if not math.isfinite(seconds) or seconds <= 0:
        raise ConfigurationError(f"Cycle duration must be positive, got {seconds}")
    return seconds


def validate_time(value: float) -> float:
    """
    Validate and wrap a time of day.

    Raises:
        ConfigurationError: If the value is infinite or NaN
    """
    value = float(value)
    if not math.isfinite(value):
        raise ConfigurationError(f"Time of day must be finite, got {value}")
    return wrap_unit(value)


class CycleConfig:
    """
    Mutable cycle settings.

    current_time is wrapped into [0.0, 1.0) on every write, so scrubbing past
    the end of the day loops back to midnight. cycle_duration_seconds is
    validated on every write.
    """

    _fields = ("cycle_duration_seconds", "auto_play", "current_time")

    def __init__(
        self,
        cycle_duration_seconds: float = CYCLE_DURATION_SECONDS,
        auto_play: bool = AUTO_PLAY,
        current_time: float = START_TIME,
    ):
        self._lock = threading.RLock()
        self.cycle_duration_seconds = cycle_duration_seconds
        self.auto_play = auto_play
        self.current_time = current_time

    @property
    def cycle_duration_seconds(self) -> float:
        return self._cycle_duration_seconds

    @cycle_duration_seconds.setter
    def cycle_duration_seconds(self, seconds: float) -> None:
        self._cycle_duration_seconds = validate_duration(seconds)

    @property
    def auto_play(self) -> bool:
        return self._auto_play

    @auto_play.setter
    def auto_play(self, enabled: bool) -> None:
        self._auto_play = bool(enabled)

    @property
    def current_time(self) -> float:
        return self._current_time

    @current_time.setter
    def current_time(self, value: float) -> None:
        self._current_time = validate_time(value)

    def update(self, **kwargs) -> None:
        """
        Thread-safe update of several settings at once.

        Args:
            **kwargs: Settings to update (unknown names are ignored)

        Raises:
            ConfigurationError: If cycle_duration_seconds or current_time is
                invalid. No setting is changed in that case.

        Example:
            cycle.update(auto_play=False, current_time=0.75)
        """
        if "cycle_duration_seconds" in kwargs:
            validate_duration(kwargs["cycle_duration_seconds"])
        if "current_time" in kwargs:
            validate_time(kwargs["current_time"])

        with self._lock:
            for key, value in kwargs.items():
                if key in self._fields:
                    setattr(self, key, value)

        logger.debug(f"Cycle config updated: {kwargs}")

    def advance(self, wall_clock_seconds: float) -> float:
        """
        Resolve the time of day for one tick.

        With autoplay on, the time is derived from the wall clock and stored,
        replacing any scrubbed value. With autoplay off, the stored time is
        returned untouched. The whole read-decide-write step holds the lock,
        so a concurrent update() that turns autoplay off and scrubs is either
        fully seen or fully kept.

        Raises:
            ConfigurationError: If the derived time is not finite
        """
        with self._lock:
            if self.auto_play:
                self.current_time = wall_clock_seconds / self.cycle_duration_seconds
            return self.current_time

    def get_snapshot(self) -> dict[str, Any]:
        """
        Get thread-safe snapshot of current settings.

        Returns:
            dict: Current settings as dictionary
        """
        with self._lock:
            return {
                "cycle_duration_seconds": self.cycle_duration_seconds,
                "auto_play": self.auto_play,
                "current_time": self.current_time,
            }

    def __repr__(self) -> str:
        return (
            f"CycleConfig(cycle_duration_seconds={self.cycle_duration_seconds}, "
            f"auto_play={self.auto_play}, current_time={self.current_time})"
        )
