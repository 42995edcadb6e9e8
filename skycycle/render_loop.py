"""
Frame loop driving the cycle controller.

Stands in for the renderer's per-frame callback:
- Runs in ONE background thread (the only caller of tick())
- Supports cancellation via threading.Event
- Wall clock is measured from loop start
"""

import threading
import time
from typing import Callable, Optional

from skycycle.config import FRAME_RATE
from skycycle.controller import CycleController
from skycycle.logger import get_logger
from skycycle.state import ConfigurationError

logger = get_logger("render_loop")


class RenderLoop:
    def __init__(
        self,
        controller: CycleController,
        frame_rate: float = FRAME_RATE,
        clock: Callable[[], float] = time.monotonic,
    ):
        if frame_rate <= 0:
            raise ConfigurationError(f"Frame rate must be positive, got {frame_rate}")

        self.controller = controller
        self.frame_rate = frame_rate
        self.clock = clock
        self.frames = 0

        self._thread: Optional[threading.Thread] = None
        self._cancel_event = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            logger.warning("Render loop already running")
            return

        self._cancel_event = threading.Event()
        self._thread = threading.Thread(
            target=self.run,
            args=(self._cancel_event,),
            name="render_loop",
            daemon=False,
        )
        self._thread.start()
        logger.info(f"Render loop started at {self.frame_rate} fps")

    def stop(self, timeout: float = 2.0) -> None:
        if self._thread is None:
            return

        self._cancel_event.set()
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            logger.warning("Render loop did not stop within timeout")
        else:
            logger.info(f"Render loop stopped after {self.frames} frames")
        self._thread = None

    def run(self, cancel_event: threading.Event) -> None:
        """Tick once per frame until cancelled."""
        started_at = self.clock()
        frame_time = 1 / self.frame_rate

        while not cancel_event.is_set():
            try:
                self.controller.tick(self.clock() - started_at)
            except Exception:
                logger.error("Error ticking day-night cycle", exc_info=True)
                raise

            self.frames += 1
            cancel_event.wait(frame_time)
