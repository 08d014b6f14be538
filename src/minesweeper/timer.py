"""
Game timer for Minesweeper.

A cancellable periodic callback that samples a clock while a round is
in progress and freezes when it is stopped.
"""
import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


# ============================================================================
# Game Timer
# ============================================================================

class GameTimer:
    """
    Tracks whole elapsed seconds for one round at a time.

    While running, a daemon thread wakes every ``interval`` seconds and
    samples the clock. The thread only writes the timer's own counter.
    """

    def __init__(
        self,
        interval: Optional[float] = 1.0,
        clock: Callable[[], float] = time.monotonic,
        on_tick: Optional[Callable[[int], None]] = None,
    ) -> None:
        """
        Initialize the timer.

        Args:
            interval: Seconds between background samples. None disables
                the background thread; elapsed time is then sampled on
                ``sample()`` and ``stop()`` only.
            clock: Monotonic clock returning seconds.
            on_tick: Optional callback receiving elapsed seconds after
                each background sample.
        """
        self.interval = interval
        self.clock = clock
        self.on_tick = on_tick
        self.elapsed = 0
        self._start_time: Optional[float] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        """Check if the timer is counting."""
        return self._start_time is not None

    def start(self) -> None:
        """Start counting from zero."""
        self.stop()
        self.elapsed = 0
        self._start_time = self.clock()
        if self.interval is not None:
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name="minesweeper-timer",
                daemon=True,
            )
            self._thread.start()
        logger.debug("Timer started")

    def stop(self) -> None:
        """Stop counting and freeze the elapsed time at this instant."""
        if not self.running:
            return
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self.sample()
        self._start_time = None
        logger.debug("Timer stopped at %d seconds", self.elapsed)

    def reset(self) -> None:
        """Stop the timer and clear the elapsed time."""
        self.stop()
        self.elapsed = 0

    def sample(self) -> int:
        """Update elapsed seconds from the clock, if running."""
        start_time = self._start_time
        if start_time is not None:
            self.elapsed = int(self.clock() - start_time)
        return self.elapsed

    def _run(self, stop_event: threading.Event) -> None:
        """Background loop: sample once per interval until stopped."""
        while not stop_event.wait(self.interval):
            elapsed = self.sample()
            if self.on_tick:
                self.on_tick(elapsed)
