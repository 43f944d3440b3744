"""Fixed-rate ticker that drops ticks instead of queueing them."""

import time


class Ticker:
    """Deliver ticks every ``interval`` seconds on a fixed grid.

    The first tick falls one interval after the ticker is created. If the
    caller is busy past one or more grid points, those ticks are lost and the
    next tick is the first grid point at or after the next ``wait`` call.

    Args:
        interval: Seconds between ticks (must be > 0).
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(self, interval: float, clock=time.monotonic):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._clock = clock
        self._next = clock() + interval
        self._stopped = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.stop()

    def stop(self) -> None:
        self._stopped = True

    def wait(self, cancellation) -> bool:
        """Block until the next tick or until ``cancellation`` fires.

        Args:
            cancellation: Any object with ``wait(timeout) -> bool`` that
                returns True once cancelled (e.g. ``threading.Event``).

        Returns:
            True for a tick, False if cancelled first.
        """
        if self._stopped:
            raise RuntimeError("Ticker has been stopped")

        now = self._clock()
        if self._next < now:
            # Jump to the first grid point at or after now
            self._next = now + (self._next - now) % self.interval

        while True:
            remaining = self._next - now
            if cancellation.wait(max(remaining, 0.0)):
                return False
            now = self._clock()
            if now >= self._next:
                break

        self._next += self.interval
        return True
