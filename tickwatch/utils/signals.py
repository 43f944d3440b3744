"""Signal-driven cancellation that can be waited on with a timeout."""

import select
import signal
import socket

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _ignore(signum, frame):
    pass


class SignalCancellation:
    """Turn termination signals into a blockable cancellation event.

    While active, the listed signals no longer raise ``KeyboardInterrupt`` or
    kill the process. The interpreter writes the signal number to a socket
    registered with ``signal.set_wakeup_fd``, and ``wait`` selects on that
    socket, so a signal ends a timed wait immediately.

    Must be entered from the main thread.

    Example:
        with SignalCancellation() as cancellation:
            if cancellation.wait(2.0):
                ...  # SIGINT or SIGTERM arrived
    """

    def __init__(self, signals=DEFAULT_SIGNALS):
        self.signals = tuple(signals)
        self.received = None
        self._reader = None
        self._writer = None
        self._previous_handlers = {}
        self._previous_wakeup_fd = None

    def __enter__(self):
        self._reader, self._writer = socket.socketpair()
        self._reader.setblocking(False)
        self._writer.setblocking(False)
        try:
            self._previous_wakeup_fd = signal.set_wakeup_fd(
                self._writer.fileno(), warn_on_full_buffer=False
            )
            for signum in self.signals:
                self._previous_handlers[signum] = signal.signal(signum, _ignore)
        except BaseException:
            self._release()
            raise
        return self

    def __exit__(self, *args):
        self._release()

    def _release(self):
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers = {}
        if self._previous_wakeup_fd is not None:
            signal.set_wakeup_fd(self._previous_wakeup_fd)
            self._previous_wakeup_fd = None
        if self._writer is not None:
            self._writer.close()
            self._reader.close()
            self._writer = self._reader = None

    def wait(self, timeout=None) -> bool:
        """Block until a signal arrives or ``timeout`` seconds pass.

        Returns:
            True once any subscribed signal has been received, False on timeout.
        """
        if self.received is not None:
            return True
        if self._reader is None:
            raise RuntimeError("SignalCancellation is not active")

        readable, _, _ = select.select([self._reader], [], [], timeout)
        if not readable:
            return False

        data = self._reader.recv(64)
        # The wakeup fd also carries signals handled elsewhere in the process
        for signum in data:
            if signum in self.signals:
                self.received = signal.Signals(signum)
                return True
        return False
