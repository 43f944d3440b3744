"""Tests for signal-driven cancellation."""

import os
import signal
import sys
import time

import pytest

from tickwatch.utils.signals import SignalCancellation

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="sends POSIX signals")


def test_sigterm_cancels_wait():
    """Test that SIGTERM ends a wait and is remembered."""
    with SignalCancellation() as cancellation:
        os.kill(os.getpid(), signal.SIGTERM)

        assert cancellation.wait(5.0) is True
        assert cancellation.received == signal.SIGTERM
        # Stays cancelled on later waits
        assert cancellation.wait(0) is True


def test_sigint_does_not_raise_keyboard_interrupt():
    """Test that Ctrl+C is turned into cancellation instead of an exception."""
    with SignalCancellation() as cancellation:
        os.kill(os.getpid(), signal.SIGINT)

        assert cancellation.wait(5.0) is True
        assert cancellation.received == signal.SIGINT


def test_wait_times_out_without_signal():
    """Test that wait returns False once the timeout passes."""
    with SignalCancellation() as cancellation:
        started = time.monotonic()

        assert cancellation.wait(0.05) is False
        assert time.monotonic() - started >= 0.04
        assert cancellation.received is None


def test_previous_handlers_restored():
    """Test that handlers and the wakeup fd are restored on exit."""
    before = signal.getsignal(signal.SIGTERM)

    with SignalCancellation():
        assert signal.getsignal(signal.SIGTERM) is not before

    assert signal.getsignal(signal.SIGTERM) is before
    assert signal.set_wakeup_fd(-1) == -1


def test_handlers_restored_after_error():
    """Test that an exception inside the block still releases the subscription."""
    before = signal.getsignal(signal.SIGINT)

    with pytest.raises(ZeroDivisionError):
        with SignalCancellation():
            1 / 0

    assert signal.getsignal(signal.SIGINT) is before


def test_wait_outside_context_raises():
    """Test that an inactive subscription cannot be waited on."""
    with pytest.raises(RuntimeError):
        SignalCancellation().wait(0)
