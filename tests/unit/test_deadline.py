"""Tests for Deadline."""

import pytest

from s3templates.core import Deadline, DeadlineExceededError


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_no_timeout_never_expires():
    deadline = Deadline()

    assert deadline.remaining() is None
    assert deadline.expired() is False
    deadline.check("anything")


def test_timeout_counts_down():
    timer = FakeTimer()
    deadline = Deadline(timeout=5, timer=timer)

    timer.now = 2.0
    assert deadline.remaining() == 3.0
    assert deadline.expired() is False

    timer.now = 6.0
    assert deadline.remaining() == 0.0
    assert deadline.expired() is True
    with pytest.raises(DeadlineExceededError, match="listing exceeded deadline"):
        deadline.check("listing")


def test_cancel():
    deadline = Deadline.after(60)
    deadline.cancel()

    assert deadline.cancelled is True
    assert deadline.expired() is True
    with pytest.raises(DeadlineExceededError, match="fetch cancelled"):
        deadline.check("fetch")
