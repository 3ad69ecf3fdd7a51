"""
Human-readable order numbers: a fixed prefix plus the current time in
milliseconds truncated to a fixed number of digits, e.g. ``DK482913``.

Numbers are not globally unique on their own; the unique constraint on
Order.order_number is the arbiter and OrderService retries on collision.
Within one process the generator never hands out the same number twice in
a row, even when several orders arrive in the same millisecond.
"""

import threading
import time

from django.conf import settings


def _milliseconds():
    return time.time_ns() // 1_000_000


class OrderNumberGenerator:
    def __init__(self, prefix=None, digits=None, clock=None):
        self.prefix = settings.ORDER_NUMBER_PREFIX if prefix is None else prefix
        self.digits = settings.ORDER_NUMBER_DIGITS if digits is None else digits
        if self.digits < 1:
            raise ValueError("Order numbers need at least one digit.")
        self._modulus = 10 ** self.digits
        self._clock = clock or _milliseconds
        self._lock = threading.Lock()
        self._last_issued = None

    def next(self):
        with self._lock:
            now = self._clock()
            # Issued times only move forward, so a repeated or lagging clock
            # reading steps past the last number handed out.
            if self._last_issued is not None and now <= self._last_issued:
                now = self._last_issued + 1
            self._last_issued = now
            suffix = now % self._modulus
            return f"{self.prefix}{suffix:0{self.digits}d}"


_default_generator = None
_default_generator_lock = threading.Lock()


def get_default_generator():
    """
    Process-wide generator, so concurrent requests share one sequence.
    """
    global _default_generator
    with _default_generator_lock:
        if _default_generator is None:
            _default_generator = OrderNumberGenerator()
        return _default_generator
