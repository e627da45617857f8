""" Clock providers for ordered ids

Ordered ids start with a timestamp, so they need a clock.
Where there is no wall clock, use `NO_CLOCK`: random ids still work, ordered ids raise `ClockUnavailable`.

The clock doesn't have to be monotonic: the timestamp only gives ids an approximate order.
"""

from __future__ import annotations

import time
from typing import Protocol

from .errors import ClockUnavailable
from .translate import _


class Clock(Protocol):
    """ A source of the current time """

    # Can this clock tell the time?
    available: bool

    def now_micros(self) -> int:
        """ Get the number of microseconds since the Unix epoch """


class SystemClock:
    """ The system wall clock """
    available = True

    def now_micros(self) -> int:
        return time.time_ns() // 1_000

    def __repr__(self):
        return 'SYSTEM_CLOCK'


class UnavailableClock:
    """ No clock at all: for environments that can't tell the time """
    available = False

    def now_micros(self) -> int:
        raise ClockUnavailable(_('No clock is available to generate ordered ids'))

    def __repr__(self):
        return 'NO_CLOCK'


SYSTEM_CLOCK = SystemClock()
NO_CLOCK = UnavailableClock()
