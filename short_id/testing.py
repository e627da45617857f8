""" Deterministic providers for tests

Example:
    generator = ShortIdGenerator(random_bytes=FixedRandomBytes(b'\\x00'), clock=FrozenClock(0))
    assert generator.ordered() == 'AAAAAAAAAAAAAA'
"""

from __future__ import annotations

import itertools


class FixedRandomBytes:
    """ "Random" bytes that repeat a pattern over and over """
    __slots__ = 'pattern',

    def __init__(self, pattern: bytes):
        assert pattern, 'The pattern must not be empty'
        self.pattern = pattern

    def __call__(self, n: int) -> bytes:
        return bytes(itertools.islice(itertools.cycle(self.pattern), n))


class CountingRandomBytes:
    """ "Random" bytes that go 0, 1, 2, ... 255, 0, 1, ... and continue from call to call """
    __slots__ = 'counter', 'calls'

    def __init__(self):
        self.counter = itertools.cycle(range(256))

        # Number of bytes requested in every call
        self.calls: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.calls.append(n)
        return bytes(itertools.islice(self.counter, n))


class FrozenClock:
    """ A clock that always says the same time """
    available = True

    def __init__(self, micros: int):
        self.micros = micros

    def now_micros(self) -> int:
        return self.micros


class TickingClock:
    """ A clock that moves forward by `step` microseconds every time it's read """
    available = True

    def __init__(self, start: int = 0, step: int = 1):
        self.micros = start
        self.step = step

    def now_micros(self) -> int:
        now = self.micros
        self.micros += self.step
        return now
