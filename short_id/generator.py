""" Generate short, url-friendly, identifiers

Example:
    from short_id import short_id, short_id_ordered

    short_id()          # -> 'X7K9mP2nQwE-Tg'
    short_id_ordered()  # -> 'AAYH2n-eK1Oyqw'

Ordered ids start with a microsecond timestamp.
Note that sorting them as strings does not always sort them by time:
the url-safe alphabet is not in ASCII order. Treat the order as approximate.
"""

from __future__ import annotations

import logging
import secrets

from . import byte_source
from .byte_source import RandomBytesProvider
from .clock import Clock, SYSTEM_CLOCK
from .encoding import encode


logger = logging.getLogger(__name__)


# Number of bytes in the default id: 10 bytes -> 14 characters
DEFAULT_BYTES = 10


class ShortIdGenerator:
    """ Short id generator with pluggable sources of randomness and time

    The generator holds no state besides its providers: it's safe to use from many threads at once.

    Example:
        generator = ShortIdGenerator()
        generator.random()  # -> 'X7K9mP2nQwE-Tg'

        # No clock: only random ids
        generator = ShortIdGenerator(clock=NO_CLOCK)
    """
    __slots__ = 'random_bytes', 'clock'

    def __init__(self, random_bytes: RandomBytesProvider = secrets.token_bytes, clock: Clock = SYSTEM_CLOCK):
        """
        Args:
            random_bytes: The provider of random bytes. Must be cryptographically secure in production.
            clock: The clock for ordered ids. Use `NO_CLOCK` when there is none.
        """
        self.random_bytes = random_bytes
        self.clock = clock
        logger.debug('Short id generator created with clock=%r', clock)

    # The provider of random bytes
    random_bytes: RandomBytesProvider

    # The clock for ordered ids
    clock: Clock

    @property
    def supports_ordered(self) -> bool:
        """ Can this generator make ordered ids? """
        return self.clock.available

    def random(self) -> str:
        """ Generate a random id: 10 random bytes, 14 characters """
        return self.random_with_bytes(DEFAULT_BYTES)

    def ordered(self) -> str:
        """ Generate an ordered id: 8 bytes of timestamp, 2 random bytes, 14 characters

        Raises:
            ClockUnavailable: the generator has no clock
        """
        return self.ordered_with_bytes(DEFAULT_BYTES)

    def random_with_bytes(self, n: int) -> str:
        """ Generate a random id from `n` random bytes

        Args:
            n: Number of bytes: 1..32. The id will be `ceil(n * 4 / 3)` characters long.
        Raises:
            InvalidArgument: `n` is out of range
        """
        return encode(byte_source.random_bytes(n, source=self.random_bytes))

    def ordered_with_bytes(self, n: int) -> str:
        """ Generate an ordered id from `n` bytes: an 8-byte timestamp and `n - 8` random bytes

        Args:
            n: Number of bytes: 8..32
        Raises:
            InvalidArgument: `n` is out of range
            ClockUnavailable: the generator has no clock
        """
        return encode(byte_source.ordered_bytes(n, source=self.random_bytes, clock=self.clock))

    def __repr__(self):
        return f'{self.__class__.__name__}(random_bytes={self.random_bytes!r}, clock={self.clock!r})'


# The generator used by module-level functions: OS randomness, system clock
default_generator = ShortIdGenerator()


def short_id() -> str:
    """ Generate a short random id

    Returns:
        A string of 14 ASCII characters: [a-zA-Z0-9_-]
    Example:
        'X7K9mP2nQwE-Tg'
    """
    return default_generator.random()


def short_id_ordered() -> str:
    """ Generate a short id that starts with the current time

    Returns:
        A string of 14 ASCII characters: [a-zA-Z0-9_-]
    """
    return default_generator.ordered()


def short_id_with_bytes(n: int) -> str:
    """ Generate a random id from `n` random bytes (1..32) """
    return default_generator.random_with_bytes(n)


def short_id_ordered_with_bytes(n: int) -> str:
    """ Generate an ordered id from `n` bytes (8..32): timestamp + random bytes """
    return default_generator.ordered_with_bytes(n)
