""" Byte sources for short ids: random bytes, and timestamp-prefixed random bytes """

from __future__ import annotations

import logging
import secrets
from collections import abc

from .clock import Clock, SYSTEM_CLOCK
from .errors import InvalidArgument
from .translate import _


logger = logging.getLogger(__name__)


# The largest number of bytes an id can be made of
MAX_BYTES = 32

# The size of the timestamp prefix of ordered ids: big-endian microseconds since the epoch
TIMESTAMP_BYTES = 8

# The largest timestamp that fits into the prefix
MAX_TIMESTAMP = 2 ** (TIMESTAMP_BYTES * 8) - 1

# Random byte provider: a function that returns `n` bytes.
# The default, `secrets.token_bytes`, uses the most secure source the OS provides.
RandomBytesProvider = abc.Callable[[int], bytes]


def random_bytes(n: int, *, source: RandomBytesProvider = secrets.token_bytes) -> bytes:
    """ Get `n` random bytes

    Args:
        n: Number of bytes: 1..MAX_BYTES
        source: The random byte provider
    Raises:
        InvalidArgument: `n` is out of range
    """
    validate_byte_count(n, min=1)
    return _draw(source, n)


def ordered_bytes(n: int, *, source: RandomBytesProvider = secrets.token_bytes, clock: Clock = SYSTEM_CLOCK) -> bytes:
    """ Get `n` bytes: the current timestamp followed by random bytes

    Layout: [8 bytes: microseconds since the epoch, big-endian][n - 8 random bytes]

    Because the timestamp comes first, byte sequences sort by the time they were made at.
    Within the same microsecond, the random suffix keeps them apart.

    Args:
        n: Number of bytes: TIMESTAMP_BYTES..MAX_BYTES
        source: The random byte provider
        clock: The clock to read the timestamp from
    Raises:
        InvalidArgument: `n` is out of range
        ClockUnavailable: the clock can't tell the time
    """
    validate_byte_count(n, min=TIMESTAMP_BYTES)

    timestamp = clock.now_micros()
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        logger.warning('Clock reading %r is out of the 64-bit microsecond range; clamped', timestamp)
        timestamp = min(max(timestamp, 0), MAX_TIMESTAMP)

    prefix = timestamp.to_bytes(TIMESTAMP_BYTES, 'big')
    return prefix + _draw(source, n - TIMESTAMP_BYTES)


def validate_byte_count(n: int, *, min: int, max: int = MAX_BYTES, name: str = 'n'):
    """ Make sure `n` is a valid byte count: an int within [min, max]

    Raises:
        InvalidArgument
    """
    # bool is an int, but `True` bytes makes no sense
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidArgument.format(
            _('Byte count must be an integer, got {value!r}'),
            _('Provide an integer between {min} and {max}'),
            name=name, value=n, min=min, max=max,
        )

    if not min <= n <= max:
        raise InvalidArgument.format(
            _('Byte count must be between {min} and {max}, got {value}'),
            _('Provide an integer between {min} and {max}'),
            name=name, value=n, min=min, max=max,
        )


def _draw(source: RandomBytesProvider, n: int) -> bytes:
    """ Draw exactly `n` bytes from the provider """
    # No short reads: an id must never be made of fewer random bytes than asked for
    data = source(n)
    if len(data) != n:
        raise RuntimeError(f'Random byte provider returned {len(data)} bytes instead of {n}')
    return data
