""" Short, url-safe, random or time-ordered ids

Example:
    from short_id import short_id, short_id_ordered

    short_id()          # 14 characters: [A-Za-z0-9_-]
    short_id_ordered()  # 14 characters, starts with the current time
"""

from .generator import (
    short_id,
    short_id_ordered,
    short_id_with_bytes,
    short_id_ordered_with_bytes,
    ShortIdGenerator,
    default_generator,
    DEFAULT_BYTES,
)
from .newtype import ShortId
from .encoding import ALPHABET, encode, encoded_length
from .byte_source import random_bytes, ordered_bytes, MAX_BYTES, TIMESTAMP_BYTES
from .clock import Clock, SystemClock, UnavailableClock, SYSTEM_CLOCK, NO_CLOCK
from .errors import ShortIdError, InvalidArgument, ClockUnavailable
