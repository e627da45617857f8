import pytest

from short_id import ShortIdGenerator
from short_id.testing import CountingRandomBytes, FrozenClock


@pytest.fixture()
def frozen_generator() -> ShortIdGenerator:
    """ A generator that is fully deterministic: counting bytes, time frozen at 1 second past the epoch """
    return ShortIdGenerator(random_bytes=CountingRandomBytes(), clock=FrozenClock(1_000_000))
