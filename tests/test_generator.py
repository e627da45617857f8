import re
from concurrent.futures import ThreadPoolExecutor

import pytest

import short_id
from short_id import (
    ShortIdGenerator, InvalidArgument, ClockUnavailable, NO_CLOCK,
    short_id as make_short_id, short_id_ordered, short_id_with_bytes, short_id_ordered_with_bytes,
)
from short_id.testing import FixedRandomBytes, CountingRandomBytes, FrozenClock


# A short id: url-safe characters only
SHORT_ID_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def test_short_id():
    """ Test: short_id() """
    id = make_short_id()
    assert len(id) == 14
    assert SHORT_ID_RE.match(id)

    # No two alike
    ids = {make_short_id() for _ in range(10_000)}
    assert len(ids) == 10_000

    # Url-safe
    for id in ids:
        assert not set('+/=') & set(id)


def test_short_id_ordered():
    """ Test: short_id_ordered() """
    id = short_id_ordered()
    assert len(id) == 14
    assert SHORT_ID_RE.match(id)

    for _ in range(100):
        id = short_id_ordered()
        assert not set('+/=') & set(id)

    # Consecutive ids are different
    assert short_id_ordered() != short_id_ordered()


@pytest.mark.parametrize(('n', 'length'), [(1, 2), (6, 8), (10, 14), (16, 22), (32, 43)])
def test_short_id_with_bytes(n: int, length: int):
    """ Test: short_id_with_bytes() """
    id = short_id_with_bytes(n)
    assert len(id) == length
    assert SHORT_ID_RE.match(id)


@pytest.mark.parametrize(('n', 'length'), [(8, 11), (10, 14), (16, 22), (32, 43)])
def test_short_id_ordered_with_bytes(n: int, length: int):
    """ Test: short_id_ordered_with_bytes() """
    id = short_id_ordered_with_bytes(n)
    assert len(id) == length
    assert SHORT_ID_RE.match(id)


def test_invalid_byte_counts():
    """ Test: byte counts out of range """
    for n in (0, 33):
        with pytest.raises(InvalidArgument):
            short_id_with_bytes(n)

    for n in (7, 33):
        with pytest.raises(InvalidArgument):
            short_id_ordered_with_bytes(n)

    # It's also a ValueError
    with pytest.raises(ValueError):
        short_id_with_bytes(-1)


def test_generator_deterministic():
    """ Test: ShortIdGenerator with injected providers """
    generator = ShortIdGenerator(random_bytes=FixedRandomBytes(b'\x00'), clock=FrozenClock(0))
    assert generator.random() == 'AAAAAAAAAAAAAA'
    assert generator.ordered() == 'AAAAAAAAAAAAAA'

    generator = ShortIdGenerator(random_bytes=FixedRandomBytes(b'\xFF'), clock=FrozenClock(1))
    assert generator.random() == '_____________w'
    assert generator.ordered() == 'AAAAAAAAAAH__w'

    generator = ShortIdGenerator(random_bytes=FixedRandomBytes(b'\x00'), clock=FrozenClock(1))
    assert generator.ordered() == 'AAAAAAAAAAEAAA'
    assert generator.random_with_bytes(3) == 'AAAA'
    assert generator.ordered_with_bytes(8) == 'AAAAAAAAAAE'


def test_generator_same_tick(frozen_generator: ShortIdGenerator):
    """ Test: ordered ids made within the same microsecond still differ """
    ids = [frozen_generator.ordered() for _ in range(100)]
    assert len(set(ids)) == 100

    # The timestamp part is the same
    assert len({id[:10] for id in ids}) == 1


def test_generator_no_clock():
    """ Test: a generator without a clock only makes random ids """
    generator = ShortIdGenerator(clock=NO_CLOCK)
    assert not generator.supports_ordered
    assert ShortIdGenerator().supports_ordered

    assert len(generator.random()) == 14
    assert len(generator.random_with_bytes(20)) == 27

    with pytest.raises(ClockUnavailable) as e:
        generator.ordered()
    assert e.value.fixit

    with pytest.raises(ClockUnavailable):
        generator.ordered_with_bytes(16)

    # Arguments are checked first
    with pytest.raises(InvalidArgument):
        generator.ordered_with_bytes(7)


def test_generator_random_source_used():
    """ Test: the generator draws exactly as many random bytes as it needs """
    source = CountingRandomBytes()
    generator = ShortIdGenerator(random_bytes=source, clock=FrozenClock(0))

    generator.random()
    generator.ordered()
    generator.random_with_bytes(32)
    generator.ordered_with_bytes(32)
    generator.ordered_with_bytes(8)
    assert source.calls == [10, 2, 32, 24, 0]


def test_generator_threads():
    """ Test: many threads at once """
    generator = ShortIdGenerator()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: generator.random(), range(8_000)))

    assert len(set(ids)) == 8_000


def test_default_generator():
    """ Test: module-level functions use the default generator """
    assert short_id.default_generator.random_bytes is not None
    assert short_id.default_generator.supports_ordered
    assert 'SYSTEM_CLOCK' in repr(short_id.default_generator)
