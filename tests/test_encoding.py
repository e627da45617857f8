import base64

import pytest

import short_id
from short_id import encoding
from short_id.encoding import ALPHABET, encode, encoded_length


def test_encode():
    """ Test: encode() """
    assert encode(b'\xDE\xAD\xBE\xEF'*4) == '3q2-796tvu_erb7v3q2-7w'
    assert encode(b'\xFF'*10) == '_'*13 + 'w'
    assert encode(b'\x00'*10) == 'A'*14
    assert encode(b'') == ''

    # Same as the standard url-safe base64, minus the padding
    data = bytes(range(256))
    assert encode(data) == base64.urlsafe_b64encode(data).decode().rstrip('=')


@pytest.mark.parametrize(('n', 'length'), [
    (1, 2), (2, 3), (3, 4),
    (6, 8), (10, 14), (16, 22), (32, 43),
])
def test_encoded_length(n: int, length: int):
    """ Test: encoded_length() """
    assert encoded_length(n) == length
    assert len(encode(b'\x01' * n)) == length


def test_encoded_length_matches_encode():
    """ Test: encoded_length() for every byte count """
    for n in range(0, 33):
        assert encoded_length(n) == len(encode(b'\0' * n))


def test_alphabet():
    """ Test: the alphabet has 64 url-safe symbols """
    assert len(ALPHABET) == 64
    assert len(set(ALPHABET)) == 64
    assert not set('+/=') & set(ALPHABET)

    # Every symbol is used, in this order
    assert encode(bytes.fromhex('00108310518720928b30d38f41149351559761969b71d79f8218a39259a7a29aabb2dbafc31cb3d35db7e39ebbf3dfbf')) == ALPHABET


def test_encode_is_injective():
    """ Test: different bytes of the same length never give the same string """
    ids = {encode(bytes([a, b])) for a in range(256) for b in range(256)}
    assert len(ids) == 256 * 256


def test_string_order_differs_from_byte_order():
    """ Test: the alphabet is not in ASCII order, so string order may disagree with byte order """
    a, b = b'\x00', b'\xf8'
    assert a < b
    assert encode(a) == 'AA'
    assert encode(b) == '-A'
    assert encode(a) > encode(b)


def test_no_decoding():
    """ Test: ids are opaque. There's nothing to decode them with. """
    for module in (short_id, encoding):
        assert not hasattr(module, 'decode')
        assert not hasattr(module, 'shortid2uuid')
