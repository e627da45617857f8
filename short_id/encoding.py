""" Encode bytes into short, url-friendly strings """

import base64
import string


# The 64 symbols of the url-safe base64 alphabet, in encoding order: [A-Za-z0-9-_]
# NOTE: this is not the ASCII order: '-' < '0' < 'A' < '_' < 'a'.
# That's why sorting encoded strings does not always sort the bytes they were made from.
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + '-_'


def encode(data: bytes) -> str:
    """ Encode bytes as a short id

    Under the hood, it's an urlsafe base64-encoded string [a-zA-Z0-9_-] without the padding.
    There is no decoding counterpart: short ids are opaque.

    Returns:
        A string of `encoded_length(len(data))` ASCII characters: [a-zA-Z0-9_-]
    Example:
        >>> encode(b'\\xde\\xad\\xbe\\xef' * 4)
        '3q2-796tvu_erb7v3q2-7w'
    """
    # Encode to base64, convert bytes -> str, strip the padding ('==')
    return base64.urlsafe_b64encode(data).decode().rstrip('=')


def encoded_length(n: int) -> int:
    """ Get the length of a short id made from `n` bytes

    Every symbol carries 6 bits, so it's ceil(n * 8 / 6):
    10 bytes -> 14 chars, 16 bytes -> 22 chars, 32 bytes -> 43 chars.
    """
    return (n * 4 + 2) // 3
