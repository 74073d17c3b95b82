# Base-62 integer codec. Digits first, then uppercase, then lowercase.
# Python ints carry the arbitrary precision, so long runs never overflow here;
# overflow only matters once the caller converts to float (see decoder.py).

from constants import BASE62_CHARSET

_VALUES = {c: i for i, c in enumerate(BASE62_CHARSET)}
_BASE = len(BASE62_CHARSET)


class DecodeError(ValueError):
    """Base class for everything that can go wrong turning text into numbers."""


class InvalidCharacter(DecodeError):
    """A character outside the base-62 alphabet.

    ``char`` is the offending character, ``position`` its index in the string
    handed to the decoder (None when unknown).
    """

    def __init__(self, char, position=None):
        self.char = char
        self.position = position
        if position is None:
            msg = f"Invalid character {char!r} in base62 string"
        else:
            msg = f"Invalid character {char!r} in base62 string at position {position}"
        super().__init__(msg)


def decode_base62(s):
    """Parse ``s`` most-significant digit first and return a non-negative int."""
    if not s:
        raise DecodeError("empty base62 string")
    n = 0
    for pos, c in enumerate(s):
        v = _VALUES.get(c)
        if v is None:
            raise InvalidCharacter(c, pos)
        n = n * _BASE + v
    return n


def encode_base62(n):
    """Inverse of decode_base62 for non-negative ints."""
    n = int(n)
    if n < 0:
        raise ValueError("base62 encodes non-negative integers only, got %r" % (n,))
    if n == 0:
        return BASE62_CHARSET[0]
    digits = []
    while n:
        n, r = divmod(n, _BASE)
        digits.append(BASE62_CHARSET[r])
    return ''.join(reversed(digits))
