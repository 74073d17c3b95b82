# Encoded chain codec.
# - Text is a run of signed tokens; the caller's string gets an implicit
#   leading "-" so every token reads "-{1,2}[0-9A-Za-z]+"
# - "--" marks a negative value, a single "-" a non-negative one
# - Token magnitudes are base-62 integers divided by ENCODING_SCALE_FACTOR
# - Extra hyphens between tokens are skipped; any other character outside
#   the alphabet is an error

import logging
import math
import re

from base62 import DecodeError, InvalidCharacter, decode_base62, encode_base62
from constants import BASE62_CHARSET, ENCODING_SCALE_FACTOR

log = logging.getLogger(__name__)

_token = re.compile(r'--?[0-9A-Za-z]+')


class PrecisionLoss(DecodeError):
    """A token magnitude too large to be represented as a float."""

    def __init__(self, digits):
        self.digits = digits
        shown = digits if len(digits) <= 16 else digits[:16] + '...'
        super().__init__(f"Failed to convert base62 value {shown!r} to float")


def _check_gap(text, start, end):
    # text carries the sentinel, so positions are shifted back by one
    for k in range(start, end):
        c = text[k]
        if c != '-' and c not in BASE62_CHARSET:
            raise InvalidCharacter(c, k - 1)


def _iter_tokens(chain):
    text = '-' + chain
    pos = 0
    for m in _token.finditer(text):
        if m.start() != pos:
            _check_gap(text, pos, m.start())
        yield m.group(0)
        pos = m.end()
    if pos != len(text):
        _check_gap(text, pos, len(text))


def _decode_token(tok, scale):
    negative = tok.startswith('--')
    digits = tok.lstrip('-')
    magnitude = decode_base62(digits)
    try:
        value = float(magnitude)
    except OverflowError:
        raise PrecisionLoss(digits) from None
    if negative:
        value = -value
    return value / scale


def decode_chain(chain, scale=ENCODING_SCALE_FACTOR):
    """
    Decode an encoded chain into a list of floats, one per token, in order.

    Raises InvalidCharacter or PrecisionLoss (both DecodeError). Hyphens that
    do not introduce a token are skipped, so an empty string or a lone "-"
    decodes to an empty list.
    """
    if not isinstance(chain, str):
        raise TypeError("Encoded chain must be a str, got %s" % type(chain).__name__)
    if chain == '':
        return []
    values = [_decode_token(tok, scale) for tok in _iter_tokens(chain)]
    log.debug(f"Decoded {len(values)} values from {len(chain)} characters")
    return values


def encode_chain(values, scale=ENCODING_SCALE_FACTOR):
    """
    Encode numbers into the chain format read by decode_chain.

    Values are rounded to the 1/scale grid, so decode(encode(v)) is exact only
    for values already on that grid.
    """
    parts = []
    for v in values:
        f = float(v)
        if not math.isfinite(f):
            raise ValueError("Cannot encode non-finite value: %r" % (v,))
        n = int(round(f * scale))
        if n < 0:
            parts.append('-' + encode_base62(-n))
        else:
            parts.append(encode_base62(n))
    return '-'.join(parts)
