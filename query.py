# Public query entry points: numeric chain, encoded chain, and a query
# function bound to one decoded chain for repeated lookups.

import logging

from base62 import DecodeError
from curve_eval import query_curve
from decoder import decode_chain

log = logging.getLogger(__name__)


def query(chain, x):
    """y at external x on a numeric chain, or None."""
    return query_curve(chain, x)


def query_encoded(encoded, x):
    """
    y at external x on an encoded chain, or None.

    Decode failures are reported as None here; use decoder.decode_chain to see
    the actual error. A zero scale factor still raises ZeroScaleError.
    """
    try:
        chain = decode_chain(encoded)
    except DecodeError as ex:
        log.debug(f"query_encoded: {ex}")
        return None
    return query_curve(chain, x)


def make_chain_query_fn(chain):
    """Bind a numeric chain; the copy held by the returned function is a tuple."""
    frozen = tuple(float(v) for v in chain)

    def query_fn(x):
        return query_curve(frozen, x)

    query_fn.chain = frozen
    return query_fn


def make_query_fn(encoded):
    """
    Decode once and return fn(x) -> y | None for repeated queries on the
    same curve, or None when the chain does not decode.
    """
    try:
        chain = decode_chain(encoded)
    except DecodeError as ex:
        log.debug(f"make_query_fn: {ex}")
        return None
    return make_chain_query_fn(chain)
