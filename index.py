# Index view over a flat scaled Bezier chain.
# The chain is one arena of floats: a 4-value header, then (x, y) pairs where
# consecutive segments share their boundary point. Segment k starts at
# HEADER_LEN + k*POINT_STRIDE and spans SEGMENT_LEN floats.

from constants import HEADER_LEN, POINT_STRIDE, SEGMENT_LEN


def chain_length(n_segments):
    """Number of floats in a well-formed chain with n_segments segments."""
    if n_segments < 1:
        raise ValueError("A chain needs at least one segment")
    return HEADER_LEN + SEGMENT_LEN + POINT_STRIDE * (n_segments - 1)


def point_indices(chain):
    # x-index of every on-curve point that has its y stored after it
    return range(HEADER_LEN, len(chain) - 1, POINT_STRIDE)


def segment_starts(chain):
    # only segments with all 8 floats present
    return range(HEADER_LEN, len(chain) - SEGMENT_LEN + 1, POINT_STRIDE)


def segment_at(chain, i):
    """Return the 8 floats (x0, y0, x1, y1, x2, y2, x3, y3) starting at index i."""
    if i < HEADER_LEN or i + SEGMENT_LEN > len(chain):
        raise IndexError("No complete segment starts at index %d" % i)
    return tuple(chain[i:i + SEGMENT_LEN])


def iter_segments(chain):
    for i in segment_starts(chain):
        yield segment_at(chain, i)


def build_index(chain):
    if len(chain) < HEADER_LEN:
        raise ValueError("Chain is shorter than its header")
    starts = segment_starts(chain)
    return {
        'scale_x': chain[0],
        'scale_y': chain[1],
        'offset_x': chain[2],
        'offset_y': chain[3],
        'first': HEADER_LEN,
        'last_x_index': len(chain) - 2,
        'points': point_indices(chain),
        'segments': starts,
        'n_segments': len(starts),
    }
