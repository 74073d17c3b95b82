import math
import sys

import index
from base62 import DecodeError
from constants import HEADER_LEN, MIN_CHAIN_LEN, POINT_STRIDE
from decoder import decode_chain

# Integrity checker for scaled Bezier chains.
# The evaluator assumes these hold and does not check them per query.
# Usage: python -m tools.check_chain <encoded chain>


def check_chain(chain):
    """Return a list of problems found in a numeric chain (empty when sound)."""
    problems = []
    if len(chain) < MIN_CHAIN_LEN:
        problems.append(f"too short: {len(chain)} values, need at least {MIN_CHAIN_LEN}")
        return problems

    bad = [i for i, v in enumerate(chain) if not math.isfinite(v)]
    if bad:
        problems.append(f"non-finite values at {bad}")

    idx = index.build_index(chain)
    if idx['scale_x'] == 0.0:
        problems.append("scale_x is 0")
    if idx['scale_y'] == 0.0:
        problems.append("scale_y is 0")

    n = idx['n_segments']
    if n == 0 or index.chain_length(n) != len(chain):
        problems.append(f"length {len(chain)} is not 4 + 8 + 6*(segments-1)")

    # start x of successive on-curve points must not decrease
    xs = [chain[i] for i in idx['points']]
    for k in range(1, len(xs)):
        if xs[k] < xs[k - 1]:
            problems.append(f"x decreases at point {k}: {xs[k-1]} -> {xs[k]}")

    for k, i in enumerate(idx['segments']):
        x0, x3 = chain[i], chain[i + POINT_STRIDE]
        for h in (i + 2, i + 4):
            if not (x0 <= chain[h] <= x3):
                problems.append(
                    f"segment {k+1}: handle x {chain[h]} outside [{x0}, {x3}] "
                    f"(index {h - HEADER_LEN} after header)"
                )
    return problems


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: python -m tools.check_chain <encoded chain>")
        return 2
    try:
        chain = decode_chain(args[0])
    except DecodeError as ex:
        print(f"decode failed: {ex}")
        return 1

    problems = check_chain(chain)
    n = index.build_index(chain)['n_segments'] if len(chain) >= HEADER_LEN else 0
    print(f"{len(chain)} values, {n} segments")
    if not problems:
        print("OK")
        return 0
    for p in problems:
        print(f"  {p}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
