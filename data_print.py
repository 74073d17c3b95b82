# Print chain data to terminal (header, segments, points and handles)
import curve_eval as ce
import index


def print_decoded(chain):
    """Print the raw decoded numbers, one per line."""
    print(f"Decoded values: {len(chain)}")
    for i, v in enumerate(chain):
        print(f"  [{i}]: {v!r}")


def print_chain_data(chain):
    """Print header and per-segment control points of a numeric chain."""
    idx = index.build_index(chain)

    print("=== CHAIN HEADER ===")
    print(f"Scale X: {idx['scale_x']}")
    print(f"Scale Y: {idx['scale_y']}")
    print(f"Offset X: {idx['offset_x']}")
    print(f"Offset Y: {idx['offset_y']}")
    print()

    n = idx['n_segments']
    print(f"Number of segments: {n}")
    if n == 0:
        print("Warning: chain holds no complete segment.")
        return

    expected = index.chain_length(n)
    if expected != len(chain):
        print(f"Warning: {len(chain)} values, a {n}-segment chain has {expected}.")

    try:
        lo, hi = ce.domain(chain)
        print(f"Domain (external x): [{lo}, {hi}]")
    except ZeroDivisionError as ex:
        print(f"Domain unavailable: {ex}")
    print()

    for i, seg in enumerate(index.iter_segments(chain)):
        print(f"--- Segment {i+1} ---")
        _print_segment(seg)
        print()


def _print_segment(seg):
    labels = ("Start point", "Start handle", "End handle", "End point")
    for k, label in enumerate(labels):
        print(f"{label}: ({seg[2*k]}, {seg[2*k + 1]})")
