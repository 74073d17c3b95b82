# Plotting helpers. One chart per call, no styles set.
import matplotlib.pyplot as plt

import curve_eval as ce
import index

_PALETTE = ['blue', 'red', 'green', 'orange', 'purple', 'brown', 'pink', 'gray', 'olive', 'cyan']


def _handle_lines(chain):
    """Yield external ((x0, y0), (x1, y1)) pairs joining points to their handles."""
    idx = index.build_index(chain)
    sx, sy = idx['scale_x'], idx['scale_y']
    ox, oy = idx['offset_x'], idx['offset_y']

    def ext(x, y):
        return ce.to_external_x(x, sx, ox), (y + oy) * sy

    for seg in index.iter_segments(chain):
        yield ext(seg[0], seg[1]), ext(seg[2], seg[3])
        yield ext(seg[6], seg[7]), ext(seg[4], seg[5])


def plot_chain(chain, samples_per_segment=30, show_handles=True, query_xs=None,
               title=None, show=True):
    """
    Plot a numeric chain in external coordinates: one colour per segment,
    handles as dashed lines, optional query_xs marked with the values the
    evaluator returns for them. Returns the figure.
    """
    n = index.build_index(chain)['n_segments']
    if n == 0:
        raise ValueError("No segments to plot.")

    fig = plt.figure()

    # sample every segment separately to colour segments apart
    for i, seg_pts in enumerate(_per_segment_samples(chain, samples_per_segment)):
        xs = [p[0] for p in seg_pts]
        ys = [p[1] for p in seg_pts]
        plt.plot(xs, ys, color=_PALETTE[i % len(_PALETTE)], label=f"Segment {i+1}", linewidth=2)

    if show_handles:
        for (x0, y0), (x1, y1) in _handle_lines(chain):
            plt.plot([x0, x1], [y0, y1], color='gray', linestyle='--', linewidth=0.8)
            plt.plot([x1], [y1], marker='o', color='gray', markersize=3)

    if query_xs is not None and len(query_xs):
        ys = ce.query_grid(chain, query_xs)
        plt.plot(list(query_xs), ys.tolist(), linestyle='none', marker='x', color='black',
                 label="query")

    if n > 1 or query_xs is not None:
        plt.legend()
    plt.title(title or f"Bezier chain ({n} segment{'s' if n != 1 else ''})")
    plt.xlabel('X')
    plt.ylabel('Y')
    if show:
        plt.show()
    return fig


def _per_segment_samples(chain, samples_per_segment):
    pts = ce.sample_curve(chain, samples_per_segment=samples_per_segment, include_knots=True)
    per_seg = max(2, int(samples_per_segment)) + 1
    for k in range(0, len(pts), per_seg):
        yield pts[k:k + per_seg]
