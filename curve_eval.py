# Scaled Bezier chain evaluator.
# Maps an external x into curve-local space, finds the segment that owns it,
# solves x(t) = x for the segment parameter t and returns y(t) mapped back out.
# Segment math accepts numpy arrays for t as well as plain floats.

import logging

import numpy as np

from constants import (
    BISECT_MAX_ITER,
    EXACT_HIT_TOL,
    MIN_CHAIN_LEN,
    NEWTON_MAX_ITER,
    NEWTON_MIN_SLOPE,
    NEWTON_START,
    POINT_STRIDE,
    RETRY_ATTEMPTS,
    RETRY_JITTER,
    X_TOLERANCE,
    ZERO_SNAP_TOL,
)
from index import build_index, iter_segments, segment_at

log = logging.getLogger(__name__)


class ZeroScaleError(ZeroDivisionError):
    """The chain header holds a zero scale factor; no x can be evaluated."""


def point_at_t(seg, t):
    """Point (x, y) on an 8-float cubic Bezier segment at parameter t."""
    mt = 1.0 - t
    mt2 = mt * mt
    t2 = t * t

    a = mt2 * mt
    b = mt2 * t * 3.0
    c = mt * t2 * 3.0
    d = t * t2

    x = a * seg[0] + b * seg[2] + c * seg[4] + d * seg[6]
    y = a * seg[1] + b * seg[3] + c * seg[5] + d * seg[7]
    return (x, y)


def derivative_at_t(seg, t):
    """First derivative (dx/dt, dy/dt) of the segment at t."""
    mt = 1.0 - t

    a = -3.0 * mt * mt
    b = 3.0 * mt * (mt - 2.0 * t)
    c = 3.0 * t * (2.0 * mt - t)
    d = 3.0 * t * t

    x = a * seg[0] + b * seg[2] + c * seg[4] + d * seg[6]
    y = a * seg[1] + b * seg[3] + c * seg[5] + d * seg[7]
    return (x, y)


def t_at_x_newton(seg, x, start=NEWTON_START, tolerance=X_TOLERANCE,
                  max_iterations=NEWTON_MAX_ITER, min_slope=NEWTON_MIN_SLOPE):
    """
    Newton-Raphson for x(t) = x with t clamped to [0, 1] after every step.
    Returns t, or None when it has not converged after max_iterations steps.
    Steps are skipped where |dx/dt| <= min_slope (t stays put).
    """
    t = start
    iterations = 0
    while True:
        x_at_t = point_at_t(seg, t)[0]
        dx = derivative_at_t(seg, t)[0]
        diff = x - x_at_t

        if abs(dx) > min_slope:
            t += diff / dx
        t = min(1.0, max(0.0, t))

        iterations += 1
        if abs(diff) <= tolerance:
            return t
        if iterations > max_iterations:
            return None


def t_at_x_bisect(seg, x, tolerance=X_TOLERANCE, max_iterations=BISECT_MAX_ITER):
    """
    Bisection for x(t) = x on [0, 1]. Slower than Newton but does not care
    about flat spots; used when Newton fails.
    """
    a = 0.0
    b = 1.0
    for _ in range(max_iterations):
        t = (a + b) / 2.0
        x_at_t = point_at_t(seg, t)[0]
        if abs(x_at_t - x) <= tolerance:
            return t

        x_at_a = point_at_t(seg, a)[0]
        if (x_at_t > x) != (x_at_a > x):
            b = t
        else:
            a = t
    return None


def solve_t(seg, x, attempts=RETRY_ATTEMPTS, jitter=RETRY_JITTER):
    """
    Find t with x(t) = x: Newton first, bisection as fallback. The pair is
    retried with the target nudged by jitter*attempt, subtracted when x >= 1
    and added otherwise. None if all attempts fail.
    """
    for attempt in range(attempts):
        tweak = jitter * attempt
        adjusted_x = x - tweak if x >= 1.0 else x + tweak
        if attempt:
            log.debug(f"Retry {attempt} for x={x!r} with target {adjusted_x!r}")

        t = t_at_x_newton(seg, adjusted_x)
        if t is None:
            log.debug(f"Newton did not converge for x={adjusted_x!r}, bisecting")
            t = t_at_x_bisect(seg, adjusted_x)
        if t is not None:
            return t

    log.debug(f"No t found for x={x!r} after {attempts} attempts")
    return None


def to_external(value, scale_y, offset_y):
    """Curve-local y -> external y as a float. Never returns negative zero."""
    scaled = float((value + offset_y) * scale_y)
    if scaled == 0.0:
        return 0.0
    return scaled


def to_external_x(value, scale_x, offset_x):
    # inverse of x_local = x / scale_x - offset_x
    return (value + offset_x) * scale_x


def _header(chain):
    idx = build_index(chain)
    if idx['scale_x'] == 0.0 or idx['scale_y'] == 0.0:
        raise ZeroScaleError("Scale factors cannot be 0")
    return idx


def query_curve(chain, scaled_x):
    """
    y for external x along a scaled Bezier chain, or None.

    chain: [scale_x, scale_y, offset_x, offset_y, x0, y0, hx, hy, ...] as
        produced by decoder.decode_chain.
    scaled_x: x in the external (scaled & offset) coordinate space.

    None means the curve has no value there (chain too short, x outside the
    chain's x range, or no t found). A zero scale factor raises ZeroScaleError.
    """
    if len(chain) < MIN_CHAIN_LEN:
        return None

    idx = _header(chain)
    scale_y, offset_y = idx['scale_y'], idx['offset_y']

    x = (scaled_x / idx['scale_x']) - idx['offset_x']

    if x < chain[idx['first']] or x > chain[idx['last_x_index']]:
        return None

    # Exact hits on stored points return the stored y untouched, so the
    # end points and segment joins round-trip without solver drift.
    for i in idx['points']:
        if abs(chain[i] - x) < EXACT_HIT_TOL:
            return to_external(chain[i + 1], scale_y, offset_y)

    seg = None
    for i in idx['segments']:
        if chain[i] <= x <= chain[i + POINT_STRIDE]:
            seg = segment_at(chain, i)
            break
    if seg is None:
        return None

    t = solve_t(seg, x)
    if t is None:
        return None

    y = point_at_t(seg, t)[1]
    if abs(y) < ZERO_SNAP_TOL:
        y = 0.0
    return to_external(y, scale_y, offset_y)


def domain(chain):
    """(lo, hi) external x range the chain answers for."""
    if len(chain) < MIN_CHAIN_LEN:
        raise ValueError("Chain is too short to have a domain")
    idx = _header(chain)
    a = to_external_x(chain[idx['first']], idx['scale_x'], idx['offset_x'])
    b = to_external_x(chain[idx['last_x_index']], idx['scale_x'], idx['offset_x'])
    return (min(a, b), max(a, b))


def sample_curve(chain, samples_per_segment=20, include_knots=True):
    """
    Uniformly sample each segment in t and return external (x, y) points.
    With include_knots=False the shared start point of every segment after
    the first is dropped so joins are not duplicated.
    """
    idx = _header(chain)
    m = max(2, int(samples_per_segment))
    ts = np.linspace(0.0, 1.0, m + 1)

    pts = []
    for k, seg in enumerate(iter_segments(chain)):
        xs, ys = point_at_t(seg, ts)
        xs = to_external_x(xs, idx['scale_x'], idx['offset_x'])
        ys = (ys + idx['offset_y']) * idx['scale_y']
        start = 1 if (k > 0 and not include_knots) else 0
        pts.extend(zip(xs[start:].tolist(), ys[start:].tolist()))
    return pts


def query_grid(chain, xs):
    """query_curve over an array of external x; NaN where there is no value."""
    xs = np.asarray(xs, dtype=float)
    out = np.full(xs.shape, np.nan)
    for k, xv in np.ndenumerate(xs):
        y = query_curve(chain, float(xv))
        if y is not None:
            out[k] = y
    return out
