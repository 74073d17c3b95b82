# Shared constants for the encoded chain format and the x -> t solver.
# Changing any of these changes how existing encoded curves evaluate.

# Fixed-point denominator: encoded integers are value * ENCODING_SCALE_FACTOR
ENCODING_SCALE_FACTOR = 1e7

BASE62_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# Chain layout: header, then points with segments sharing their end points
HEADER_LEN = 4
SEGMENT_LEN = 8
POINT_STRIDE = 6
MIN_CHAIN_LEN = 8

# Snapping tolerances
EXACT_HIT_TOL = 1e-15
ZERO_SNAP_TOL = 1e-15

# Newton-Raphson
NEWTON_START = 0.5
NEWTON_MAX_ITER = 15
NEWTON_MIN_SLOPE = 1e-6

# Bisection fallback
BISECT_MAX_ITER = 100

# Both solvers stop once |x(t) - x| is within this
X_TOLERANCE = 1e-6

# Jittered retries of the whole solve
RETRY_ATTEMPTS = 10
RETRY_JITTER = 0.0001
