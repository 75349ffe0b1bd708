"""Shared constants for the constats analysis tool."""

# ── Integer domain (signed 64-bit) ──────────────────────────────────────────
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

# ── Tolerance sketch ────────────────────────────────────────────────────────
SKETCH_MIN_SIZE = 16            # at or below this, the whole set is sketched
SKETCH_SHIFT = 4                # otherwise only the first count >> 4 samples
TOLERANCE_MULTIPLIER = 5        # tolerance = 5 x sketch abdev
SKETCH_ABDEV_LIMIT = INT64_MAX / 160  # above this the tolerance is unbounded

# ── Histogram ───────────────────────────────────────────────────────────────
Z_LIMIT = 3.0                   # histogram spans at most [-3, 3] sigma
Z_STEP = 0.5                    # bucket width in sigma
BAR_WIDTH = 32                  # characters per bar
BAR_SHIFT = 5                   # one 'X' represents max(1, count >> 5) samples
BAR_CHAR = "X"
VALUE_WIDTH = 13                # column width of the bucket edges
COUNT_WIDTH = 12                # column width of the bucket count
MAGNITUDE_SUFFIXES = "KMGTPE"   # 10^3 .. 10^18

# ── Sample generation (CLI) ─────────────────────────────────────────────────
DEFAULT_SAMPLE_COUNT = 1_000_000
DEFAULT_SAMPLE_LOW = 0
DEFAULT_SAMPLE_HIGH = 2**31 - 1  # RAND_MAX on glibc
SPLIT_PARTS = 4
