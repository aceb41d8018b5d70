"""Grid and code-format constants.

The encoder and the decoder use different grids. Encoding floors metres
measured from the equator and the prime meridian into 50 m cells; decoding
places 5 m steps from a local origin south-west of St. George's. The two do
not invert each other.
"""

import re

# Country prefix on every code
CODE_PREFIX = "GN"

# Accepted code shape, matched with fullmatch: GN-XXX-NNNNNN (uppercase, ASCII digits)
CODE_PATTERN = re.compile(r"GN-([A-Z]{3})-([0-9]{6})")

# Parish codes accepted by the formatter
PARISH_CODE_PATTERN = re.compile(r"[A-Z]{3}")

# Digits kept from each grid index
DIGITS_PER_AXIS = 3

# --- Encoder -----------------------------------------------------------------

# Encoder cell size in metres
GRID_SIZE_M = 50

# 1 degree of latitude in metres
LAT_TO_METERS = 111320

# 1 degree of longitude at ~12 N: cos(12) * 111320 ~= 108900
LNG_TO_METERS = 108900

# --- Decoder -----------------------------------------------------------------

# Decoder step size in metres
SEARCH_GRID_SIZE_M = 5

SEARCH_ORIGIN_LAT = 11.98
SEARCH_ORIGIN_LNG = -61.80

METERS_PER_DEG_LAT = 111320
