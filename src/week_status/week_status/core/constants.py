"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WEEK_DAYS = 7
MAX_RANGE_DAYS = 62
DEFAULT_FETCH_WORKERS = 3

# Numbers with more digits than this are epoch timestamps.
EPOCH_MIN_DIGITS = 8
# Anything above this is epoch milliseconds, otherwise seconds.
EPOCH_MILLIS_THRESHOLD = 9_999_999_999
# Longer digit runs are never timestamps; also keeps int() conversion bounded.
EPOCH_MAX_DIGITS = 20
