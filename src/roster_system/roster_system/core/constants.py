"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 9
PAGE_SIZE_OPTIONS = (6, 9, 12, 18, 24)
SEARCH_DEBOUNCE_MS = 300
REPORT_FETCH_LIMIT = 1000
PLAYER_POOL_LIMIT = 1000
CSV_ENCODING = "utf-8-sig"
