"""
Configuration constants for the advising system.

This module contains all configuration values and constants used throughout
the advising program. Centralizing these makes it easy to adjust the input
format or the network behavior without touching the algorithm layer.
"""

# =============================================================================
# INPUT FORMAT
# =============================================================================

# Course files are plain text, one course per line:
#   COURSE_NUMBER, Title, PREREQ_1, PREREQ_2, ...
# There is no quoting, so a title can never contain the delimiter.
DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"

# Key and title are mandatory; everything after them is a prerequisite.
MIN_FIELDS = 2


# =============================================================================
# REMOTE SOURCES
# =============================================================================
# A course file may also be given as an http(s) URL. The session retries
# transient failures with exponential backoff (1s, 2s, 4s...).

URL_SCHEMES = ("http://", "https://")
HTTP_TIMEOUT = 15
HTTP_RETRIES = 3
HTTP_BACKOFF_FACTOR = 1
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]
USER_AGENT = "abcu-advising/1.0"


# =============================================================================
# DISPLAY
# =============================================================================

# Shown in place of a prerequisite title that cannot be resolved. Load-time
# validation should make this unreachable.
MISSING_PREREQUISITE_MARKER = "(missing info)"

# Menu choices for the interactive CLI
MENU_LOAD = 1
MENU_LIST = 2
MENU_COURSE = 3
MENU_EXIT = 9
