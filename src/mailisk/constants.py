"""Default configuration constants for Mailisk SDK."""

DEFAULT_BASE_URL = "https://api.mailisk.com/"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# Long-poll search settings
DEFAULT_LOOKBACK_SECONDS = 15 * 60
DEFAULT_WAIT_TIMEOUT_MS = 5 * 60 * 1000
DEFAULT_MAX_REDIRECTS = 99_999
