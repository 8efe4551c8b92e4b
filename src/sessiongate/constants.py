"""
Application-wide constants for sessiongate.

Endpoint paths, header names and defaults shared by the client, the
configuration models and the CLI.
"""

# Backend endpoints (relative to the configured base URL)
CSRF_ENDPOINT = "/csrf"
LOGIN_ENDPOINT = "/login"
LOGOUT_ENDPOINT = "/logout"
PROCESS_ENDPOINT = "/toProcess"

# Headers
CSRF_HEADER = "X-CSRF-Token"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_USER_AGENT = "sessiongate/0.1"

# Token fields accepted in the /csrf response, in order of preference
CSRF_TOKEN_FIELDS = ("csrfToken", "token")

# Network defaults
DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 30
MAX_TIMEOUT_SECONDS = 300

# Status reported when no response was ever received
NETWORK_ERROR_STATUS = 0

# Logging defaults
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# CLI exit codes
EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE_ERROR = 2
