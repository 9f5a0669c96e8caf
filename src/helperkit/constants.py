"""
Application-wide constants for helperkit.

Header names, content types and transport defaults shared by the web
helpers, the client factory and the configuration models.
"""

# Cloud provider authentication headers
AZURE_AUTH_HEADER = "x-functions-key"
AWS_AUTH_HEADER = "x-api-key"
GCP_AUTH_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "

# Content negotiation
JSON_MEDIA_TYPE = "application/json"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
JSON_ENCODING = "utf-8"

# Transport defaults
DEFAULT_TIMEOUT_SECONDS = 30
MAX_TIMEOUT_SECONDS = 600

# Logging defaults
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# Configuration
CONFIG_DIR_NAME = "helperkit"
CONFIG_FILE_NAME = "config.toml"

# COM type introspection
LOCALE_USER_DEFAULT = 0
MEMBER_ID_NIL = -1
