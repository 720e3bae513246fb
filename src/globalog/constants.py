"""
Application-wide constants for globalog.

Defaults shared by the logging setup, the configuration layer and the CLI.
"""

# File size constants (bytes)
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024

# Logging defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_LOG_FILE = "logs/globalog.log"
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_KB
DEFAULT_SERVICE_NAME = "globalog"
DEFAULT_SERVICE_VERSION = "unknown"

VALID_LOG_FORMATS = ("console", "json", "rich")
VALID_LOG_OUTPUTS = ("console", "file")

# Configuration file location
CONFIG_DIR_NAME = "globalog"
CONFIG_FILE_NAME = "config.toml"

# Environment
ENV_PREFIX = "GLOBALOG_"
LABEL_ENV_VAR = "GLOBALOG_LABEL"
