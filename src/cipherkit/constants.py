"""Default configuration constants for cipherkit."""

# Environment variables read by load_config()
ENV_LOG_LEVEL = "CIPHERKIT_LOG_LEVEL"
ENV_KEY_DIR = "CIPHERKIT_KEY_DIR"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_KEY_DIR = "."

# Path meaning "read from stdin" on the command line
STDIN_PATH = "-"
