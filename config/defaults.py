"""Default configuration values."""

DEFAULT_MODEL = "claude-sonnet-4-20250514"

# Context Release Configuration
DEFAULT_RELEASE_COUNT = 3  # Recent tool calls released when no IDs are given
