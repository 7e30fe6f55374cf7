"""
Core constants for the agent system.

This module defines system-wide constants used across the codebase.
Following the style guide: no magic constants in code.
"""

# Context release
RELEASED_PREFIX = "[Context released:"  # sentinel marking a released tool output
UNKNOWN_TITLE = "Unknown"  # title used when a completed tool call has none
BYTES_PER_TOKEN = 4  # rough heuristic for token estimation
