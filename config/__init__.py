"""
Configuration module for the agent project.

Exports the main configuration classes and functions for use throughout the application.
"""

from .defaults import DEFAULT_MODEL, DEFAULT_RELEASE_COUNT
from .loader import get_config, get_working_directory, load_config, load_config_file, merge_configs, strip_jsonc_comments
from .main_config import Config
from .release_config import ReleaseConfig
from .tools_config import ToolsConfig

__all__ = [
    # Constants
    "DEFAULT_MODEL",
    "DEFAULT_RELEASE_COUNT",
    # Config models
    "Config",
    "ReleaseConfig",
    "ToolsConfig",
    # Loader functions
    "load_config",
    "get_config",
    "get_working_directory",
    "load_config_file",
    "merge_configs",
    "strip_jsonc_comments",
]
