"""
Config file discovery and loading.

A global file under ``~/.opencode`` is read first; the first project file
found is deep-merged over it. Files may be plain JSON or JSONC.
"""

import json
import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from .main_config import Config

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".opencode"
CONFIG_FILE_NAMES = ("opencode.jsonc", "opencode.json")

# String literals are matched first so "//" inside a value survives.
_JSONC_TOKEN = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*[\s\S]*?\*/')


def strip_jsonc_comments(content: str) -> str:
    """Remove ``//`` and ``/* */`` comments, leaving string values intact."""
    return _JSONC_TOKEN.sub(lambda m: m.group(1) or "", content)


def load_config_file(path: Path) -> dict[str, Any] | None:
    """
    Parse one config file.

    Returns None when the file does not exist or cannot be parsed; parse
    failures are logged and otherwise ignored so one bad file does not
    take the server down.
    """
    if not path.is_file():
        return None

    try:
        text = path.read_text()
        if path.suffix == ".jsonc":
            text = strip_jsonc_comments(text)
        data = json.loads(text)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be an object", path)
        return None
    return data


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; nested dicts merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def project_config_candidates(project_root: Path) -> list[Path]:
    """Project config locations, in lookup order."""
    return [
        *(project_root / name for name in CONFIG_FILE_NAMES),
        project_root / CONFIG_DIR_NAME / CONFIG_FILE_NAMES[0],
    ]


def load_config(project_root: Path | None = None, home: Path | None = None) -> Config:
    """
    Build the effective Config.

    Args:
        project_root: Directory searched for a project config (default: cwd)
        home: Directory holding ``.opencode/opencode.jsonc`` (default: user home)
    """
    project_root = project_root or Path.cwd()
    home = home or Path.home()

    data = load_config_file(home / CONFIG_DIR_NAME / CONFIG_FILE_NAMES[0]) or {}

    for path in project_config_candidates(project_root):
        project_data = load_config_file(path)
        if project_data:
            logger.debug("Using project config %s", path)
            data = merge_configs(data, project_data)
            break

    return Config.model_validate(data)


def get_working_directory() -> str:
    """Directory new sessions are created in (``WORKING_DIR`` or cwd)."""
    return os.environ.get("WORKING_DIR", os.getcwd())


@lru_cache(maxsize=1)
def get_config(project_root: Path | None = None) -> Config:
    """Cached ``load_config``; call ``get_config.cache_clear()`` to reload."""
    return load_config(project_root or Path(get_working_directory()))
