"""User configuration loaded from a JSON file.

The file lives in the platform config directory (``LSTR_CONFIG`` overrides
the path) and is only read. Every key is validated on its own: malformed
files or wrong-typed values fall back to defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lstr"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "LSTR_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

OPEN_MODE_SUSPEND = "suspend"
OPEN_MODE_EXIT = "exit"
OPEN_MODES = (OPEN_MODE_SUSPEND, OPEN_MODE_EXIT)


@dataclass(frozen=True)
class UserConfig:
    theme: str | None = None
    editor: str | None = None
    icons: bool = False
    open_mode: str = OPEN_MODE_SUSPEND
    expand_level: int | None = None


def config_path() -> Path:
    """Return the config file path, honouring ``LSTR_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config_data(path: Path | None = None) -> dict[str, object]:
    """Load the raw JSON object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = path or config_path()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", target, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _optional_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _positive_int(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def load_config(path: Path | None = None) -> UserConfig:
    """Return validated user settings."""
    data = load_config_data(path)
    icons = data.get("icons")
    open_mode = data.get("open_mode")
    return UserConfig(
        theme=_optional_str(data.get("theme")),
        editor=_optional_str(data.get("editor")),
        icons=icons if isinstance(icons, bool) else False,
        open_mode=open_mode if open_mode in OPEN_MODES else OPEN_MODE_SUSPEND,
        expand_level=_positive_int(data.get("expand_level")),
    )
