"""NAME_BRIDGE_* settings from the process environment or a local .env file.

Only keys carrying the NAME_BRIDGE_ prefix are kept from the file. The process
environment wins over the file so a shell export can override a checked-in
.env without editing it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple


PREFIX = "NAME_BRIDGE_"
ENV_FILE_VAR = PREFIX + "ENV_FILE"

_TRUE_WORDS = {"1", "true", "yes", "on"}

# (path, mtime, settings) of the last .env read.
_file_cache: Tuple[Optional[Path], Optional[float], Dict[str, str]] = (None, None, {})


def _env_file() -> Path:
    override = (os.environ.get(ENV_FILE_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    # Repository root when developing from source.
    return Path(__file__).resolve().parents[2] / ".env"


def _assignment(line: str) -> Optional[Tuple[str, str]]:
    """Return (key, value) for a NAME_BRIDGE_ assignment line, else None."""
    text = line.strip()
    if text.startswith("export "):
        text = text[len("export "):].lstrip()
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key.startswith(PREFIX):
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return key, value[1:-1]
    return key, value.split(" #", 1)[0].strip()


def read_env_file(path: Path) -> Dict[str, str]:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return {}
    pairs = (_assignment(line) for line in lines if not line.lstrip().startswith("#"))
    return dict(pair for pair in pairs if pair is not None)


def _file_settings() -> Dict[str, str]:
    global _file_cache

    path = _env_file()
    try:
        mtime: Optional[float] = path.stat().st_mtime
    except OSError:
        mtime = None

    cached_path, cached_mtime, settings = _file_cache
    if cached_path != path or cached_mtime != mtime:
        settings = read_env_file(path) if mtime is not None else {}
        _file_cache = (path, mtime, settings)
    return settings


def setting(name: str, default: str = "") -> str:
    """Return NAME_BRIDGE_<name>; empty values count as unset."""
    key = PREFIX + name
    value = os.environ.get(key)
    if not value:
        value = _file_settings().get(key)
    return value or default


def setting_int(name: str, default: int) -> int:
    raw = setting(name).strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def setting_bool(name: str, default: bool = False) -> bool:
    raw = setting(name).strip().lower()
    return raw in _TRUE_WORDS if raw else default
