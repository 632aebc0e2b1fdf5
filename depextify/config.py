"""Settings file support.

Settings come from ``.depextify.yaml`` in the current directory or, when that
is missing, in the home directory. Command-line options override them.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from depextify.core.models import ScanConfig
from depextify.reporters.base import DEFAULT_LEXER, DEFAULT_STYLE

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".depextify.yaml"
STYLE_ENV_VAR = "DEPEXTIFY_STYLE"


@dataclass
class Settings:
    show_count: bool = False
    show_pos: bool = False
    show_hidden: bool = False
    no_builtins: bool = True
    no_coreutils: bool = True
    no_common: bool = True
    use_color: Optional[bool] = None    # None: color when stdout is a terminal
    lexer: str = DEFAULT_LEXER
    style: str = DEFAULT_STYLE
    ignores: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    format: str = "text"

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Settings":
        """Build settings from a parsed file; unknown keys and bad values are skipped."""
        settings = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            value = _coerce(f.name, data[f.name])
            if value is not None:
                setattr(settings, f.name, value)
        return settings

    def to_scan_config(self) -> ScanConfig:
        return ScanConfig(
            no_builtins=self.no_builtins,
            no_coreutils=self.no_coreutils,
            no_common=self.no_common,
            show_hidden=self.show_hidden,
            extra_ignores=list(self.ignores),
            excludes=list(self.excludes),
        )


def _coerce(name: str, value: Any) -> Any:
    if name in ("ignores", "excludes"):
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        if isinstance(value, list):
            return [str(v) for v in value]
    elif name in ("lexer", "style", "format"):
        if isinstance(value, str):
            return value
    elif isinstance(value, bool):
        return value

    logger.warning(f"Ignoring invalid value for '{name}' in {CONFIG_FILE_NAME}: {value!r}")
    return None


def find_config_file(cwd: Optional[Path] = None, home: Optional[Path] = None) -> Optional[Path]:
    """The settings file to use: working directory first, then home."""
    candidates = [
        (cwd or Path.cwd()) / CONFIG_FILE_NAME,
        (home or Path.home()) / CONFIG_FILE_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from path, or from the discovered settings file.

    A missing, unreadable or malformed file yields the defaults. The
    DEPEXTIFY_STYLE environment variable overrides the style.
    """
    if path is None:
        path = find_config_file()

    settings = Settings()
    if path is not None:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {path}: {e}")
            data = None

        if isinstance(data, dict):
            settings = Settings.from_mapping(data)
        elif data is not None:
            logger.warning(f"Ignoring {path}: expected a mapping")

    env_style = os.environ.get(STYLE_ENV_VAR)
    if env_style:
        settings.style = env_style

    return settings
