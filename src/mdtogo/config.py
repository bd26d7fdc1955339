"""Configuration loader for mdtogo runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, MutableMapping, Optional

from .core import config as core_config
from .emitter import DEFAULT_OUTPUT_NAME
from .errors import ConfigError
from .loader import DEFAULT_EXTENSION

CONFIG_FILENAME = "mdtogo.toml"

_DEFAULT_LOG_LEVEL = "INFO"
_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class GeneratorConfig:
    """Fully resolved settings for a single generation run."""

    source_dir: Path
    dest_dir: Path
    full: bool = False
    license: Optional[str] = None
    sort: bool = True
    strict_names: bool = False
    output_name: str = DEFAULT_OUTPUT_NAME
    extension: str = DEFAULT_EXTENSION
    log_level: str = _DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of file options."""

    full: Optional[bool] = None
    license: Optional[str] = None
    sort: Optional[bool] = None
    strict_names: Optional[bool] = None
    output_name: Optional[str] = None
    log_level: Optional[str] = None
    log_file: Optional[Path] = None


def parse_bool(value: str) -> bool:
    """Interpret a command-line flag value as a boolean."""

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid boolean value '{value}'. Use true or false."
    )


def load_config(
    source_dir: Path,
    dest_dir: Path,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
    cwd: Optional[Path] = None,
) -> GeneratorConfig:
    """Resolve settings with precedence CLI > TOML > defaults."""

    overrides = overrides or ConfigOverrides()
    base_dir = cwd or Path.cwd()

    table = _default_table()
    requested = _resolve_config_path(config_path, base_dir)
    if requested.exists():
        core_config.merge_defaults(table, core_config.load_toml(requested))
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {requested}")

    generation = table["generation"]
    logging_table = table["logging"]

    return GeneratorConfig(
        source_dir=source_dir,
        dest_dir=dest_dir,
        full=_pick_first(overrides.full, generation["full"]),
        license=_pick_first(
            overrides.license,
            _optional_string(generation["license"], "generation.license"),
        ),
        sort=_pick_first(overrides.sort, generation["sort"]),
        strict_names=_pick_first(
            overrides.strict_names, generation["strict_names"]
        ),
        output_name=_validate_output_name(
            _pick_first(overrides.output_name, generation["output_name"])
        ),
        extension=_normalize_extension(generation["extension"]),
        log_level=_validate_log_level(
            _pick_first(overrides.log_level, logging_table["level"])
        ),
        log_file=_pick_first(
            overrides.log_file, _optional_path(logging_table["file"])
        ),
    )


def _default_table() -> MutableMapping[str, MutableMapping[str, Any]]:
    return {
        "generation": {
            "full": False,
            "license": None,
            "sort": True,
            "strict_names": False,
            "output_name": DEFAULT_OUTPUT_NAME,
            "extension": DEFAULT_EXTENSION,
        },
        "logging": {"level": _DEFAULT_LOG_LEVEL, "file": None},
    }


def _resolve_config_path(config_path: Optional[Path], base_dir: Path) -> Path:
    if config_path is not None:
        return config_path.expanduser()
    return base_dir / CONFIG_FILENAME


def _optional_string(value: object, key: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"{key} must be a string when provided.")


def _optional_path(value: object) -> Optional[Path]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError("logging.file must be a string when provided.")
    raw = value.strip()
    return Path(raw).expanduser() if raw else None


def _validate_output_name(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("output_name must be a non-empty file name.")
    name = value.strip()
    if Path(name).name != name:
        raise ConfigError(
            f"output_name must be a bare file name, got '{name}'."
        )
    return name


def _normalize_extension(value: object) -> str:
    if not isinstance(value, str) or not value.strip(". "):
        raise ConfigError("generation.extension must be a non-empty string.")
    stripped = value.strip()
    return stripped if stripped.startswith(".") else f".{stripped}"


def _validate_log_level(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("logging.level must be a non-empty string.")
    return value.strip().upper()


def _pick_first(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigOverrides",
    "GeneratorConfig",
    "load_config",
    "parse_bool",
]
