"""TOML helpers backing the mdtogo configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, MutableMapping

try:  # Python >= 3.11 ships ``tomllib`` in the stdlib.
    import tomllib
except ModuleNotFoundError as exc:  # pragma: no cover - interpreter guard
    raise RuntimeError("Python 3.11+ is required for tomllib support.") from exc

from mdtogo.errors import ConfigError

__all__ = [
    "load_toml",
    "merge_defaults",
]


def load_toml(path: Path) -> Mapping[str, Any]:
    """Load the TOML document at ``path``.

    Missing files, unreadable files and malformed TOML all surface as
    :class:`~mdtogo.errors.ConfigError`.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse config TOML {path}: {exc}") from exc


def merge_defaults(
    base: MutableMapping[str, Any],
    override: Mapping[str, Any],
    *,
    path: str = "",
) -> None:
    """Merge ``override`` into ``base`` in place, rejecting unknown keys.

    Leaf values must match the type of the default they replace; ``None``
    defaults accept any value and leave validation to the caller.
    """

    for key, value in override.items():
        dotted = f"{path}{key}"
        if key not in base:
            raise ConfigError(f"Unknown configuration key '{dotted}'.")
        current = base[key]
        if isinstance(current, MutableMapping):
            if not isinstance(value, Mapping):
                raise ConfigError(
                    "Expected table for '{0}', found {1}.".format(
                        dotted, type(value).__name__
                    )
                )
            merge_defaults(current, value, path=f"{dotted}.")
            continue
        if current is not None and not isinstance(value, type(current)):
            raise ConfigError(
                "Expected {0} for '{1}', found {2}.".format(
                    type(current).__name__, dotted, type(value).__name__
                )
            )
        base[key] = value
