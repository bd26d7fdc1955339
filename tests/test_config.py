from __future__ import annotations

from pathlib import Path

import pytest

from mdtogo.config import (
    CONFIG_FILENAME,
    ConfigOverrides,
    GeneratorConfig,
    load_config,
    parse_bool,
)
from mdtogo.errors import ConfigError, ErrorCategory


def _load(tmp_path: Path, **kwargs) -> GeneratorConfig:
    kwargs.setdefault("cwd", tmp_path)
    return load_config(Path("docs"), Path("out"), **kwargs)


def test_defaults_without_config(tmp_path: Path) -> None:
    config = _load(tmp_path)

    assert config == GeneratorConfig(
        source_dir=Path("docs"),
        dest_dir=Path("out"),
        full=False,
        license=None,
        sort=True,
        strict_names=False,
        output_name="docs.go",
        extension=".md",
        log_level="INFO",
        log_file=None,
    )


def test_toml_in_working_directory_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        "[generation]\n"
        "full = true\n"
        'license = "none"\n'
        'extension = "markdown"\n'
        "[logging]\n"
        'level = "debug"\n'
        'file = "logs/mdtogo.log"\n',
        encoding="utf-8",
    )

    config = _load(tmp_path)

    assert config.full is True
    assert config.license == "none"
    assert config.extension == ".markdown"
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("logs/mdtogo.log")


def test_precedence_cli_over_file(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text(
        "[generation]\nsort = false\nstrict_names = true\n"
        'output_name = "file.go"\nfull = true\n',
        encoding="utf-8",
    )

    config = _load(
        tmp_path,
        config_path=config_path,
        overrides=ConfigOverrides(output_name="cli.go", full=False),
    )

    assert config.sort is False
    assert config.strict_names is True
    assert config.output_name == "cli.go"
    assert config.full is False


def test_empty_license_override_is_kept(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        '[generation]\nlicense = "file-license.txt"\n', encoding="utf-8"
    )

    config = _load(tmp_path, overrides=ConfigOverrides(license=""))

    assert config.license == ""


def test_environment_is_ignored(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MDTOGO_FULL", "true")
    monkeypatch.setenv("MDTOGO_SORT", "maybe")
    monkeypatch.setenv("MDTOGO_CONFIG", str(tmp_path / "missing.toml"))

    config = _load(tmp_path)

    assert config.full is False
    assert config.sort is True


def test_explicit_missing_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        _load(tmp_path, config_path=tmp_path / "missing.toml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("[generation]\nunknown = 1\n", "Unknown configuration key"),
        ("[generation]\nfull = \"yes\"\n", "Expected bool"),
        ("generation = 3\n", "Expected table"),
        ("[generation]\nlicense = 5\n", "generation.license"),
        ("[generation]\noutput_name = \"a/b.go\"\n", "bare file name"),
        ("[generation]\nextension = \".\"\n", "generation.extension"),
        ("[logging]\nlevel = \" \"\n", "logging.level"),
        ("not toml [", "Failed to parse"),
    ],
)
def test_invalid_config_files(tmp_path: Path, body: str, message: str) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError, match=message) as excinfo:
        _load(tmp_path)

    assert excinfo.value.category is ErrorCategory.USAGE


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("TRUE", True),
        (" 1 ", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("0", False),
        ("No", False),
        ("off", False),
    ],
)
def test_parse_bool(raw: str, expected: bool) -> None:
    assert parse_bool(raw) is expected
