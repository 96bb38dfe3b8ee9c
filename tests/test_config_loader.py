# tests/test_config_loader.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from installforge.config.loader import load_config
from installforge.config.types import ConfigError, UnsupportedConfigFormatError
from installforge.orchestrator import InstallOptions


# -------------------------
# Helpers
# -------------------------


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


# -------------------------
# Basic file/path errors
# -------------------------


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_path_is_dir_raises_config_error(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    with pytest.raises(ConfigError):
        load_config(d)


def test_unsupported_extension_raises_unsupported_format(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.txt", "install_commands: {}")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(p)


# -------------------------
# Parse errors are wrapped
# -------------------------


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "install_commands: [\n"),
        ("config.toml", "install_commands = {"),
        ("config.json", '{"install_commands": '),
    ],
)
def test_invalid_syntax_is_wrapped_as_config_error(
    tmp_path: Path, name: str, content: str
) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError) as exc_info:
        load_config(p)

    assert exc_info.value.__cause__ is not None


# -------------------------
# Valid files
# -------------------------


def test_yaml_preserves_installer_order(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "installforge.yml",
        "install_commands:\n  npm: true\n  composer: false\n  bower: true\n",
    )
    config = load_config(p)

    assert list(config.install_commands) == ["npm", "composer", "bower"]
    assert config.install_commands["composer"] is False
    assert config.options == InstallOptions()


def test_toml_with_options(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "installforge.toml",
        "[install_commands]\nnpm = true\n\n[install_options]\nskip_message = true\n",
    )
    config = load_config(p)

    assert config.install_commands == {"npm": True}
    assert config.options.skip_message is True


def test_json_empty_registry_is_allowed(tmp_path: Path) -> None:
    p = write_json(tmp_path / "installforge.json", {"install_commands": {}})
    config = load_config(p)

    assert config.install_commands == {}


def test_installer_names_are_stripped(tmp_path: Path) -> None:
    p = write_json(tmp_path / "c.json", {"install_commands": {"  npm ": True}})
    assert load_config(p).install_commands == {"npm": True}


# -------------------------
# Shape validation
# -------------------------


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "[]\n"),
        (".yaml", "null\n"),
        (".json", "[]"),
        (".json", "null"),
    ],
)
def test_top_level_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_config(p)


def test_missing_install_commands_raises(tmp_path: Path) -> None:
    p = write_json(tmp_path / "c.json", {"install_options": {}})
    with pytest.raises(ConfigError):
        load_config(p)


def test_unknown_top_level_key_raises(tmp_path: Path) -> None:
    p = write_json(tmp_path / "c.json", {"install_commands": {}, "nope": 1})
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "commands",
    [
        [],
        "npm",
        {"npm": "yes"},
        {"npm": 1},
        {"   ": True},
    ],
)
def test_bad_install_commands_raise(tmp_path: Path, commands: object) -> None:
    p = write_json(tmp_path / "c.json", {"install_commands": commands})
    with pytest.raises(ConfigError):
        load_config(p)


def test_installer_name_not_string_yaml_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "c.yaml", "install_commands:\n  1: true\n")
    with pytest.raises(ConfigError):
        load_config(p)


def test_duplicate_installer_after_normalization_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "c.yaml",
        'install_commands:\n  npm: true\n  " npm ": false\n',
    )
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "options",
    [
        [],
        {"skip_message": "true"},
        {"quiet": True},
    ],
)
def test_bad_install_options_raise(tmp_path: Path, options: object) -> None:
    p = write_json(
        tmp_path / "c.json", {"install_commands": {"npm": True}, "install_options": options}
    )
    with pytest.raises(ConfigError):
        load_config(p)


def test_null_install_options_use_defaults(tmp_path: Path) -> None:
    p = write_text(tmp_path / "c.yaml", "install_commands:\n  npm: true\ninstall_options:\n")
    assert load_config(p).options.skip_message is False
