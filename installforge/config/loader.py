import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from installforge.orchestrator import InstallOptions

from .types import ConfigError, InstallConfig, UnsupportedConfigFormatError


def load_config(path: str | Path) -> InstallConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_install_config(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Unsupported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_install_config(raw: Mapping[str, Any]) -> InstallConfig:
    keys = {"install_commands", "install_options"}

    for key in raw.keys():
        if key not in keys:
            raise ConfigError(f"Can't process: {key}")

    if not "install_commands" in raw:
        raise ConfigError("Missing 'install_commands' field")

    commands = _build_commands(raw["install_commands"])
    options = _build_options(raw.get("install_options"))

    return InstallConfig(commands, options)


def _build_commands(raw: Any) -> dict[str, bool]:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"'install_commands' must be a mapping, got {type(raw)}")

    commands: dict[str, bool] = {}

    for name, enabled in raw.items():
        if not isinstance(name, str):
            raise ConfigError(f"Installer name must be a string, got {type(name)}")

        name_norm = name.strip()

        if len(name_norm) < 1:
            raise ConfigError("An installer name can't be empty")

        if name_norm in commands:
            raise ConfigError(f"Duplicate installer after normalization: {name_norm}")

        if not isinstance(enabled, bool):
            raise ConfigError(f"{name_norm}: expected true or false, got {enabled!r}")

        commands[name_norm] = enabled

    return commands


def _build_options(raw: Any) -> InstallOptions:
    if raw is None:
        return InstallOptions()

    if not isinstance(raw, Mapping):
        raise ConfigError(f"'install_options' must be a mapping, got {type(raw)}")

    for key in raw.keys():
        if key != "skip_message":
            raise ConfigError(f"install_options: Can't process: {key}")

    skip = raw.get("skip_message", False)

    if not isinstance(skip, bool):
        raise ConfigError("install_options: skip_message should be true or false")

    return InstallOptions(skip_message=skip)
