from dataclasses import dataclass, field

from installforge.orchestrator import InstallOptions


@dataclass
class InstallConfig:
    install_commands: dict[str, bool]
    options: InstallOptions = field(default_factory=InstallOptions)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
