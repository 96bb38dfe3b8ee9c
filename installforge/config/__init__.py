from .loader import load_config
from .types import ConfigError, InstallConfig, UnsupportedConfigFormatError

__all__ = ["load_config", "InstallConfig", "ConfigError", "UnsupportedConfigFormatError"]
