from .model import MigrationConfig, TableConfig
from .loader import load_config, ConfigError

__all__ = ["MigrationConfig", "TableConfig", "load_config", "ConfigError"]
