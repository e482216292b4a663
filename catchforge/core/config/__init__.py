from .config_loader import (
    CatchForgeConfig,
    get_config_path,
    load_config,
    load_env_config,
    load_yaml_config,
    reload_configs,
)

__all__ = [
    "CatchForgeConfig",
    "get_config_path",
    "load_config",
    "load_env_config",
    "load_yaml_config",
    "reload_configs",
]
