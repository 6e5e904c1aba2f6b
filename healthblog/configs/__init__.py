from healthblog.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    HashConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "HashConfig",
    "pool_kwargs",
    "settings",
]
