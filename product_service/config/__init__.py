"""Configuration module."""

from product_service.config.configuration import (
    STORE_BACKENDS,
    AppConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    StoreConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "STORE_BACKENDS",
    "AppConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "StoreConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
