"""Configuration module for the product service.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml (in-memory store, local development)
- APP_ENV=test → config_test.yaml (Cosmos DB store, production-like testing)
- Default      → config.yaml

Cosmos DB credentials are loaded from the .env file.
Fails fast with clear error messages if required configuration is missing.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

STORE_BACKENDS = ("memory", "cosmosdb")


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from product_service/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable."""
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_required_env(key: str) -> str:
    """Get required environment variable or raise ConfigurationError."""
    value = os.environ.get(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please add it to your .env file."
        )
    return value


@dataclass(frozen=True)
class StoreConfig:
    """Product store configuration with backend toggle."""
    backend: str  # "memory" or "cosmosdb"
    enforce_unique_names: bool


@dataclass(frozen=True)
class CosmosDBConfig:
    """Azure Cosmos DB configuration for product documents."""
    endpoint: str
    key: str
    database_name: str
    container_name: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    store: StoreConfig
    logging: LoggingConfig
    cosmosdb: Optional[CosmosDBConfig]  # Only set when store.backend == "cosmosdb"


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If required configuration is missing or the
            store settings cannot be honoured.
    """
    load_dotenv()

    yaml_config = _load_yaml_config()

    store_section = yaml_config.get("store", {})
    store_config = StoreConfig(
        backend=store_section.get("backend", "memory"),
        enforce_unique_names=bool(store_section.get("enforce_unique_names", False)),
    )

    logging_section = yaml_config.get("logging", {})
    logging_config = LoggingConfig(
        level=str(logging_section.get("level", "INFO")).upper(),
    )

    cosmosdb_config: Optional[CosmosDBConfig] = None
    if store_config.backend == "cosmosdb":
        if store_config.enforce_unique_names:
            # Products are partitioned by id and Cosmos unique keys only hold
            # within one logical partition.
            raise ConfigurationError(
                "store.enforce_unique_names is only supported by the memory backend"
            )
        cosmosdb_section = yaml_config.get("cosmosdb", {})
        cosmosdb_config = CosmosDBConfig(
            endpoint=_get_required_env("COSMOSDB_ENDPOINT"),
            key=_get_required_env("COSMOSDB_KEY"),
            database_name=cosmosdb_section.get("database_name", "product_catalog"),
            container_name=cosmosdb_section.get("container_name", "products"),
        )

    return AppConfig(
        store=store_config,
        logging=logging_config,
        cosmosdb=cosmosdb_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name: 'dev', 'test' or 'default'."""
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
