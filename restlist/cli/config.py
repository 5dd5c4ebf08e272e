"""Configuration management for the CLI."""

import logging
import os
from pathlib import Path
from typing import Any

import msgspec
import yaml

from restlist.core.exceptions import ConfigError
from restlist.core.models import Restaurant, RestaurantList
from restlist.events import EventBus
from restlist.registry import ListRegistry

logger = logging.getLogger(__name__)


class SeedRestaurant(msgspec.Struct, frozen=True, forbid_unknown_fields=True):
    """A restaurant declared in the configuration file."""

    name: str
    rating: float | None = None


class SeedList(msgspec.Struct, frozen=True, forbid_unknown_fields=True):
    """A restaurant list declared in the configuration file.

    Restaurants may be given as plain names or as ``{name, rating}`` mappings.
    """

    name: str
    restaurants: list[str | SeedRestaurant] = msgspec.field(default_factory=list)

    def build(self) -> RestaurantList:
        """Create the RestaurantList described by this seed."""
        restaurants = []
        for item in self.restaurants:
            if isinstance(item, str):
                restaurants.append(Restaurant(item))
            else:
                restaurants.append(Restaurant(item.name, item.rating))
        return RestaurantList(self.name, restaurants)


def default_seed_lists() -> list[SeedList]:
    """Lists available when no configuration provides any."""
    return [
        SeedList(name="La1", restaurants=["McDonald's", "Starbucks"]),
        SeedList(name="La2", restaurants=["Green Dragon", "Cactus"]),
    ]


class Settings(msgspec.Struct, kw_only=True):
    """Application settings."""

    lists: list[SeedList] = msgspec.field(default_factory=default_seed_lists)
    no_color: bool = False
    width: int | None = None


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(path), f"invalid YAML: {e}") from e
        except OSError as e:
            raise ConfigError(str(path), f"cannot read file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "restlist" / "config.yaml")

        # Project config
        paths.append(Path(".restlist.yaml"))
        paths.append(Path("restlist.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load raw configuration from files and environment variables.

    Args:
        path: Explicit config file. When given, default locations are skipped.

    Returns:
        Merged configuration dictionary
    """
    config: dict[str, Any] = {}

    if path is not None:
        config = Config.from_file(path)
    else:
        # Later paths win for conflicting keys
        for candidate in Config.get_config_paths():
            if candidate.exists():
                try:
                    config = Config.merge_configs(config, Config.from_file(candidate))
                except ConfigError as e:
                    logger.warning(f"Ignoring config file: {e}")

    return Config.merge_configs(config, _env_overrides())


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate application settings.

    Raises:
        ConfigError: If the configuration does not match the settings schema
    """
    data = load_config(path)
    source = str(path) if path else "configuration"
    try:
        return msgspec.convert(data, type=Settings)
    except msgspec.ValidationError as e:
        raise ConfigError(source, str(e)) from e


def build_registry(
    settings: Settings, event_bus: EventBus | None = None
) -> ListRegistry:
    """Create a registry holding the configured seed lists.

    Raises:
        ValidationError: If a seed list or restaurant is invalid
    """
    registry = ListRegistry(
        (seed.build() for seed in settings.lists), event_bus=event_bus
    )
    logger.debug(f"Loaded {len(registry)} seed list(s)")
    return registry


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    if no_color := os.environ.get("RESTLIST_NO_COLOR"):
        overrides["no_color"] = no_color.strip().lower() in {"1", "true", "yes", "on"}

    if width := os.environ.get("RESTLIST_WIDTH"):
        try:
            overrides["width"] = int(width)
        except ValueError:
            raise ConfigError("RESTLIST_WIDTH", f"not an integer: {width!r}") from None

    return overrides


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
