from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = Path("catalogue.config.yaml")

KNOWN_SECTIONS = ("storage", "reviews", "stock", "authorization", "logging")


class ReviewSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    moderate: bool = True  # inactive reviews stay hidden until a moderator activates them


class StockSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_stock: bool = True
    low_stock_threshold: float = Field(default=5, ge=0)


class CatalogueSettings(BaseModel):
    """Validated runtime settings shared by storage models and the CLI."""

    model_config = ConfigDict(frozen=True)

    sqlite_path: str = "catalogue.db"
    reviews: ReviewSettings = ReviewSettings()
    stock: StockSettings = StockSettings()
    granted_permissions: List[str] = []
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load catalogue configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to catalogue.config.yaml

    Returns:
        Dictionary with configuration (empty file yields an empty dict)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Catalogue config must be a dictionary")
    for section in KNOWN_SECTIONS:
        if section in config and config[section] is not None and not isinstance(config[section], dict):
            raise ValueError(f"Catalogue config '{section}' must be a dictionary")

    return config


def get_settings(config: Dict[str, Any] | None = None) -> CatalogueSettings:
    """
    Build validated settings from a config dict.

    Missing sections fall back to defaults; ``authorization.granted`` defaults to
    no permissions at all.

    Args:
        config: Config dict as returned by load_config. If None, defaults are used.

    Returns:
        CatalogueSettings

    Raises:
        ValueError: If a section holds values of the wrong type
    """
    config = config or {}
    storage = config.get("storage") or {}
    authorization = config.get("authorization") or {}
    logging_cfg = config.get("logging") or {}

    granted = authorization.get("granted") or []
    if not isinstance(granted, list):
        raise ValueError("Catalogue config 'authorization.granted' must be a list")

    # pydantic's ValidationError is a ValueError subclass
    return CatalogueSettings(
        sqlite_path=storage.get("sqlite_path", "catalogue.db"),
        reviews=ReviewSettings(**(config.get("reviews") or {})),
        stock=StockSettings(**(config.get("stock") or {})),
        granted_permissions=[str(permission) for permission in granted],
        log_level=str(logging_cfg.get("level", "INFO")),
    )


def load_settings(path: Path | None = None) -> CatalogueSettings:
    """
    Load settings from an explicit path, or from the default path when present.

    An explicit path must exist; a missing default file means built-in defaults.
    """
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        return get_settings({})
    return get_settings(load_config(path))
