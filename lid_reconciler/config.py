"""Configuration loading: an optional JSON file validated into ReconcilerConfig."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from lid_reconciler.errors import ConfigError
from lid_reconciler.models.reconciler import ReconcilerConfig

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hypr" / "lid-reconciler.json"


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ReconcilerConfig:
    """
    Load configuration from `path` (default: DEFAULT_CONFIG_PATH).

    A missing default file means built-in defaults; a missing explicit file
    is an error. Overrides with a value of None are ignored.
    """
    explicit = path is not None
    config_path = Path(path) if explicit else DEFAULT_CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.is_file():
        try:
            data = ReconcilerConfig.model_validate_json(
                config_path.read_text(encoding="utf-8")
            ).model_dump(exclude_unset=True)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
    elif explicit:
        raise ConfigError(f"Configuration file not found: {config_path}")

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return ReconcilerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
