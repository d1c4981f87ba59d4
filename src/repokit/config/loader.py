from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_PATH = Path("repokit.config.yaml")


class DataSettings(BaseModel):
    """Toggles for the data layer."""

    logging_sql: bool = Field(default=False, description="Log every SQL statement with bindings inlined")
    logging_transaction: bool = Field(default=False, description="Write audit lines around transactional writes")


class RepokitSettings(BaseModel):
    """Settings threaded into engines, repositories and writers."""

    data: DataSettings = Field(default_factory=DataSettings)
    result_nullable: bool = Field(
        default=False,
        description="Keep null fields when serializing results (nulls are stripped by default)",
    )

    @property
    def omit_null_fields(self) -> bool:
        return not self.result_nullable


def load_config(path: Path | None = None) -> Dict[str, Any]:
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Path | None = None) -> RepokitSettings:
    """
    Load and validate repokit settings from YAML.

    Args:
        path: Optional path to the config file. Defaults to repokit.config.yaml

    Returns:
        RepokitSettings. Built-in defaults are used when no path is given and
        the default file does not exist.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If the config structure is invalid
    """
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        return RepokitSettings()

    config = load_config(path)

    # Validate structure
    if not isinstance(config, dict):
        raise ValueError("Repokit config must be a dictionary")
    data = config.get("data")
    if data is not None and not isinstance(data, dict):
        raise ValueError("Repokit config 'data' must be a dictionary if provided")

    return RepokitSettings.model_validate(config)
