"""Application configuration: settings schema and mdoutline.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "mdoutline.yaml"


class Settings(BaseModel):
    indent_style: str       = Field(default="tab", pattern="^(tab|space)$", description="tab or space")
    indent_size:  int       = Field(default=4,     ge=1, description="Spaces per level when indent_style is space")
    tab_width:    int       = Field(default=4,     ge=1, description="Columns a tab counts for in source indentation")
    fence_marker: str       = Field(default="```", min_length=1, description="Literal that opens and closes a fenced range")
    extensions:   list[str] = Field(default=[".md", ".txt"], description="File suffixes picked up in directories")


def _env_value(name: str, raw: str) -> Any:
    """Split comma-separated env values for list fields."""
    if name == "extensions":
        return [e.strip() for e in raw.split(",") if e.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdoutline.yaml, then MDOUTLINE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDOUTLINE_{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
