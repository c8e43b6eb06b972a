"""Project configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "mdpress"
    src:           str = Field(default=".",    description="Project source root; posts live in <src>/posts")
    dest:          str = Field(default="site", description="Destination root for rendered pages")
    base_url:      str = Field(default="/",    description="Base URL every page and link is rooted at")
    date_format:   str = Field(default="%Y-%m-%d", description="strftime format for displayed post dates")
    templates_dir: str = Field(default="templates", description="Directory searched before the built-in templates")
    templates:     dict[str, str] = Field(
        default_factory=lambda: {"post": "post.html"},
        description="Template name per content type",
    )
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_workers:   Optional[int] = Field(default=None, ge=1, description="Worker threads per batch; None = executor default")
    log_level:     str = Field(default="INFO", description="Root log level")
    emit_json:     bool = Field(default=False, description="Write a metadata JSON sidecar next to each page")


ENV_PREFIX = "MDPRESS_"


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in a YAML config file, or {} when the file does not exist."""
    if not path.exists():
        return {}
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(loaded).__name__}")
    return loaded


def _env_values() -> dict[str, str]:
    """Collect non-empty MDPRESS_<FIELD> environment variables keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: value for name, value in found.items() if value}


def load_config(overrides: dict[str, Any] = None, config_file: str | Path = CONFIG_FILE) -> Settings:
    """Merge config_file < MDPRESS_<FIELD> env vars < non-None CLI overrides into Settings."""
    data = {
        **_read_config_file(Path(config_file)),
        **_env_values(),
        **{k: v for k, v in (overrides or {}).items() if v is not None},
    }
    return Settings(**data)
