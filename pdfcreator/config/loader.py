"""Locate and read pdfcreator.yaml."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PdfCreatorConfig

PROJECT_CONFIG = "pdfcreator.yaml"
USER_CONFIG = Path(".pdfcreator") / "config.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_candidates(cli_path: str | None = None) -> list[Path]:
    """Config files in lookup order. Only the first non-empty one is used."""
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {cli_path}")
        return [path]
    return [Path.cwd() / PROJECT_CONFIG, Path.home() / USER_CONFIG]


def load_config(cli_path: str | None = None) -> PdfCreatorConfig:
    """Build the config from --config, else ./pdfcreator.yaml, else
    ~/.pdfcreator/config.yaml, else the built-in defaults."""
    for path in config_candidates(cli_path):
        if not path.is_file():
            continue
        settings = _read_settings(path)
        if settings is None:
            continue
        try:
            return PdfCreatorConfig.model_validate(settings)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
    return PdfCreatorConfig()


def _read_settings(path: Path) -> dict | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(
            f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}"
        )
    return _expand_env_vars(raw)


def _expand_env_vars(value):
    """Substitute ${VAR} in every string; unset variables become ""."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {key: _expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value
