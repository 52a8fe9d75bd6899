"""
config.py — Catalog lookup settings.

Reads config/catalog.yaml and merges it over built-in defaults so the app
still works when the file is missing or broken.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml


_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "catalog.yaml"


@dataclass
class CatalogConfig:
    page_title: str = "Subaru Parts Inventory"
    proxy_url: str = "https://api.allorigins.win/get"
    proxy_param: str = "url"
    contents_field: str = "contents"
    catalog_url: str = "https://parts.subaru.com/p/{part_number}"
    image_types: list[str] = field(default_factory=lambda: ["png", "jpg", "jpeg", "gif", "webp"])


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        warnings.warn(f"Could not read {path.name}: {e}")
        return {}
    if not isinstance(data, dict):
        warnings.warn(f"Ignoring {path.name}: expected a mapping, got {type(data).__name__}")
        return {}
    return data


def load_config(path: str | Path | None = None) -> CatalogConfig:
    """Load catalog settings. Unknown keys are ignored, missing keys use defaults."""
    raw = _read_yaml(Path(path) if path else _CONFIG_PATH)
    known = {f.name for f in fields(CatalogConfig)}
    return CatalogConfig(**{k: v for k, v in raw.items() if k in known})
