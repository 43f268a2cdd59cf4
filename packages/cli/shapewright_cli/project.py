"""Project directory support — finds and loads .shapewright/ configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_KEYS = ("region", "profile", "output", "max_results", "catalog_file")


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from start (default: cwd) looking for .shapewright/ directory."""
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if (parent / ".shapewright").is_dir():
            return parent
    return None


def load_project_config(project_root: Path) -> dict[str, Any]:
    """Load .shapewright/config.yaml if it exists. Unknown keys are dropped."""
    config_path = project_root / ".shapewright" / "config.yaml"
    if not config_path.exists():
        return {}
    data = yaml.safe_load(config_path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping")
    config = {k: v for k, v in data.items() if k in CONFIG_KEYS}
    # catalog_file is relative to the project root, not the cwd
    if config.get("catalog_file"):
        config["catalog_file"] = str(project_root / config["catalog_file"])
    return config


def load_config(start: Path | None = None) -> dict[str, Any]:
    root = find_project_root(start)
    if root is None:
        return {}
    return load_project_config(root)


def setting(config: dict[str, Any], key: str, explicit: Any) -> Any:
    """Explicit command-line values win over project config."""
    if explicit is not None:
        return explicit
    return config.get(key)
