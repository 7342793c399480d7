from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning an empty dict if it's blank."""
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data


def load_listings(path: Path) -> tuple[str | None, list[dict[str, Any]]]:
    """Return the employer name (if any) and the raw listing entries."""
    data = load_yaml(path)
    listings = data.get("listings", [])
    if not isinstance(listings, list) or not all(isinstance(item, dict) for item in listings):
        raise ValueError(f"'listings' in {path} must be a list of mappings")
    return data.get("employer"), list(listings)
