"""
Inventory loader — reads deploysel.yml into domain models.

This is the primary entry point for loading the inventory snapshot.
It reads YAML, validates against Pydantic schemas, and returns a typed
``Inventory``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from deploysel.core.models.inventory import Inventory

logger = logging.getLogger(__name__)

# Default inventory filename
INVENTORY_FILE = "deploysel.yml"


class ConfigError(Exception):
    """Raised when the inventory file is invalid or missing."""


def find_inventory_file(start_dir: Path | None = None) -> Path | None:
    """Search for deploysel.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to deploysel.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / INVENTORY_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_inventory(path: Path | None = None) -> Inventory:
    """Load and validate the inventory snapshot.

    Args:
        path: Explicit path to deploysel.yml. If None, searches upward.

    Returns:
        Validated Inventory model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_inventory_file()

    if path is None:
        raise ConfigError(f"No {INVENTORY_FILE} found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Inventory file not found: {path}")

    logger.debug("Loading inventory from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        inventory = Inventory.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid inventory: {e}") from e

    logger.info(
        "Loaded inventory with %d application(s)%s",
        len(inventory.applications),
        " and a workspace" if inventory.workspace else "",
    )
    return inventory
