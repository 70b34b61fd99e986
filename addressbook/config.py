"""Configuration for the address book command line.

Settings are read from a YAML file; every key is optional.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_STORE_PATH = ".addressbook/contacts.yaml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class AddressBookConfig:
    store_path: str = DEFAULT_STORE_PATH
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(path: str | Path | None = None) -> AddressBookConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    if path is None or not Path(path).exists():
        return AddressBookConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return AddressBookConfig(
        store_path=str(data.get("store_path", DEFAULT_STORE_PATH)),
        log_level=str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
    )
