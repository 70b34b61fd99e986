"""Synchronization providers — the external side of a sync.

A provider is anything with a ``synchronize(local) -> merged`` method over
serialized entry strings. Two reference providers are included: one that
keeps its baseline in memory and one that persists it to a YAML file. Both
accumulate the union of every entry they have seen, with the caller's
entries winning on name collisions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import yaml

from addressbook.sync.synchronizer import merge_records


class SyncProvider(Protocol):
    """Reconciles submitted local entries against a remote baseline."""

    def synchronize(self, local: list[str]) -> list[str]:
        ...


class InMemoryProvider:
    """Provider whose remote state lives in memory."""

    def __init__(self, baseline: list[str] | None = None):
        self.baseline: list[str] = list(baseline or [])

    def synchronize(self, local: list[str]) -> list[str]:
        self.baseline = merge_records(local, self.baseline)
        return list(self.baseline)


class YamlFileProvider:
    """Provider whose remote state is a YAML list of serialized entries."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[str]:
        if not self.path.exists():
            return []
        with open(self.path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"Store {self.path} must contain a list of entries")
        return [str(record) for record in data]

    def save(self, records: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(list(records), f, default_flow_style=False)

    def synchronize(self, local: list[str]) -> list[str]:
        merged = merge_records(local, self.load())
        self.save(merged)
        return merged
