"""In-memory address book.

Stores contact entries keyed by the lowercase form of their canonical name,
so every lookup is case-insensitive. The book is a single-owner value with
no internal locking.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from addressbook.errors import EntryNotFound
from addressbook.models.entry import Birthday, Entry, name_key, normalize_name
from addressbook.sync import synchronizer

if TYPE_CHECKING:
    from addressbook.sync.provider import SyncProvider

logger = logging.getLogger(__name__)


class AddressBook:
    """Case-insensitive collection of contact entries."""

    def __init__(self):
        self._entries: dict[str, Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def has_entry(self, name: str) -> bool:
        return name_key(name) in self._entries

    def add_entry(self, name: str) -> Entry:
        """Add an entry, or return the existing one for the same name.

        Re-adding a present name is a no-op: the stored display name, phone
        number and birthday are all kept.
        """
        display = normalize_name(name)
        key = name_key(display)

        existing = self._entries.get(key)
        if existing is not None:
            return existing

        entry = Entry(name=display)
        self._entries[key] = entry
        logger.debug("Added entry %r", display)
        return entry

    def remove_entry(self, name: str) -> None:
        """Remove the entry for ``name``; absent names are ignored."""
        if self._entries.pop(name_key(name), None) is not None:
            logger.debug("Removed entry %r", name)

    def get_entries(self) -> list[str]:
        """Display names of all entries, sorted case-insensitively."""
        return [
            e.name for e in sorted(self._entries.values(), key=lambda e: (e.key, e.name))
        ]

    def get_entry(self, name: str) -> Entry:
        entry = self._entries.get(name_key(name))
        if entry is None:
            raise EntryNotFound(name)
        return entry

    def set_phone_number(self, name: str, value: int) -> None:
        self.get_entry(name).phone_number = value

    def get_phone_number(self, name: str) -> int | None:
        """Stored phone number, or None if it was never set."""
        return self.get_entry(name).phone_number

    def set_birthday(self, name: str, birthday: Birthday) -> None:
        entry = self.get_entry(name)
        entry.birthday = birthday.validate()

    def get_birthday(self, name: str) -> Birthday | None:
        """Stored birthday, or None if it was never set."""
        return self.get_entry(name).birthday

    def replace_entries(self, entries: Iterable[Entry]) -> None:
        """Swap the whole entry set for ``entries``.

        The first entry for a given key is kept; later duplicates are dropped.
        """
        replacement: dict[str, Entry] = {}
        for entry in entries:
            replacement.setdefault(entry.key, entry)
        self._entries = replacement
        logger.debug("Replaced address book contents (%d entries)", len(replacement))

    def synchronize(self, provider: SyncProvider) -> None:
        """Merge this book with the remote state held by ``provider``."""
        synchronizer.synchronize(self, provider)
