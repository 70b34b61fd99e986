"""Local-wins merge between an address book and a sync provider.

The book's entries are serialized and handed to the provider, which returns
its reconciled view. Every local entry is kept as-is; a remote entry is only
added when no local entry shares its case-insensitive name. The merged result
then replaces the book's contents.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from addressbook.sync.codec import parse_entry, record_key, serialize_entries

if TYPE_CHECKING:
    from addressbook.directory.address_book import AddressBook
    from addressbook.sync.provider import SyncProvider

logger = logging.getLogger(__name__)


def merge_records(local: Iterable[str], remote: Iterable[str]) -> list[str]:
    """Local records followed by remote records whose name is not local.

    Remote records may arrive in any order; among remote duplicates the
    first one seen is kept.
    """
    merged = list(local)
    seen = {record_key(r) for r in merged}

    for record in remote:
        key = record_key(record)
        if key in seen:
            continue
        seen.add(key)
        merged.append(record)

    return merged


def synchronize(book: AddressBook, provider: SyncProvider) -> None:
    """Reconcile ``book`` with ``provider`` and rehydrate it from the result.

    Provider errors and malformed records propagate unchanged; the book is
    only modified once the whole merged result has been parsed.
    """
    local = serialize_entries(book)
    remote = provider.synchronize(list(local))

    merged = merge_records(local, remote)
    entries = [parse_entry(record) for record in merged]

    book.replace_entries(entries)
    logger.debug(
        "Synchronized %d local entries with %d remote, %d after merge",
        len(local),
        len(remote),
        len(entries),
    )
