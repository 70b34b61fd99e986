"""Reference string encoding for entries exchanged with a sync provider.

Each entry is one ``name,phone,birthday`` string. Phone and birthday are
empty when unset; the birthday is written as ``MM-DD``. Names are not
escaped, so a name containing a comma cannot be encoded.
"""

from __future__ import annotations

from addressbook.errors import MalformedRecord
from addressbook.models.entry import Birthday, Entry, name_key, normalize_name

FIELD_SEPARATOR = ","


def serialize_entry(entry: Entry) -> str:
    if FIELD_SEPARATOR in entry.name:
        raise MalformedRecord(f"Name cannot contain '{FIELD_SEPARATOR}': {entry.name!r}")

    phone = "" if entry.phone_number is None else str(entry.phone_number)
    birthday = "" if entry.birthday is None else str(entry.birthday)
    return FIELD_SEPARATOR.join([entry.name, phone, birthday])


def serialize_entries(entries) -> list[str]:
    return [serialize_entry(e) for e in entries]


def parse_entry(record: str) -> Entry:
    """Parse one serialized entry, re-applying name and birthday validation."""
    fields = record.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise MalformedRecord(f"Expected 3 fields, got {len(fields)}: {record!r}")

    name, phone, birthday = fields

    phone_number = None
    if phone.strip():
        try:
            phone_number = int(phone)
        except ValueError:
            raise MalformedRecord(f"Invalid phone number {phone!r} in {record!r}") from None

    return Entry(
        name=normalize_name(name),
        phone_number=phone_number,
        birthday=Birthday.parse(birthday) if birthday.strip() else None,
    )


def record_key(record: str) -> str:
    """Case-insensitive key of a serialized entry, without full parsing."""
    return name_key(record.split(FIELD_SEPARATOR, 1)[0])
