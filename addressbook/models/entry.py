"""Core data models for contact entries.

Covers the entry record itself, the year-less birthday, and the name
canonicalization rules shared by the directory and the sync codec.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass

from addressbook.errors import InvalidBirthday, InvalidName

MAX_NAME_LENGTH = 100

# Birthdays carry no year, so February is allowed its leap day.
_REFERENCE_LEAP_YEAR = 2000


@dataclass(frozen=True)
class Birthday:
    """A calendar month/day pair with no year."""

    month: int
    day: int

    def validate(self) -> Birthday:
        """Return self if the month and day denote a real calendar date."""
        if not 1 <= self.month <= 12:
            raise InvalidBirthday("Invalid birthday")
        days_in_month = calendar.monthrange(_REFERENCE_LEAP_YEAR, self.month)[1]
        if not 1 <= self.day <= days_in_month:
            raise InvalidBirthday("Invalid birthday")
        return self

    @classmethod
    def parse(cls, text: str) -> Birthday:
        """Parse and validate an ``MM-DD`` string."""
        month, sep, day = text.strip().partition("-")
        if not sep:
            raise InvalidBirthday("Invalid birthday")
        try:
            birthday = cls(month=int(month), day=int(day))
        except ValueError:
            raise InvalidBirthday("Invalid birthday") from None
        return birthday.validate()

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


@dataclass
class Entry:
    """A single contact in the address book."""

    name: str  # Canonical display form
    phone_number: int | None = None
    birthday: Birthday | None = None

    @property
    def key(self) -> str:
        return name_key(self.name)


def normalize_name(raw: str) -> str:
    """Validate a raw name and return its canonical display form.

    Length limits apply to the raw input. Each whitespace-separated token is
    lowercased with its first letter capitalized, and tokens are rejoined
    with single spaces.
    """
    if not raw:
        raise InvalidName("Name may not be empty")
    if len(raw) > MAX_NAME_LENGTH:
        raise InvalidName("Name too long")

    display = _canonical(raw)
    if not display:
        raise InvalidName("Name may not be empty")
    return display


def name_key(raw: str) -> str:
    """Lookup key for a name: the lowercase of its canonical form.

    Capitalizing can change a token's first character (``"ß"`` becomes
    ``"Ss"``), so the key is always derived from the canonical form.
    """
    return _canonical(raw).lower()


def _canonical(raw: str) -> str:
    return " ".join(token.capitalize() for token in raw.split())
