"""Errors raised by address book operations."""


class AddressBookError(Exception):
    """Base class for all address book errors."""


class InvalidName(AddressBookError, ValueError):
    """Name is empty or longer than the allowed maximum."""


class EntryNotFound(AddressBookError, KeyError):
    """No entry matches the requested name."""

    def __init__(self, name: str = ""):
        super().__init__("Entry not found")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return "Entry not found"


class InvalidBirthday(AddressBookError, ValueError):
    """Month or day is out of range."""


class MalformedRecord(AddressBookError, ValueError):
    """A serialized entry cannot be encoded or decoded."""
