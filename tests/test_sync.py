"""Tests for synchronization (codec, merge, providers)."""

import tempfile
from pathlib import Path

import pytest
import yaml

from addressbook.directory.address_book import AddressBook
from addressbook.errors import InvalidName, MalformedRecord
from addressbook.models.entry import Birthday, Entry
from addressbook.sync.codec import parse_entry, record_key, serialize_entry
from addressbook.sync.provider import InMemoryProvider, YamlFileProvider
from addressbook.sync.synchronizer import merge_records


def _book(**phones) -> AddressBook:
    ab = AddressBook()
    for name, phone in phones.items():
        ab.add_entry(name)
        ab.set_phone_number(name, phone)
    return ab


class FailingProvider:
    def synchronize(self, local):
        raise ConnectionError("remote unavailable")


class StaticProvider:
    def __init__(self, records):
        self.records = records
        self.received = None

    def synchronize(self, local):
        self.received = local
        return list(self.records)


# --- Codec Tests ---


def test_serialize_entry():
    entry = Entry(name="Jane Doe", phone_number=5551234, birthday=Birthday(5, 5))
    assert serialize_entry(entry) == "Jane Doe,5551234,05-05"


def test_serialize_unset_fields():
    assert serialize_entry(Entry(name="Test")) == "Test,,"


def test_serialize_rejects_comma_in_name():
    with pytest.raises(MalformedRecord):
        serialize_entry(Entry(name="Doe, Jane"))


def test_parse_entry():
    entry = parse_entry("jane doe,5551234,05-05")
    assert entry.name == "Jane Doe"
    assert entry.phone_number == 5551234
    assert entry.birthday == Birthday(5, 5)


def test_parse_unset_fields():
    entry = parse_entry("Test,,")
    assert entry.phone_number is None
    assert entry.birthday is None


def test_parse_wrong_field_count():
    with pytest.raises(MalformedRecord):
        parse_entry("Doe, Jane,123,")
    with pytest.raises(MalformedRecord):
        parse_entry("Test")


def test_parse_bad_phone():
    with pytest.raises(MalformedRecord):
        parse_entry("Test,abc,")


def test_parse_validates_name():
    with pytest.raises(InvalidName):
        parse_entry(",123,")


def test_record_key():
    assert record_key("JANE doe,1,") == "jane doe"


# --- Merge Tests ---


def test_merge_local_wins():
    merged = merge_records(["Test,123,"], ["test,999,", "Other,1,"])
    assert merged == ["Test,123,", "Other,1,"]


def test_merge_first_remote_duplicate_kept():
    merged = merge_records([], ["A,1,", "a,2,"])
    assert merged == ["A,1,"]


# --- Synchronizer Tests ---


def test_sync_with_empty_provider_keeps_local():
    ab = _book(Test=111)
    provider = InMemoryProvider()
    ab.synchronize(provider)
    assert ab.get_entries() == ["Test"]
    assert ab.get_phone_number("Test") == 111
    assert provider.baseline == ["Test,111,"]


def test_sync_convergence():
    provider = InMemoryProvider()

    d1 = _book(Test=111, Test2=222)
    d1.synchronize(provider)

    d2 = AddressBook()
    d2.synchronize(provider)

    assert d2.get_entries() == ["Test", "Test2"]
    assert d2.get_phone_number("Test") == 111
    assert d2.get_phone_number("Test2") == 222


def test_sync_local_wins():
    provider = InMemoryProvider()

    d1 = _book(Test=111, Test2=222)
    d1.synchronize(provider)

    d2 = _book(Test=123, Test2=321)
    d2.synchronize(provider)

    assert d2.get_phone_number("Test") == 123
    assert d2.get_phone_number("Test2") == 321


def test_sync_discards_remote_fields_on_collision():
    ab = AddressBook()
    ab.add_entry("Test")
    ab.synchronize(StaticProvider(["test,999,01-01"]))
    assert ab.get_phone_number("Test") is None
    assert ab.get_birthday("Test") is None


def test_sync_tolerates_any_order():
    ab = AddressBook()
    ab.synchronize(StaticProvider(["c,3,", "A,1,", "b,2,"]))
    assert ab.get_entries() == ["A", "B", "C"]


def test_sync_replaces_contents():
    ab = _book(Local=1)
    ab.remove_entry("Local")
    ab.synchronize(StaticProvider(["Remote,2,"]))
    assert ab.get_entries() == ["Remote"]


def test_sync_sends_serialized_local_entries():
    ab = _book(Test=111)
    ab.set_birthday("Test", Birthday(2, 29))
    provider = StaticProvider([])
    ab.synchronize(provider)
    assert provider.received == ["Test,111,02-29"]


def test_sync_provider_failure_propagates():
    ab = _book(Test=111)
    with pytest.raises(ConnectionError):
        ab.synchronize(FailingProvider())
    assert ab.get_entries() == ["Test"]


def test_sync_malformed_result_leaves_book_unchanged():
    ab = _book(Test=111)
    with pytest.raises(MalformedRecord):
        ab.synchronize(StaticProvider(["Good,1,", "Bad,xyz,"]))
    assert ab.get_entries() == ["Test"]


# --- Provider Tests ---


def test_in_memory_provider_accumulates_union():
    provider = InMemoryProvider()
    provider.synchronize(["A,1,"])
    provider.synchronize(["B,2,"])
    assert provider.synchronize([]) == ["B,2,", "A,1,"]


def test_yaml_provider_persists():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "store" / "contacts.yaml"

        d1 = _book(Test=111, Test2=222)
        d1.synchronize(YamlFileProvider(path))
        assert path.exists()

        d2 = AddressBook()
        d2.synchronize(YamlFileProvider(path))
        assert d2.get_entries() == ["Test", "Test2"]
        assert d2.get_phone_number("Test2") == 222


def test_yaml_provider_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        provider = YamlFileProvider(Path(tmpdir) / "missing.yaml")
        assert provider.load() == []


def test_yaml_provider_rejects_non_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"not": "a list"}, f)
        with pytest.raises(ValueError):
            YamlFileProvider(path).load()


def test_record_key_non_ascii():
    entry = parse_entry("ßen,1,")
    assert record_key("ßen,1,") == entry.key
    assert merge_records(["Ssen,2,"], ["ßen,1,"]) == ["Ssen,2,"]
