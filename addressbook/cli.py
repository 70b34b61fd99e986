"""Address book CLI — inspect and edit a file-backed contact store."""

import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from addressbook import __version__
from addressbook.config import load_config
from addressbook.directory.address_book import AddressBook
from addressbook.errors import AddressBookError
from addressbook.models.entry import Birthday
from addressbook.sync.codec import serialize_entries
from addressbook.sync.provider import InMemoryProvider, YamlFileProvider

console = Console()

# Library errors plus unreadable or non-list store files.
STORE_ERRORS = (AddressBookError, ValueError, yaml.YAMLError)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    envvar="ADDRESSBOOK_CONFIG",
    default=None,
    help="YAML config file",
)
@click.option("--store", "-s", default=None, help="Contact store file (overrides config)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, store: str | None, verbose: bool):
    """Address book — a contact directory synchronized with a YAML store.

    Every command loads the store into a fresh address book. Commands that
    change a contact write the result back; list and show only read.
    """
    config = load_config(config_path)
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    ctx.obj = YamlFileProvider(store or config.store_path)


def _open_book(store: YamlFileProvider) -> AddressBook:
    """Load the store into a fresh book without writing to it."""
    book = AddressBook()
    book.synchronize(InMemoryProvider(store.load()))
    return book


def _fail(error: Exception):
    console.print(f"[red]Error:[/] {error}")
    sys.exit(1)


# ── Entries ──────────────────────────────────────────────────────────


@main.command()
@click.argument("name")
@click.pass_obj
def add(store: YamlFileProvider, name: str):
    """Add a contact."""
    try:
        book = _open_book(store)
        entry = book.add_entry(name)
        store.save(serialize_entries(book))
    except STORE_ERRORS as e:
        _fail(e)
    console.print(f"  Added: [cyan]{entry.name}[/]")


@main.command()
@click.argument("name")
@click.pass_obj
def remove(store: YamlFileProvider, name: str):
    """Remove a contact (no-op if absent)."""
    try:
        book = _open_book(store)
        book.remove_entry(name)
        store.save(serialize_entries(book))
    except STORE_ERRORS as e:
        _fail(e)
    console.print(f"  Removed: {name}")


@main.command(name="list")
@click.pass_obj
def list_entries(store: YamlFileProvider):
    """List all contacts alphabetically."""
    try:
        book = _open_book(store)
    except STORE_ERRORS as e:
        _fail(e)
    names = book.get_entries()

    if not names:
        console.print("[yellow]Address book is empty.[/]")
        return

    table = Table(title=f"Address Book ({len(names)} contacts)")
    table.add_column("Name", style="cyan")
    table.add_column("Phone", justify="right")
    table.add_column("Birthday", justify="center")

    for name in names:
        phone = book.get_phone_number(name)
        birthday = book.get_birthday(name)
        table.add_row(
            name,
            "" if phone is None else str(phone),
            "" if birthday is None else str(birthday),
        )

    console.print(table)


@main.command()
@click.argument("name")
@click.pass_obj
def show(store: YamlFileProvider, name: str):
    """Show a single contact."""
    try:
        entry = _open_book(store).get_entry(name)
    except STORE_ERRORS as e:
        _fail(e)

    console.print(f"[cyan]{entry.name}[/]")
    console.print(f"  Phone:    {entry.phone_number if entry.phone_number is not None else '-'}")
    console.print(f"  Birthday: {entry.birthday if entry.birthday is not None else '-'}")


@main.command(name="set-phone")
@click.argument("name")
@click.argument("number", type=int)
@click.pass_obj
def set_phone(store: YamlFileProvider, name: str, number: int):
    """Set a contact's phone number."""
    try:
        book = _open_book(store)
        book.set_phone_number(name, number)
        store.save(serialize_entries(book))
    except STORE_ERRORS as e:
        _fail(e)
    console.print(f"  [green]v[/] Phone number updated for {name}")


@main.command(name="set-birthday")
@click.argument("name")
@click.argument("month_day")
@click.pass_obj
def set_birthday(store: YamlFileProvider, name: str, month_day: str):
    """Set a contact's birthday, given as MM-DD."""
    try:
        book = _open_book(store)
        book.set_birthday(name, Birthday.parse(month_day))
        store.save(serialize_entries(book))
    except STORE_ERRORS as e:
        _fail(e)
    console.print(f"  [green]v[/] Birthday updated for {name}")


# ── Sync ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("other_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def sync(store: YamlFileProvider, other_file: str):
    """Merge another store file into this one.

    Contacts already in this store win over same-named contacts from
    OTHER_FILE. OTHER_FILE itself is left untouched.
    """
    try:
        book = _open_book(store)
        before = len(book)
        remote = YamlFileProvider(other_file).load()
        book.synchronize(InMemoryProvider(remote))
        store.save(serialize_entries(book))
    except STORE_ERRORS as e:
        _fail(e)
    console.print(f"  Merged {len(book) - before} new contact(s) from {other_file}")


if __name__ == "__main__":
    main()
