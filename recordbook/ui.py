from typing import List

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .entities import JournalEntry, Person
from .scope import Scope


def ok(msg): return f"[green]✔ {escape(msg)}[/]"


def error(msg): return f"[red]{escape(msg)}[/]"


def _tags(tags) -> str:
    return ", ".join(t.value for t in sorted(tags)) or "—"


def _panel_body(person: Person) -> str:
    return (
        f"[b]📞[/b] {person.phone.value or '—'}\n"
        f"[b]📧[/b] {escape(person.email.value) or '—'}\n"
        f"[b]📍[/b] {escape(person.address.value) or '—'}\n"
        f"[b]🏷[/b] {_tags(person.tags)}"
    )


def show_persons(console: Console, persons: List[Person]):
    if not persons:
        console.print("[dim]No contacts.[/]")
        return
    console.print(Columns(
        [Panel(_panel_body(p), title=f"{i}. {p.name.value}", border_style="cyan")
         for i, p in enumerate(persons, 1)],
        equal=True, expand=True))


def show_entries(console: Console, entries: List[JournalEntry]):
    if not entries:
        console.print("[dim]No journal entries.[/]")
        return

    table = Table(show_header=True, header_style="bold blue", box=None, expand=True)
    table.add_column("#", justify="right", style="bold cyan", no_wrap=True)
    table.add_column("Date", style="bright_cyan", no_wrap=True)
    table.add_column("Title", style="bold white")
    table.add_column("Contacts", style="orchid")
    table.add_column("Tags", style="green")
    table.add_column("Description", style="white")

    for i, e in enumerate(entries, 1):
        contacts = ", ".join(p.name.value for p in e.contacts) or "—"
        table.add_row(str(i), str(e.date), e.title.value, contacts, _tags(e.tags),
                      escape(str(e.description)) or "—")
    console.print(table)


def show_listing(console: Console, book, scope: Scope):
    if scope is Scope.CONTACTS:
        show_persons(console, book.visible_persons())
    else:
        show_entries(console, book.visible_entries())


def show_help(console: Console, usages: List[str]):
    table = Table(title="\n📘 Commands", header_style="bold blue", style="bold bright_cyan")
    table.add_column("Command", justify="center", style="bold deep_sky_blue1", no_wrap=True)
    table.add_column("Usage", style="white")

    for usage in usages:
        head, _, rest = usage.partition(":")
        table.add_row(f"[green]{escape(head)}[/green]", escape(rest.strip()))
    console.print(table)
