"""Address book CLI - manage contacts from the terminal and run the web app."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import settings
from .errors import InvalidContact, InvalidId
from .schemas.contact import ContactCreate
from .wiring import build_store

app = typer.Typer(
    name="addressbook",
    help="Address book - add, list, show and delete contacts",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


async def _run(operation):
    store, engine = await build_store(settings)
    try:
        return await operation(store)
    finally:
        if engine is not None:
            await engine.dispose()


def _format_birthday(contact) -> str:
    return contact.birthday.strftime(settings.birthday_format) if contact.birthday else ""


@app.command("add")
def add_contact(
    first_name: str = typer.Argument(..., help="First name (required)"),
    surname: Optional[str] = typer.Option(None, "--surname", "-s"),
    birthday: Optional[str] = typer.Option(None, "--birthday", "-b", help="Date, e.g. 08/01/1974"),
    phone: Optional[str] = typer.Option(None, "--phone", "-p"),
):
    """Add a contact and print its id."""
    parsed_birthday = None
    if birthday:
        try:
            parsed_birthday = datetime.strptime(birthday, settings.birthday_format).date()
        except ValueError:
            console.print(f"[red]Invalid birthday {birthday!r}, expected {settings.birthday_format}[/red]")
            raise typer.Exit(1)

    contact = ContactCreate(
        first_name=first_name, surname=surname, birthday=parsed_birthday, phone=phone
    )
    try:
        contact_id = asyncio.run(_run(lambda store: store.add_contact(contact)))
    except InvalidContact as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Added contact[/green] {contact_id}")


@app.command("list")
def list_contacts():
    """List every contact."""
    contacts = asyncio.run(_run(lambda store: store.get_all()))

    table = Table(title=f"Contacts ({len(contacts)})")
    table.add_column("ID", style="dim")
    table.add_column("First name", style="cyan")
    table.add_column("Surname", style="cyan")
    table.add_column("Birthday")
    table.add_column("Phone")
    for c in contacts:
        table.add_row(c.id, c.first_name, c.surname or "", _format_birthday(c), c.phone or "")
    console.print(table)


@app.command("show")
def show_contact(contact_id: str = typer.Argument(...)):
    """Show one contact."""
    try:
        contact = asyncio.run(_run(lambda store: store.get_contact(contact_id)))
    except InvalidId as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[bold]{contact.full_name}[/bold]\n\n"
            f"Birthday: {_format_birthday(contact) or '-'}\n"
            f"Phone:    {contact.phone or '-'}",
            title=f"Contact {contact.id}",
        )
    )


@app.command("delete")
def delete_contact(contact_id: str = typer.Argument(...)):
    """Delete a contact. Unknown ids are not an error."""
    removed = asyncio.run(_run(lambda store: store.delete_contact(contact_id)))
    if removed:
        console.print(f"[green]Deleted contact[/green] {contact_id}")
    else:
        console.print(f"[yellow]No contact {contact_id}, nothing to delete[/yellow]")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
):
    """Run the web application."""
    import uvicorn

    uvicorn.run("addressbook.app:app", host=host, port=port)


if __name__ == "__main__":
    app()
