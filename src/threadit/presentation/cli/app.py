"""Threadit CLI application using Typer.

Command-line utilities for the Threadit backend: secret generation for
deployment configuration and database schema management.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from threadit.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
    drop_tables,
)
from threadit_config.settings import get_settings

app = typer.Typer(
    name="threadit",
    help="Threadit backend CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Threadit configuration.

    Generates two required secrets:
    - SESSION_SECRET: Key for signing the session cookie
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Threadit Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    session_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]SESSION_SECRET[/cyan]={session_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


def _database_display(database_url: str) -> str:
    # Hide credentials
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _run_schema_operation(drop: bool) -> None:
    engine = create_engine(get_settings().database_url)
    try:
        if drop:
            await drop_tables(engine)
        else:
            await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create all missing database tables (idempotent)."""
    console.print(f"Database: {_database_display(get_settings().database_url)}")
    asyncio.run(_run_schema_operation(drop=False))
    console.print("[green]Database initialized.[/green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation"),
) -> None:
    """Drop all database tables. Deletes all data."""
    console.print(f"Database: {_database_display(get_settings().database_url)}")
    if not yes:
        console.print("[bold red]WARNING: This will DELETE ALL DATA![/bold red]")
        if not typer.confirm("Continue?", default=False):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_run_schema_operation(drop=True))
    console.print("[green]Database tables dropped.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
