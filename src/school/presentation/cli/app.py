"""School CLI application using Typer.

This module provides command-line utilities for the school backend:
secret generation for deployment configuration and database management.
"""

import logging
import secrets
import sys

import typer
from rich.console import Console

from school.infrastructure.persistence.sqlalchemy.init_db import (
    db_init,
    db_reset,
    db_seed,
    display_database_url,
)
from school.infrastructure.persistence.sqlalchemy.seed import DEFAULT_SEED_PASSWORD

app = typer.Typer(
    name="school",
    help="School Management backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
) -> None:
    """School Management backend CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a secure JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]School Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def init_database() -> None:
    """Create all missing database tables."""
    db_init()
    console.print("[green]Database initialized[/green]")


@db_app.command("reset")
def reset_database(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all database tables (DELETES ALL DATA)."""
    console.print(f"Database: {display_database_url()}\n")

    if not force:
        console.print("[bold red]WARNING: This will DELETE ALL DATA![/bold red]\n")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    db_reset()
    console.print("[green]Database recreated[/green]")


@db_app.command("seed")
def seed_database() -> None:
    """Insert development data (teachers, students and courses)."""
    if db_seed():
        console.print("[green]Development data inserted[/green]")
        console.print(
            f"[dim]All seeded users log in with password "
            f"'{DEFAULT_SEED_PASSWORD}'.[/dim]"
        )
    else:
        console.print(
            "[yellow]Database already contains users, nothing seeded[/yellow]"
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
