"""Config command - Configuration management."""

import typer
from rich.console import Console
from rich.table import Table

from todolist.application.profile_loader import ProfileLoader
from todolist.core.domain.config_schema import ConfigValidationError

app = typer.Typer(help="Configuration management")
console = Console()


@app.command("list")
def list_profiles():
    """List available configuration profiles."""
    profiles = ProfileLoader().list_profiles()

    if not profiles:
        console.print("[yellow]No configuration profiles found[/yellow]")
        return

    table = Table(title="Configuration Profiles")
    table.add_column("Profile", style="cyan")

    for profile_name in profiles:
        table.add_row(profile_name)

    console.print(table)


@app.command("show")
def show_profile(profile: str = typer.Argument(..., help="Profile name")):
    """Show the resolved configuration of a profile."""
    try:
        config = ProfileLoader().load(profile)
    except FileNotFoundError as exc:
        console.print(f"[red]Profile not found: {profile}[/red]")
        raise typer.Exit(1) from exc
    except ConfigValidationError as exc:
        console.print(f"[red]Invalid profile:[/red] {exc}")
        raise typer.Exit(1) from exc

    console.print(f"\n[bold]Profile:[/bold] {profile}\n")
    console.print_json(data=config.model_dump())
