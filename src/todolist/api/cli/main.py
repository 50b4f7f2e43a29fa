"""todolist CLI entry point."""

import logging
import os

import structlog
import typer
from rich.console import Console

from todolist.api.cli.commands import config, todos

app = typer.Typer(
    name="todolist",
    help="todolist - a single ordered task list",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.command("init")(todos.init)
app.command("add")(todos.add)
app.command("toggle")(todos.toggle)
app.command("remove")(todos.remove)
app.command("list")(todos.list_tasks)
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main(
    ctx: typer.Context,
    profile: str = typer.Option(
        "dev", "--profile", "-p", envvar="TODOLIST_PROFILE", help="Configuration profile"
    ),
    work_dir: str | None = typer.Option(
        None,
        "--work-dir",
        "-w",
        envvar="TODOLIST_WORK_DIR",
        help="Override the directory holding the task list",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """todolist CLI."""
    from todolist.application.factory import TodoFactory
    from todolist.core.domain.config_schema import ConfigValidationError

    factory = TodoFactory()
    try:
        settings = factory.load_config(profile, work_dir)
    except ConfigValidationError as exc:
        console.print(f"[red]Invalid profile:[/red] {exc}")
        raise typer.Exit(1) from exc

    level_name = "DEBUG" if debug else os.getenv("LOGLEVEL", settings.logging.level)
    log_level = logging.getLevelName(level_name.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    ctx.obj = {
        "profile": profile,
        "work_dir": work_dir,
        "debug": debug,
        "factory": factory,
        "settings": settings,
    }


@app.command()
def serve(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", "--host", envvar="TODOLIST_HOST"),
    port: int = typer.Option(8030, "--port", envvar="TODOLIST_PORT"),
):
    """Start the HTTP API server."""
    import uvicorn

    global_opts = ctx.obj or {}
    os.environ["TODOLIST_PROFILE"] = global_opts.get("profile", "dev")
    if global_opts.get("work_dir"):
        os.environ["TODOLIST_WORK_DIR"] = global_opts["work_dir"]

    console.print(f"Starting todolist API on http://{host}:{port}")
    console.print(f"API docs: http://{host}:{port}/docs\n")
    uvicorn.run(
        "todolist.api.server:app",
        host=host,
        port=port,
        log_level="debug" if global_opts.get("debug") else "info",
    )


@app.command()
def version():
    """Show todolist version."""
    from todolist import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
