"""Task commands - init, add, toggle, remove, list."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from todolist.application.contract import TodoContract
from todolist.application.factory import TodoFactory
from todolist.core.domain.errors import TodoListError
from todolist.core.domain.messages import ExecuteMsg, QueryMsg

console = Console()


def _contract(ctx: typer.Context) -> TodoContract:
    global_opts = ctx.obj or {}
    factory: TodoFactory = global_opts.get("factory") or TodoFactory()
    settings = global_opts.get("settings")
    if settings is None:
        settings = factory.load_config(
            global_opts.get("profile", "dev"), global_opts.get("work_dir")
        )
    return factory.create_contract_from_config(settings)


def _fail(error: TodoListError) -> typer.Exit:
    console.print(f"[red]Error ({error.code}):[/red] {error.message}")
    return typer.Exit(1)


def init(ctx: typer.Context):
    """Create an empty task list (replaces any existing one)."""
    contract = _contract(ctx)
    try:
        contract.instantiate()
    except TodoListError as e:
        raise _fail(e) from e
    console.print("[green]Initialized empty task list[/green]")


def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task title"),
):
    """Append a task to the end of the list."""
    contract = _contract(ctx)
    try:
        contract.execute(ExecuteMsg.add_task(title))
    except TodoListError as e:
        raise _fail(e) from e
    task_id = len(contract.list_tasks())
    console.print(f"[green]Added task {task_id}:[/green] {escape(title)}")


def toggle(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID (1-based position)"),
):
    """Flip the done flag of a task."""
    contract = _contract(ctx)
    try:
        contract.execute({"update": {"id": task_id}})
        task = contract.list_tasks()[task_id - 1]
    except TodoListError as e:
        raise _fail(e) from e
    state = "done" if task.done else "open"
    console.print(f"[green]Task {task_id} is now {state}[/green]")


def remove(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID (1-based position)"),
):
    """Delete a task. Tasks after it move up one position."""
    contract = _contract(ctx)
    try:
        contract.execute({"remove": {"id": task_id}})
    except TodoListError as e:
        raise _fail(e) from e
    console.print(f"[green]Removed task {task_id}[/green]")


def list_tasks(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the raw query result"),
):
    """List all tasks in order."""
    contract = _contract(ctx)
    try:
        tasks = contract.query(QueryMsg.list_tasks())
    except TodoListError as e:
        raise _fail(e) from e

    if as_json:
        console.print_json(data=tasks)
        return

    if not tasks:
        console.print("[yellow]No tasks[/yellow]")
        return

    table = Table(title="Tasks")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Done", style="green")
    table.add_column("Title", style="white")
    table.add_column("Created", style="dim", justify="right")
    table.add_column("Updated", style="dim", justify="right")

    for task_id, task in enumerate(tasks, start=1):
        updated = task.get("updated_block")
        table.add_row(
            str(task_id),
            "x" if task["is_done"] else "",
            escape(task["title"]),
            str(task["created_block"]),
            "" if updated is None else str(updated),
        )

    console.print(table)
