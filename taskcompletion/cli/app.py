"""
Main CLI application using Typer.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Annotated

import pendulum
import typer
from pendulum import DateTime
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import TaskCompletionError
from ..domain.models import CompletionResult
from ..services.completion_service import CompletionService

app = typer.Typer(
    name="taskcompletion",
    help="Estimate when a task is completed given working hours and leave days",
    add_completion=False
)

console = Console()

START_FORMATS = ("YYYY-MM-DD HH:mm:ss", "YYYY-MM-DD HH:mm", "YYYY-MM-DD")
DATE_FORMAT = "YYYY-MM-DD"


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True
    )


def _parse_start(value: str) -> DateTime:
    """
    Parse the start instant. Seconds, minutes and the time are optional.

    Raises:
        ValueError: If no supported format matches
    """
    for fmt in START_FORMATS:
        try:
            return pendulum.from_format(value.strip(), fmt).naive()
        except ValueError:
            continue
    raise ValueError(
        f"Could not parse start '{value}'. Use YYYY-MM-DD HH:mm:ss"
    )


def _parse_leave_dates(values: List[str]) -> List[date]:
    """Parse YYYY-MM-DD strings into dates."""
    leaves: List[date] = []
    for value in values:
        try:
            leaves.append(pendulum.from_format(value.strip(), DATE_FORMAT).date())
        except ValueError as e:
            raise ValueError(f"Could not parse leave date '{value}': {e}") from e
    return leaves


def _run_interactive_wizard(config: AppConfig, console: Console) -> dict:
    """
    Run the interactive wizard to gather the task parameters from the user.

    Args:
        config: Application configuration, used for the prompt defaults
        console: Rich console for output

    Returns:
        Dictionary with keys: start, required_hours, working_hour_start,
        working_hour_end, leaves
    """
    # 1. START
    console.print("[bold]1️⃣  Task start[/bold]")
    default_start = pendulum.now().naive().format("YYYY-MM-DD HH:mm:ss")
    start = _parse_start(typer.prompt("→ Start (YYYY-MM-DD HH:mm:ss)", default=default_start))

    # 2. DURATION
    console.print("\n[bold]2️⃣  Time required[/bold]")
    required_hours = typer.prompt(
        "→ Time required for the task (in hours)",
        default=config.defaults.required_hours,
        type=int
    )

    # 3. WORKING HOURS
    console.print("\n[bold]3️⃣  Working hours[/bold]")
    working_hour_start = typer.prompt(
        "→ Start of the working hours (HH AM/PM)",
        default=config.defaults.working_hour_start
    )
    working_hour_end = typer.prompt(
        "→ End of the working hours (HH AM/PM)",
        default=config.defaults.working_hour_end
    )

    # 4. LEAVES
    console.print("\n[bold]4️⃣  Leave days[/bold]")
    leave_input = typer.prompt(
        "→ Leave dates (YYYY-MM-DD separated by spaces)",
        default=" ".join(d.isoformat() for d in config.leaves)
    )

    console.print("\n" + "="*60 + "\n")

    return {
        "start": start,
        "required_hours": required_hours,
        "working_hour_start": working_hour_start,
        "working_hour_end": working_hour_end,
        "leaves": _parse_leave_dates(leave_input.split())
    }


def _print_explanation(result: CompletionResult) -> None:
    table = Table(
        title="Simulated days",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Date", style="bold")
    table.add_column("Hours worked", justify="right")
    table.add_column("Note", style="dim")

    for work_day in result.days:
        table.add_row(
            work_day.day.isoformat(),
            str(work_day.hours_worked),
            "leave" if work_day.on_leave else ""
        )

    console.print(table)


@app.command()
def calculate(
    start: Annotated[Optional[str], typer.Option("--start", help="Task start (YYYY-MM-DD HH:mm:ss). Defaults to now.")] = None,
    hours: Annotated[Optional[int], typer.Option("--hours", "-H", help="Working hours the task requires")] = None,
    working_hour_start: Annotated[Optional[str], typer.Option("--from", help="Start of the working hours (HH AM/PM)")] = None,
    working_hour_end: Annotated[Optional[str], typer.Option("--to", help="End of the working hours (HH AM/PM)")] = None,
    leave: Annotated[Optional[List[str]], typer.Option("--leave", "-l", help="Leave date (YYYY-MM-DD), repeatable")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    explain: Annotated[bool, typer.Option("--explain", help="Show the simulated days.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Calculate the completion date and time of a task - Supports Interactive and Batch mode.

    Examples:

        # Interactive mode
        taskcompletion calculate

        # Batch mode
        taskcompletion calculate --start "2022-12-17 22:00:00" --hours 18 --from "11 PM" --to "07 AM" --leave 2022-12-19

        # Show every simulated day
        taskcompletion calculate --hours 40 --explain
    """
    try:
        config = load_config(config_file)
        _configure_logging(logging.DEBUG if verbose else config.get_log_level())

        # Show header
        console.print("\n" + "="*60)
        console.print("[bold cyan]⏱️  Task Completion Calculator[/bold cyan]")
        console.print("="*60 + "\n")

        required_hours = hours if hours is not None else config.defaults.required_hours

        if required_hours is not None:
            params = {
                "start": _parse_start(start) if start else pendulum.now().naive().set(microsecond=0),
                "required_hours": required_hours,
                "working_hour_start": working_hour_start or config.defaults.working_hour_start,
                "working_hour_end": working_hour_end or config.defaults.working_hour_end,
                "leaves": config.leaves + _parse_leave_dates(leave or [])
            }
        else:
            params = _run_interactive_wizard(config, console)

        service = CompletionService()
        result = service.calculate(**params)

        # Display summary
        console.print("[bold cyan]📊 Summary:[/bold cyan]")
        console.print(f"   Start: {result.started_at.format('DD/MM/YYYY HH:mm:ss')}")
        console.print(f"   Time required: {result.required_hours} hour(s)")
        console.print(f"   Working hours: {result.window}")
        console.print(f"   Leave days skipped: {result.leave_days_skipped}")
        console.print()

        if explain and result.days:
            _print_explanation(result)
            console.print()

        console.print(f"[bold green]{result.format_display()}[/bold green]")
        console.print()

    except (FileNotFoundError, TaskCompletionError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def show_config(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    Show the configured defaults and leave days.
    """
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Setting", style="bold yellow")
    table.add_column("Value")

    required = config.defaults.required_hours
    window = config.defaults.get_working_window()
    table.add_row(
        "Working hours",
        f"{config.defaults.working_hour_start} - {config.defaults.working_hour_end} ({window})"
    )
    table.add_row("Time required", "ask" if required is None else f"{required} hour(s)")
    table.add_row("Log level", config.log_level)
    table.add_row(
        "Leave days",
        ", ".join(d.isoformat() for d in config.leave_set().sorted_dates()) or "none"
    )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]taskcompletion[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
