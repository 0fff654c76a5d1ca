"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Annotated, Tuple

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import FormValidationError, SchedulingError
from ..domain.formatting import get_week_days
from ..domain.models import WeeklyAvailability
from ..domain.time_conversion import convert_minutes_to_time_string
from ..domain.availability import WeeklyAvailabilityValidator
from ..adapters.scheduling_client import SchedulingClient
from ..adapters.mock_scheduling_client import MockSchedulingClient
from ..services.confirm_step import ConfirmStep
from ..services.time_intervals import LoggingIntervalsSink, TimeIntervalsService

app = typer.Typer(
    name="callbooking",
    help="Set weekly availability and confirm bookings against the scheduling API",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config = AppConfig.load_or_default(config_file)
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    return config


def _parse_day_option(value: str) -> Tuple[int, str, str]:
    """
    Parse ``WEEKDAY=HH:MM-HH:MM`` (e.g. ``1=08:00-18:00``).
    """
    try:
        day_part, window = value.split("=", 1)
        start_time, end_time = window.split("-", 1)
        week_day = int(day_part)
    except ValueError:
        raise typer.BadParameter(f"Expected WEEKDAY=HH:MM-HH:MM, got {value!r}")
    if week_day not in range(7):
        raise typer.BadParameter(f"Weekday must be between 0 and 6, got {week_day}")
    return week_day, start_time.strip(), end_time.strip()


def _run_interactive_wizard(availability: WeeklyAvailability, week_days: List[str]) -> None:
    """
    Ask for every weekday whether it is available and in which window.
    """
    console.print("[bold]Set the hours you are available on each day of the week.[/bold]\n")
    for interval in list(availability):
        label = week_days[interval.week_day]
        enabled = typer.confirm(f"→ {label}: available?", default=interval.enabled)
        if not enabled:
            availability.update_day(interval.week_day, enabled=False)
            continue
        start_time = typer.prompt("   Start (HH:MM)", default=interval.start_time)
        end_time = typer.prompt("   End (HH:MM)", default=interval.end_time)
        availability.update_day(
            interval.week_day,
            enabled=True,
            start_time=start_time.strip(),
            end_time=end_time.strip(),
        )
    console.print()


def _print_form_errors(error: FormValidationError) -> None:
    for path, message in error.errors.items():
        console.print(f"[bold red]✗ {path}:[/bold red] {message}")


@app.command("time-intervals")
def time_intervals(
    day: Annotated[Optional[List[str]], typer.Option("--day", "-d", help="Enable a weekday with a window, e.g. 1=08:00-18:00 (0=Sunday).")] = None,
    disable: Annotated[Optional[List[int]], typer.Option("--disable", help="Disable a weekday (0=Sunday).")] = None,
    defaults: Annotated[bool, typer.Option("--defaults", help="Submit the default week without prompting.")] = False,
    config_file: ConfigOption = None,
    mock: Annotated[bool, typer.Option("--mock", help="Only log the intervals instead of calling the API.")] = False,
):
    """
    Define the weekly availability.

    Examples:

        # Interactive mode
        callbooking time-intervals

        # Batch mode
        callbooking time-intervals --day 1=09:00-12:00 --disable 5
        callbooking time-intervals --defaults --mock
    """
    try:
        config = _load_config(config_file)
        week_days = get_week_days(config.locale)
        availability = config.availability.build_default_week()

        if day or disable:
            for value in day or []:
                week_day, start_time, end_time = _parse_day_option(value)
                availability.update_day(week_day, enabled=True, start_time=start_time, end_time=end_time)
            for week_day in disable or []:
                availability.update_day(week_day, enabled=False)
        elif not defaults:
            _run_interactive_wizard(availability, week_days)

        if mock:
            sink = LoggingIntervalsSink()
        else:
            sink = SchedulingClient(config.api_base_url, timeout=config.request_timeout_seconds)

        service = TimeIntervalsService(
            sink=sink,
            validator=WeeklyAvailabilityValidator(config.availability.min_interval_minutes),
        )
        intervals = service.submit(availability)

        table = Table(title="Weekly availability", show_header=True, header_style="bold cyan")
        table.add_column("Day", style="bold yellow")
        table.add_column("Start")
        table.add_column("End")
        for interval in intervals:
            table.add_row(
                week_days[interval.week_day],
                convert_minutes_to_time_string(interval.start_time_in_minutes),
                convert_minutes_to_time_string(interval.end_time_in_minutes),
            )
        console.print()
        console.print(table)
        console.print(f"\n[green]✓ {len(intervals)} day(s) saved[/green]\n")

    except FormValidationError as e:
        _print_form_errors(e)
        raise typer.Exit(1)

    except (SchedulingError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def confirm(
    username: Annotated[str, typer.Argument(help="User to book the slot with.")],
    date: Annotated[str, typer.Option("--date", help="Slot start as ISO-8601, e.g. 2024-03-15T14:00")],
    name: Annotated[Optional[str], typer.Option("--name", help="Full name")] = None,
    email: Annotated[Optional[str], typer.Option("--email", help="Email address")] = None,
    observations: Annotated[Optional[str], typer.Option("--observations", help="Notes for the booking")] = None,
    config_file: ConfigOption = None,
    mock: Annotated[bool, typer.Option("--mock", help="Record the request instead of calling the API.")] = False,
):
    """
    Confirm a booking with a user.

    Examples:

        callbooking confirm jane --date 2024-03-15T14:00 --name "John Doe" --email john@example.com
    """
    try:
        config = _load_config(config_file)

        try:
            scheduling_date = pendulum.parse(date, tz=config.timezone)
        except Exception as e:
            console.print(f"[red]Could not parse date: {e}[/red]")
            raise typer.Exit(1)

        # Durations, bare dates and bare times parse too; a booking needs a moment.
        if not isinstance(scheduling_date, pendulum.DateTime):
            console.print(f"[red]Could not parse date: {date!r} is not a date and time[/red]")
            raise typer.Exit(1)

        if mock:
            client = MockSchedulingClient()
            console.print("[yellow]⚠  MOCK MODE: no request is sent[/yellow]\n")
        else:
            client = SchedulingClient(config.api_base_url, timeout=config.request_timeout_seconds)

        completed = []
        step = ConfirmStep(
            client=client,
            username=username,
            scheduling_date=scheduling_date,
            on_complete=lambda: completed.append(True),
            locale=config.locale,
            timezone=config.timezone,
        )

        described_date, described_time = step.describe()
        console.print(Panel.fit(f"📅 {described_date}\n🕑 {described_time}", title=f"Booking with {username}"))

        if name is None:
            name = typer.prompt("→ Full name")
        if email is None:
            email = typer.prompt("→ Email address")

        try:
            asyncio.run(step.confirm(name=name, email=email, observations=observations))
        except SchedulingError:
            if step.failure_notice:
                console.print(f"[bold red]{step.failure_notice}[/bold red]")
            raise

        if completed:
            console.print("\n[green]✓ Booking confirmed[/green]\n")

    except FormValidationError as e:
        _print_form_errors(e)
        raise typer.Exit(1)

    except (SchedulingError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]callbooking[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
