"""CLI commands using Typer."""

from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from registration_e2e.browser import browser_session
from registration_e2e.config import get_settings
from registration_e2e.data_generator import DataGenerator
from registration_e2e.logging_config import configure_logging
from registration_e2e.scenario import RegistrationScenario

app = typer.Typer(
    name="registration-e2e",
    help="ParaBank registration end-to-end check",
    add_completion=False,
)

console = Console()


@app.command()
def run(
    headless: Annotated[
        bool,
        typer.Option(
            "--headless/--headed", envvar="REGISTRATION_HEADLESS", help="Run without a window"
        ),
    ] = False,
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Faker seed")] = None,
    url: Annotated[str | None, typer.Option("--url", help="Registration page URL")] = None,
):
    """
    Register one generated user and report whether it worked.

    Example:
        registration-e2e run --headless --seed 42
    """
    updates: dict[str, object] = {"headless": headless}
    if url:
        updates["registration_url"] = url
    settings = get_settings().model_copy(update=updates)

    configure_logging(settings.log_level)
    generator = DataGenerator(locale=settings.faker_locale, seed=seed)

    console.print(
        Panel(
            f"[bold]Registering at:[/bold] {settings.registration_url}\n"
            f"[dim]Browser:[/dim] {settings.browser_channel or 'chromium'}"
            f" ({'headless' if settings.headless else 'headed'})",
            title="Registration E2E",
        )
    )

    with browser_session(settings) as page:
        outcome = RegistrationScenario(page, settings=settings, generator=generator).run()

    if outcome.success:
        console.print(
            Panel(f"[bold green]Registered '{outcome.username}'[/bold green]")
        )
        return

    console.print(Panel("[bold red]Registration failed[/bold red]"))
    console.print(f"[dim]URL:[/dim] {outcome.current_url}")
    console.print(f"[dim]Title:[/dim] {outcome.page_title}")
    for error in outcome.validation_errors:
        console.print(f"  [yellow]-[/yellow] {error}")
    raise typer.Exit(1)


@app.command()
def generate(
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Records to generate")] = 1,
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Faker seed")] = None,
):
    """
    Print generated user records without opening a browser.
    """
    generator = DataGenerator(locale=get_settings().faker_locale, seed=seed)

    table = Table(title="Generated Test Data")
    records = [generator.generate() for _ in range(count)]
    for label, _ in records[0].as_report_rows():
        table.add_column(label)
    for record in records:
        table.add_row(*(value for _, value in record.as_report_rows()))

    console.print(table)


if __name__ == "__main__":
    app()
