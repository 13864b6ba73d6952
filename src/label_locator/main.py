"""
Label Locator - CLI Entry Point.

Configuration Priority:
    1. CLI arguments (--engine, --visible, etc.)
    2. Environment variables (LABEL_LOCATOR__BROWSER__ENGINE, etc.)
    3. Config file (label-locator.yaml)

Usage:
    label-locator resolve https://example.com/form "First Name"
    label-locator check form.html "State" --kind select
    label-locator practice-form --visible
"""

from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from label_locator.browsers import HtmlDocument, open_session
from label_locator.config import Settings, get_settings
from label_locator.engine import ControlKind, LabelResolver, Resolution, SelectControl
from label_locator.exceptions import LabelLocatorError
from label_locator.scenarios import ScenarioResult, run_practice_form
from label_locator.utils.logging import setup_logging

app = typer.Typer(
    name="label-locator",
    help="Find form controls by the text of their labels",
    add_completion=False,
)

console = Console()


def _settings_with(
    engine: Optional[str] = None,
    visible: bool = False,
    strict: Optional[bool] = None,
) -> Settings:
    """Global settings with CLI overrides applied."""
    settings = get_settings()
    overrides: Dict[str, Any] = {"browser": {}, "resolver": {}}
    if engine:
        overrides["browser"]["engine"] = engine
    if visible:
        overrides["browser"]["headless"] = False
    if strict is not None:
        overrides["resolver"]["verify_category"] = strict
    return settings.merge_with(overrides)


def _configure_logging(settings: Settings, verbose: bool) -> None:
    """Log at the configured level; --verbose or debug mode forces DEBUG."""
    level = "DEBUG" if verbose or settings.debug else settings.logging.level
    setup_logging(level, settings.logging.file)


def _print_resolution(resolution: Resolution) -> None:
    table = Table(show_header=False, box=None)
    table.add_row("[bold]label[/bold]", resolution.label)
    table.add_row("[bold]kind[/bold]", resolution.kind.value)
    table.add_row("[bold]strategy[/bold]", resolution.strategy)
    table.add_row("[bold]element[/bold]", resolution.element.describe())
    if isinstance(resolution.control, SelectControl):
        table.add_row("[bold]select[/bold]", resolution.control.kind)
        options = resolution.control.options
        shown = ", ".join(options[:10]) + (f" ... (+{len(options) - 10})" if len(options) > 10 else "")
        table.add_row("[bold]options[/bold]", shown or "[dim]none yet[/dim]")
    console.print(table)


def _print_scenarios(results: List[ScenarioResult]) -> None:
    table = Table(title="Practice form")
    table.add_column("Scenario")
    table.add_column("Label")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Result")
    for result in results:
        outcome = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        actual = result.error if result.error else repr(result.actual)
        table.add_row(result.name, result.label, repr(result.expected), actual, outcome)
    console.print(table)


@app.command()
def resolve(
    url: str = typer.Argument(..., help="Page to open"),
    label: str = typer.Argument(..., help="Label text of the control"),
    kind: ControlKind = typer.Option(ControlKind.INPUT, "--kind", "-k", help="Control category"),
    engine: Optional[str] = typer.Option(None, "--engine", "-e", help="Browser engine: playwright, selenium"),
    visible: bool = typer.Option(False, "--visible", "-v", help="Run with visible browser"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Verify the category of label[for] targets"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """
    Open a page in a browser and resolve one control by its label.
    """
    settings = _settings_with(engine, visible, strict)
    _configure_logging(settings, verbose)

    try:
        with open_session(settings) as session:
            document = session.open(url)
            resolver = LabelResolver(document, verify_category=settings.resolver.verify_category)
            _print_resolution(resolver.resolve(label, kind))
    except LabelLocatorError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)


@app.command()
def check(
    file: str = typer.Argument(..., help="HTML file to resolve in"),
    label: str = typer.Argument(..., help="Label text of the control"),
    kind: ControlKind = typer.Option(ControlKind.INPUT, "--kind", "-k", help="Control category"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Verify the category of label[for] targets"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """
    Resolve one control by its label in a local HTML file, without a browser.
    """
    settings = _settings_with(strict=strict)
    _configure_logging(settings, verbose)

    try:
        document = HtmlDocument.from_file(file)
        resolver = LabelResolver(document, verify_category=settings.resolver.verify_category)
        _print_resolution(resolver.resolve(label, kind))
    except LabelLocatorError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)


@app.command("practice-form")
def practice_form(
    url: Optional[str] = typer.Argument(None, help="Form URL (default: from config)"),
    engine: Optional[str] = typer.Option(None, "--engine", "-e", help="Browser engine: playwright, selenium"),
    visible: bool = typer.Option(False, "--visible", "-v", help="Run with visible browser"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """
    Fill the automation practice form: first name, gender and state.
    """
    settings = _settings_with(engine, visible)
    _configure_logging(settings, verbose)
    target = url or settings.browser.base_url

    try:
        with open_session(settings) as session:
            document = session.open(target)
            resolver = LabelResolver(document, verify_category=settings.resolver.verify_category)
            results = run_practice_form(
                resolver,
                options_timeout_s=settings.resolver.options_timeout_s,
                poll_interval_s=settings.resolver.poll_interval_s,
            )
    except LabelLocatorError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    _print_scenarios(results)
    if not all(result.passed for result in results):
        raise typer.Exit(1)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
