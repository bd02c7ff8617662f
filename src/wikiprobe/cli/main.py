"""Command-line interface for wikiprobe."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wikiprobe import __version__
from wikiprobe.clients.mediawiki import MediaWikiClient
from wikiprobe.config import load_config
from wikiprobe.core.comparison import compare_sections
from wikiprobe.core.diff import compare_texts, format_diff_results
from wikiprobe.core.normalizer import compute_statistics, normalize
from wikiprobe.exceptions import ConfigurationError, MediaWikiError
from wikiprobe.models.config import HarnessConfig
from wikiprobe.reporting.console import ConsoleReporter
from wikiprobe.scenarios import ScenarioRegistry, SuiteRunner
from wikiprobe.utils.logging import configure_logging, shutdown_logging

console = Console()


def _load(config_path: Optional[str]) -> HarnessConfig:
    """Load configuration, falling back to defaults when no file exists."""
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        if config_path or "not found" not in str(e):
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(2)
        return HarnessConfig()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wikiprobe")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """wikiprobe - Wikipedia UI and MediaWiki API consistency checks."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="normalize")
@click.argument("text", required=False)
@click.option("-f", "--file", "file_path", type=click.Path(exists=True, dir_okay=False),
              help="Read text from a file")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def normalize_cmd(text: Optional[str], file_path: Optional[str], as_json: bool) -> None:
    """Normalize TEXT (or stdin) and count its unique words.

    Examples:

        wikiprobe normalize "Debugging features are <b>great</b>!!"

        cat section.html | wikiprobe normalize
    """
    if file_path:
        raw = Path(file_path).read_text(encoding="utf-8")
    elif text is not None and text != "-":
        raw = text
    else:
        raw = click.get_text_stream("stdin").read()

    normalized = normalize(raw)
    stats = compute_statistics(normalized)
    unique_words = stats["unique_word_count"]

    if as_json:
        click.echo(json.dumps({
            "normalized": normalized,
            "unique_words": unique_words,
            "char_count": stats["char_count"],
            "word_count": stats["word_count"],
        }))
    else:
        click.echo(normalized)
        console.print(f"[grey50]Unique words: {unique_words}[/grey50]", highlight=False)


@cli.command()
@click.argument("ui_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("api_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--lines", is_flag=True, help="Line diff of the raw texts instead of a word diff")
def compare(ui_file: str, api_file: str, lines: bool) -> None:
    """Compare two extractions of the same section.

    Exits with status 1 when the unique word counts differ.

    Example:

        wikiprobe compare ui.txt api.html
    """
    ui_text = Path(ui_file).read_text(encoding="utf-8")
    api_text = Path(api_file).read_text(encoding="utf-8")
    result = compare_sections(ui_text, api_text)

    table = Table(title="Unique Words")
    table.add_column("Source", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row(Path(ui_file).name, str(result.ui_unique_words))
    table.add_row(Path(api_file).name, str(result.api_unique_words))
    console.print(table)

    if result.matched:
        console.print(f"[green]OK[/green] Unique word counts match: {result.ui_unique_words}")
        return

    diff = compare_texts(ui_text, api_text) if lines else result.diff
    if diff is not None:
        click.echo(format_diff_results(diff))
    console.print(
        f"[red]FAIL[/red] Unique word count mismatch: "
        f"{result.ui_unique_words} vs {result.api_unique_words}"
    )
    sys.exit(1)


@cli.command()
@click.argument("page_title")
@click.argument("section_title")
@click.option("-c", "--config", "config_path", type=click.Path(), help="Path to appsettings.json")
@click.option("--normalize/--raw", "do_normalize", default=False, help="Normalize the section text")
def section(page_title: str, section_title: str, config_path: Optional[str], do_normalize: bool) -> None:
    """Fetch a page section through the MediaWiki API.

    Example:

        wikiprobe section "Playwright_(software)" "Debugging features" --normalize
    """
    config = _load(config_path)

    try:
        with console.status(f"Fetching '{section_title}'..."):
            with MediaWikiClient(config.media_wiki) as client:
                content = client.get_page_section(page_title, section_title)
    except MediaWikiError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(normalize(content) if do_normalize else content)


@cli.command()
def scenarios() -> None:
    """List available scenarios."""
    table = Table(title="Scenarios")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Browser", style="yellow")
    table.add_column("Description", style="green")

    for scenario in ScenarioRegistry.list_scenarios():
        table.add_row(
            scenario.name,
            "yes" if scenario.requires_browser else "no",
            scenario.description,
        )

    console.print(table)


@cli.command()
@click.option("-c", "--config", "config_path", type=click.Path(), help="Path to appsettings.json")
@click.option("--only", "names", multiple=True, help="Scenario to run (repeatable)")
@click.option("--headless/--headed", default=None, help="Override the configured browser mode")
@click.option("--api-only", is_flag=True, help="Skip scenarios that need a browser")
def run(config_path: Optional[str], names: tuple[str, ...], headless: Optional[bool], api_only: bool) -> None:
    """Run the harness scenarios against Wikipedia.

    Exits with status 1 if any scenario fails.

    Examples:

        wikiprobe run --headless

        wikiprobe run --only debugging-features --only api-section
    """
    config = _load(config_path)
    if headless is not None:
        config.browser.headless = headless

    configure_logging(config.logging)
    try:
        runner = SuiteRunner(
            config,
            reporter=ConsoleReporter(console=console, output_path=config.reporting.output_path),
        )
        try:
            outcomes = runner.run(list(names) or None, api_only=api_only)
        except KeyError as e:
            console.print(f"[red]Error: {escape(str(e.args[0]))}[/red]")
            sys.exit(2)
    finally:
        shutdown_logging()

    if any(not outcome.passed for outcome in outcomes):
        sys.exit(1)


if __name__ == "__main__":
    cli()
