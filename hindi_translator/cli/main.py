"""
CLI interface for Hindi Translator.

Terminal presentation layer over the resolution engine.
"""

import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hindi_translator.config.loader import (
    StorageConfig,
    TranslatorConfig,
    load_translator_config,
)
from hindi_translator.core.engine import create_engine
from hindi_translator.core.errors import (
    EmptyInputError,
    NoTranslationFoundError,
    StaleResolutionError,
)
from hindi_translator.core.history import HistoryLog
from hindi_translator.core.quota import QuotaTracker
from hindi_translator.storage.store import SQLiteKeyValueStore, initialize_schema

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1


def _load_config(config_path: Optional[str], db_path: Optional[str]) -> TranslatorConfig:
    """Load config, letting --db override the configured database path."""
    config = load_translator_config(config_path)
    if db_path:
        config = replace(config, storage=StorageConfig(db_path=db_path))
    return config


def _load_config_or_exit(config_path: Optional[str], db_path: Optional[str]) -> TranslatorConfig:
    """Load config, printing the problem and exiting on a bad config file."""
    try:
        return _load_config(config_path, db_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error loading configuration:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """English to Hindi translator."""
    if ctx.invoked_subcommand is None:
        console.print("Hindi Translator - Use --help to see available commands")


@app.command()
def init(
    db_path: str = typer.Option("hindi_translator.db", "--db", help="SQLite database path")
):
    """Initialize the translator database."""
    try:
        initialize_schema(db_path)
        console.print("[green]✓[/] Database initialized successfully")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error initializing database:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def translate(
    words: List[str] = typer.Argument(..., help="English word or phrase"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    db_path: Optional[str] = typer.Option(None, "--db", help="SQLite database path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Translate an English word or short phrase to Hindi."""
    _configure_logging(verbose)
    config = _load_config_or_exit(config_path, db_path)
    try:
        engine = create_engine(config, SQLiteKeyValueStore(config.storage.db_path))
        resolution = asyncio.run(engine.resolve(" ".join(words)))
    except EmptyInputError as e:
        console.print(f"[yellow]{e}[/]")
        sys.exit(EXIT_CODE_FAIL)
    except NoTranslationFoundError:
        console.print(
            "[red]Translation not found.[/] Please check your internet connection and try again."
        )
        sys.exit(EXIT_CODE_FAIL)
    except StaleResolutionError:
        sys.exit(EXIT_CODE_FAIL)

    record = resolution.record
    console.print(f"\n[bold]{record.headword.capitalize()}[/bold]")
    console.print(f"Hindi: {record.hindi}")
    console.print(f"Pronunciation: {record.pronunciation}")
    console.print(f"Romanized: {record.romanized}")
    console.print(f"[dim]Source: {record.source}[/]")
    sys.exit(EXIT_CODE_PASS)


@app.command()
def history(
    clear: bool = typer.Option(False, "--clear", help="Delete all history"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show at most N entries"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    db_path: Optional[str] = typer.Option(None, "--db", help="SQLite database path"),
):
    """Show or clear previous translations."""
    config = _load_config_or_exit(config_path, db_path)
    log = HistoryLog(SQLiteKeyValueStore(config.storage.db_path), config.history.max_items)

    if clear:
        log.clear()
        console.print("[green]✓[/] History cleared")
        sys.exit(EXIT_CODE_PASS)

    items = log.list()
    if limit is not None:
        items = items[:limit]
    if not items:
        console.print("[dim]No translations yet.[/]")
        sys.exit(EXIT_CODE_PASS)

    table = Table(title="Translation History")
    table.add_column("English")
    table.add_column("Hindi")
    table.add_column("Romanized")
    table.add_column("Source")
    table.add_column("When")
    for item in items:
        table.add_row(item.english, item.hindi, item.romanized, item.source, item.timestamp)
    console.print(table)
    sys.exit(EXIT_CODE_PASS)


@app.command()
def quota(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    db_path: Optional[str] = typer.Option(None, "--db", help="SQLite database path"),
):
    """Show today's usage of the rate-limited provider."""
    config = _load_config_or_exit(config_path, db_path)
    tracker = QuotaTracker(SQLiteKeyValueStore(config.storage.db_path), config.quota.daily_limit)
    state = tracker.state()
    console.print(f"Date: {state.date}")
    console.print(f"Used: {state.count}/{tracker.daily_limit}")
    console.print(f"Remaining: {tracker.remaining()}")
    sys.exit(EXIT_CODE_PASS)


if __name__ == "__main__":
    app()
