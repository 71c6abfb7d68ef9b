"""
Main CLI application entry point.

This module contains the main Typer application and command handlers
for AI CLI Tool.
"""

from typing import Optional
import logging
import typer
from pydantic import ValidationError
from rich.console import Console

from ai_cli_tool import VERSION
from ai_cli_tool.config.settings import AiCliSettings, get_settings
from ai_cli_tool.config.credentials import CredentialStore
from ai_cli_tool.core.client import AiCliError, complete_task, format_error
from ai_cli_tool.prompts.registry import DEFAULT_TARGET_LANGUAGE, TaskKind, get_task_prompt
from ai_cli_tool.utils import configure_logging

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="ai-cli-tool",
    help="AI CLI Tool - summarize, translate and analyze text with OpenAI",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich consoles for output; model text is printed without markup or emoji codes
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]AI CLI Tool[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    AI CLI Tool - summarize, translate and analyze text with OpenAI.

    Save your API key once with [cyan]set-key[/cyan], then run any task.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"Error: invalid configuration: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if debug:
        settings = settings.model_copy(update={"debug": True})

    configure_logging(settings.effective_log_level)
    logger.debug(f"Using credential file {settings.config_file}")
    ctx.obj = settings


def _print_error(message: str) -> None:
    err_console.print(message, markup=False, soft_wrap=True)


def _run_task(ctx: typer.Context, task: TaskKind, text: str, target_language: str = DEFAULT_TARGET_LANGUAGE) -> None:
    """Run one task and print its labelled result."""
    settings: AiCliSettings = ctx.obj
    store = CredentialStore(settings.config_file)

    try:
        result = complete_task(store, settings, task, text, target_language)
    except AiCliError as e:
        _print_error(format_error(e))
        raise typer.Exit(1)
    except OSError as e:
        _print_error(f"Error: {e}")
        raise typer.Exit(1)

    label = get_task_prompt(task).label
    console.print(f"{label}: {result}", markup=False, soft_wrap=True)


@app.command("set-key")
def set_key_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Your OpenAI API key"),
) -> None:
    """Set your OpenAI API key."""
    settings: AiCliSettings = ctx.obj
    store = CredentialStore(settings.config_file)

    try:
        store.save(key)
    except OSError as e:
        _print_error(f"Error: could not save API key: {e}")
        raise typer.Exit(1)

    console.print("API key has been saved successfully!")


@app.command("summarize")
def summarize_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to summarize"),
) -> None:
    """Summarize the provided text using OpenAI."""
    _run_task(ctx, TaskKind.SUMMARIZE, text)


@app.command("translate")
def translate_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to translate"),
    to: str = typer.Option(DEFAULT_TARGET_LANGUAGE, "--to", help="Target language code"),
) -> None:
    """Translate the provided text using OpenAI."""
    _run_task(ctx, TaskKind.TRANSLATE, text, to)


@app.command("sentiment-analysis")
def sentiment_analysis_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to analyze"),
) -> None:
    """Do sentiment analysis on the provided text using OpenAI."""
    _run_task(ctx, TaskKind.SENTIMENT_ANALYSIS, text)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
