import functools
import logging

import click
from rich.console import Console

from .book import RecordBook
from .commands import CommandResult
from .config import Settings
from .dispatch import CommandDispatcher, all_usages
from .exceptions import RecordBookError
from .log import setup_logging
from .storage import load_book, save_book
from .ui import error, ok, show_help, show_listing

logger = logging.getLogger(__name__)

console = Console()

PROMPT = "\n[bold][orchid]recordbook[/]>>> [/]"


def report_errors(fn):
    """Print any RecordBookError in red and carry on with the next command."""
    @functools.wraps(fn)
    def wrap(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except RecordBookError as e:
            console.print(error(e.message), highlight=False)
            return None

    return wrap


@report_errors
def run_line(line: str, dispatcher: CommandDispatcher, book: RecordBook):
    command = dispatcher.parse(line)
    result: CommandResult = command.execute(book)
    logger.info("Executed %s", type(command).__name__)

    console.print(ok(result.feedback))
    if result.show_help:
        show_help(console, all_usages())
    if result.listing is not None:
        show_listing(console, book, result.listing)
    return result


def repl(settings: Settings, dispatcher: CommandDispatcher):
    book = load_book(settings.data_file)
    console.print("\nWelcome to [bold yellow]recordbook[/] – your contacts and journal 📒")
    console.print("[dim]Type 'help' to see all commands.[/]")

    while True:
        try:
            raw = console.input(PROMPT).strip()
            if not raw:
                continue
            result = run_line(raw, dispatcher, book)
            if result is not None and result.exit:
                break
        except (KeyboardInterrupt, EOFError):
            console.print("\nInterrupted. Saving …")
            break
    save_book(book, settings.data_file)


@click.command()
@click.option("--data-dir", type=click.Path(file_okay=False), default=None,
              help="Where the record book and logs are kept.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"],
                                               case_sensitive=False),
              default=None, help="Level for the log file.")
def main(data_dir, log_level):
    """Manage contacts and a journal from the terminal."""
    settings = Settings.from_env(data_dir, log_level)
    setup_logging(settings.log_dir, settings.log_level)
    logger.info("Starting with data file %s", settings.data_file)
    try:
        repl(settings, CommandDispatcher())
    except RecordBookError as e:
        raise click.ClickException(e.message) from e


if __name__ == "__main__":
    main()
