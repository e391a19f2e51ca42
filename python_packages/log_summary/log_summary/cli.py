# log_summary/log_summary/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from .analyzers.event_counts import EventCountReporter
from .analyzers.phrases import MessagePhraseReporter
from .config import TOP_PHRASE_LIMIT
from .core import LogEntry, LogParseError, LogReader
from .summary import count_event_types, top_message_phrases

logger = logging.getLogger(__name__)

LOG_PATH_PROMPT = "Enter path to log file"
EVENT_TYPE_PROMPT = (
    "Enter event type to get top {top} most frequent associated message phrases"
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Summarize event types and frequent messages in a log file"
    )
    parser.add_argument(
        "log_path", nargs="?", help="Path to the log file (prompted for if omitted)"
    )
    parser.add_argument(
        "-e", "--event-type", help="Event type to rank messages for (prompted for if omitted)"
    )
    parser.add_argument(
        "-n",
        "--top",
        type=int,
        default=TOP_PHRASE_LIMIT,
        help=f"Number of message phrases to show (default: {TOP_PHRASE_LIMIT})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.top <= 0:
        parser.error("--top must be positive")

    return args


def setup_logging(verbose: bool = False) -> None:
    """Send package logs to stderr through rich"""
    package_logger = logging.getLogger("log_summary")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False)
    )


def clean_path(text: str) -> Path:
    """Drop surrounding whitespace and quotes, as pasted from a file manager"""
    return Path(text.strip().strip('"\''))


def ask_until_answered(
    question: str, console: Console, stream: Optional[TextIO] = None
) -> str:
    """Prompt repeatedly until a non-empty answer is given"""
    answer = ""
    while not answer:
        answer = Prompt.ask(question, console=console, stream=stream).strip()
    return answer


def load_entries(log_path: Path) -> Optional[List[LogEntry]]:
    """Read the log, logging the reason and returning None when it cannot be used"""
    try:
        return LogReader.read_log(log_path)
    except LogParseError as error:
        logger.error("Could not parse %s: %s", log_path, error)
    except (OSError, UnicodeDecodeError) as error:
        logger.error("Could not read log file %s: %s", log_path, error)
    return None


def run(
    args: argparse.Namespace,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Run the interactive summary, returning the process exit status"""
    console = console or Console()

    path_text = args.log_path or ask_until_answered(LOG_PATH_PROMPT, console, stream)
    entries = load_entries(clean_path(path_text))
    if entries is None:
        return 1

    EventCountReporter(console).generate_report(count_event_types(entries))

    event_type = args.event_type or ask_until_answered(
        EVENT_TYPE_PROMPT.format(top=args.top), console, stream
    )
    phrases = top_message_phrases(entries, event_type, args.top)
    MessagePhraseReporter(console).generate_report(phrases, event_type)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except (KeyboardInterrupt, EOFError):
        logger.warning("Stopped by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
