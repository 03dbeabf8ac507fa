#!/usr/bin/env python3
"""
wordcounter CLI - word, character and line statistics for a text file.

Usage:
    wordcount <file>                     # Word count only
    wordcount <file> --stats             # Totals + top words
    wordcount <file> --word <word>       # Frequency of one word
    wordcount <file> --stats --top 10    # Longer frequency table
"""
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from . import __version__
from .analyzers.text_analyzer import TextAnalyzer
from .config import load_config
from .core.file_loader import read_text
from .exceptions import (
    ArgumentError,
    FlagArgumentError,
    UnknownFlagError,
    WordCounterError,
)
from .utils.display import (
    display_error,
    display_reading,
    display_stats,
    display_word_count,
    display_word_frequency,
    console,
    err_console,
)


USAGE = "usage: wordcount <file> [--stats] [--word <word>] [--top <n>] [--config <path>]"

HELP = f"""{USAGE}

Count words, characters and lines in a text file.

positional arguments:
  file                  Text file to analyze

optional arguments:
  -h, --help            Show this help message and exit
  -V, --version         Show version and exit
  --stats               Show totals and the most frequent words
  --word WORD           Show how often WORD occurs (case-insensitive)
  --top N               Number of words in the --stats table (default: 5)
  --config PATH         Use an alternate config.yaml

Examples:
  wordcount notes.txt                   # Word count only
  wordcount notes.txt --stats           # Totals + top 5 words
  wordcount notes.txt --word hello      # Frequency of "hello"
  wordcount notes.txt --stats --word the --top 10
"""


@dataclass
class StatsRequest:
    """Print the totals and the ranked word table."""


@dataclass
class WordRequest:
    """Print how often one word occurs."""
    word: str


# Flags that consume the next argument, with the value name for errors
VALUE_FLAGS = {
    "--word": "word",
    "--top": "number",
    "--config": "path",
}

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-V", "--version")


Step = Union[StatsRequest, WordRequest, FlagArgumentError, UnknownFlagError]


@dataclass
class Options:
    """Parsed command line.

    steps keeps actions and non-fatal flag errors in command-line order.
    """
    file_path: str
    steps: List[Step] = field(default_factory=list)
    top_n: Optional[int] = None
    config_path: Optional[str] = None
    has_flags: bool = False


def parse_positive_int(flag: str, raw: str) -> Tuple[Optional[int], Optional[FlagArgumentError]]:
    """Parse a flag value as a positive integer.

    Args:
        flag: Flag name, for the error message
        raw: Value as given

    Returns:
        Tuple of (value, error); exactly one is None
    """
    try:
        value = int(raw)
    except ValueError:
        return None, FlagArgumentError(flag, f"{flag} requires a number, got: {raw}")
    if value < 1:
        return None, FlagArgumentError(flag, f"{flag} must be at least 1, got: {value}")
    return value, None


def find_info_flag(argv: List[str]) -> Optional[str]:
    """Find the first help or version flag.

    Values consumed by --word/--top/--config are skipped, so
    `--word -h` asks for the frequency of "-h".

    Args:
        argv: Arguments after the program name

    Returns:
        The flag as given, or None
    """
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in HELP_FLAGS or arg in VERSION_FLAGS:
            return arg
        # argv[0] is the file path, never a flag taking a value
        i += 2 if i > 0 and arg in VALUE_FLAGS else 1
    return None


def parse_args(argv: List[str]) -> Options:
    """Parse arguments after the program name.

    The first argument is always the file path. Flags that need a value take
    the next argument as-is.

    Args:
        argv: Arguments (e.g., ['notes.txt', '--word', 'the'])

    Returns:
        Options

    Raises:
        ArgumentError: If no file path was given
    """
    if not argv:
        raise ArgumentError("missing required argument: <file>")

    options = Options(file_path=argv[0], has_flags=len(argv) > 1)

    i = 1
    while i < len(argv):
        arg = argv[i]

        if arg == "--stats":
            options.steps.append(StatsRequest())
            i += 1

        elif arg in VALUE_FLAGS:
            if i + 1 >= len(argv):
                options.steps.append(
                    FlagArgumentError(arg, f"{arg} requires a {VALUE_FLAGS[arg]} argument")
                )
                i += 1
                continue

            value = argv[i + 1]
            if arg == "--word":
                options.steps.append(WordRequest(value))
            elif arg == "--top":
                top_n, error = parse_positive_int(arg, value)
                if error is not None:
                    options.steps.append(error)
                else:
                    options.top_n = top_n
            else:
                options.config_path = value
            i += 2

        else:
            options.steps.append(UnknownFlagError(arg))
            i += 1

    return options


def run(options: Options) -> int:
    """Read the file, analyze it, and print what the options ask for.

    Returns:
        Exit code

    Raises:
        ConfigError: If the config file is invalid
        FileAccessError: If the input can't be read
    """
    config = load_config(options.config_path)
    top_n = options.top_n or config.report.top_n

    display_reading(options.file_path)
    content = read_text(options.file_path, encoding=config.input.encoding)

    stats = TextAnalyzer().calculate(content)

    for step in options.steps:
        if isinstance(step, StatsRequest):
            display_stats(stats, top_n)
        elif isinstance(step, WordRequest):
            display_word_frequency(stats, step.word)
        else:
            display_error(str(step))

    if not options.has_flags:
        display_word_count(stats)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    # Handle help/version before anything else (so they work without a file)
    info_flag = find_info_flag(argv)
    if info_flag in HELP_FLAGS:
        console.print(HELP, markup=False, highlight=False)
        return 0
    if info_flag in VERSION_FLAGS:
        console.print(f"wordcount {__version__}", highlight=False)
        return 0

    try:
        return run(parse_args(argv))
    except ArgumentError as e:
        display_error(str(e))
        err_console.print(USAGE, markup=False, highlight=False)
        return e.exit_code
    except WordCounterError as e:
        display_error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
