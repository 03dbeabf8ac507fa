"""Display formatting using Rich library."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analyzers.text_analyzer import TextStats, rank_report


# Paths and words are printed unwrapped so they stay copyable.
# No emoji codes: ":smile:" is a word, not a glyph.
console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


def display_reading(file_path: str) -> None:
    console.print(f"Reading file: [cyan]{escape(file_path)}[/]")


def display_word_count(stats: TextStats) -> None:
    """Default output when no flags are given."""
    console.print(f"Word count: [yellow]{stats.word_count}[/]")


def display_stats(stats: TextStats, top_n: int) -> None:
    """Display totals and the ranked word-frequency table.

    Args:
        stats: TextStats object
        top_n: Number of words to list
    """
    console.print("\n[bold cyan]Text Statistics:[/]")
    _display_core_stats(stats)

    ranked = rank_report(stats, top_n)

    console.print(f"\n[bold cyan]Word Frequency (top {top_n}):[/]")
    if not ranked:
        console.print("  [dim](no words)[/]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    # Long words (URLs) fold onto extra lines so the count column keeps its width
    table.add_column("Word", style="cyan", overflow="fold")
    table.add_column("Count", justify="right", style="yellow", no_wrap=True, min_width=len("Count"))

    for i, row in enumerate(ranked, 1):
        table.add_row(str(i), escape(row.word), f"{row.count:,}")

    console.print(table)


def display_word_frequency(stats: TextStats, word: str) -> None:
    """Display the case-insensitive count of a single word.

    Args:
        stats: TextStats object
        word: Word as given on the command line
    """
    console.print(f"\nFrequency of '{escape(word)}': [yellow]{stats.frequency_of(word)}[/]")


def display_error(message: str) -> None:
    """Display error message on stderr.

    Args:
        message: Error message
    """
    err_console.print(f"[bold red]Error:[/] {escape(message)}")


def _display_core_stats(stats: TextStats) -> None:
    """Display totals and per-line rates.

    Args:
        stats: TextStats object
    """
    parts = [
        f"words:  [yellow]{stats.word_count:>7,}[/]",
        f"chars:  [green]{stats.char_count:>7,}[/]",
        f"lines:  [blue]{stats.line_count:>7,}[/]",
        f"unique:  [magenta]{stats.unique_words:>7,}[/]",
    ]
    console.print("  │  ".join(parts))

    if stats.words_per_line_mean is not None:
        # No median when every line is blank
        median = stats.words_per_line_median
        console.print(
            f"words/ln:  [yellow]{stats.words_per_line_mean:>5.1f}[/]  "
            f"[dim](med: {median if median is not None else '-'})[/]"
        )
