"""Text statistics: word, character and line counts plus word frequency."""
from dataclasses import dataclass, field
from typing import NamedTuple, Optional
import statistics


DEFAULT_TOP_N = 5


class WordCount(NamedTuple):
    """One row of a frequency report."""
    word: str
    count: int


@dataclass
class TextStats:
    """Statistics for one document."""
    word_count: int = 0
    char_count: int = 0
    line_count: int = 0
    word_frequency: dict[str, int] = field(default_factory=dict)

    # Rate calculations
    words_per_line_mean: Optional[float] = None
    words_per_line_median: Optional[float] = None

    @property
    def unique_words(self) -> int:
        """Number of distinct (lowercased) words."""
        return len(self.word_frequency)

    def top_words(self, limit: Optional[int] = DEFAULT_TOP_N) -> list[WordCount]:
        return rank_report(self, limit)

    def frequency_of(self, word: str) -> int:
        return frequency_of(self, word)


class TextAnalyzer:
    """Computes TextStats for in-memory text."""

    def calculate(self, content: str) -> TextStats:
        """Compute statistics for text content in a single pass.

        Words are runs of non-whitespace; punctuation stays attached.
        Frequency keys are lowercased.

        Args:
            content: Full text of the document

        Returns:
            Populated TextStats (all zero for empty content)
        """
        stats = TextStats(
            char_count=len(content),
            line_count=count_lines(content),
        )

        for word in content.split():
            stats.word_count += 1
            key = word.lower()
            stats.word_frequency[key] = stats.word_frequency.get(key, 0) + 1

        if stats.line_count > 0:
            # Mean: total words / total lines
            stats.words_per_line_mean = stats.word_count / stats.line_count

            # Median: per-line words for non-empty lines only
            words_per_line = [
                len(line.split()) for line in content.split("\n") if line.strip()
            ]
            if words_per_line:
                stats.words_per_line_median = round(statistics.median(words_per_line), 1)

        return stats


def count_lines(content: str) -> int:
    """Count newline-separated lines.

    A trailing newline ends the last line rather than starting an empty one,
    so "a\\nb\\nc\\n" and "a\\nb\\nc" both have 3 lines.

    Args:
        content: Text to count

    Returns:
        Line count (0 for empty text)
    """
    if not content:
        return 0
    newlines = content.count("\n")
    return newlines if content.endswith("\n") else newlines + 1


def rank_report(stats: TextStats, limit: Optional[int] = DEFAULT_TOP_N) -> list[WordCount]:
    """Rank words by frequency.

    Sorted by count descending; equal counts are ordered by word ascending
    so the report is deterministic.

    Args:
        stats: Computed statistics
        limit: Maximum rows to return (None = all)

    Returns:
        List of WordCount rows
    """
    ranked = sorted(
        stats.word_frequency.items(),
        key=lambda item: (-item[1], item[0])
    )
    if limit is not None:
        ranked = ranked[:limit]
    return [WordCount(word, count) for word, count in ranked]


def frequency_of(stats: TextStats, word: str) -> int:
    """Case-insensitive occurrence count of a word (0 if absent)."""
    return stats.word_frequency.get(word.lower(), 0)
