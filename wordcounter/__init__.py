"""wordcounter - word, character and line statistics for text files."""
from .analyzers.text_analyzer import (
    TextAnalyzer,
    TextStats,
    WordCount,
    frequency_of,
    rank_report,
)

__version__ = "0.1.0"

__all__ = [
    "TextAnalyzer",
    "TextStats",
    "WordCount",
    "frequency_of",
    "rank_report",
    "__version__",
]
