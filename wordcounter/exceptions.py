"""Error types for wordcounter.

Fatal errors (file access, config, missing file argument) are raised and
stop the run. Flag errors are collected by the argument parser and reported
without stopping the remaining flags.
"""


class WordCounterError(Exception):
    """Base class for all wordcounter errors."""

    exit_code = 1


class FileAccessError(WordCounterError):
    """Input file is missing, unreadable, or not valid text."""


class ConfigError(WordCounterError):
    """Config file is missing, malformed, or holds invalid values."""


class ArgumentError(WordCounterError):
    """Required positional argument is missing."""

    exit_code = 2


class FlagArgumentError(WordCounterError):
    """A flag that needs a value got none, or got one that doesn't parse."""

    def __init__(self, flag: str, message: str):
        super().__init__(message)
        self.flag = flag


class UnknownFlagError(WordCounterError):
    """Flag not recognized."""

    def __init__(self, flag: str):
        super().__init__(f"Unknown option: {flag}")
        self.flag = flag
