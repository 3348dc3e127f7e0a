# exceptions.py
"""
Errors that abort a transformer run.
"""


class GitLogTsvError(Exception):
    """Base class for all fatal transformer errors."""
    pass


class UsageError(GitLogTsvError):
    """Raised when the command line does not name exactly one input file."""
    pass


class MalformedDateError(GitLogTsvError, ValueError):
    """Raised when a header's date field cannot be turned into a calendar date."""

    def __init__(self, date_text: str, reason: str, line_number: int = 0):
        self.date_text = date_text
        self.reason = reason
        self.line_number = line_number
        location = f" (line {line_number})" if line_number else ""
        super().__init__(f"Cannot parse date '{date_text}'{location}: {reason}")


class OrphanStatsError(GitLogTsvError):
    """Raised when a stats line appears with no commit record in progress."""

    def __init__(self, line: str, line_number: int = 0):
        self.line = line
        self.line_number = line_number
        super().__init__(
            f"Found a stats line but no commit is in progress (line {line_number}): {line.strip()}"
        )
