# models.py
from dataclasses import dataclass, field
import datetime
from typing import Optional


@dataclass(frozen=True)
class CommitStats:
    """
    Counts from a summary line such as
    " 2 files changed, 3 insertions(+), 1 deletion(-)".

    Each count is -1 when its clause was present but the digits did not parse,
    and 0 when the clause was missing altogether.
    """

    files_changed: int
    insertions: int
    deletions: int
    # Original log line, kept for debugging
    line: str = field(default="", repr=False, compare=False)

    @property
    def total_changes(self) -> int:
        return self.insertions + self.deletions


@dataclass
class CommitRecord:
    """One commit rebuilt from its header line and optional stats line."""

    commit_id: str
    raw_date_text: str
    message: str
    date: datetime.date
    stats: Optional[CommitStats] = None
    line_number: int = 0
    # Original log line, kept for debugging
    line: str = field(default="", repr=False, compare=False)

    @property
    def has_stats(self) -> bool:
        return self.stats is not None
