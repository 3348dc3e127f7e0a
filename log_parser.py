# log_parser.py
"""
Parses the output of

    git log --compact-summary --format="%H %ad %s"

into CommitRecord objects. Each commit spans a header line, optional noise
(per-file summary lines, blanks) and an optional stats line:

    da9a9075992d880705004aa40c819546fea4d9f2 Wed Nov 29 11:34:41 2017 +0000 Merge pull request #8787
     src/app.py | 3 ++-
     1 file changed, 2 insertions(+), 1 deletion(-)
"""
import datetime
import enum
import logging
import re
from typing import Iterable, List, Optional, Tuple

from exceptions import MalformedDateError, OrphanStatsError
from models import CommitRecord, CommitStats

logger = logging.getLogger(__name__)


# --- Header layout ---
# After the 40 character hash, "%ad" renders as " Www Mmm D HH:MM:SS YYYY"
# (24-25 chars) followed by the " +ZZZZ" timezone offset.
COMMIT_ID_WIDTH = 40
DATE_FIELD_WIDTH = 25
TZ_FIELD_WIDTH = 6

COMMIT_REGEX = re.compile(
    rf"\s*(?P<commit_id>\w{{{COMMIT_ID_WIDTH}}})"
    rf"(?P<date>.{{{DATE_FIELD_WIDTH}}})"
    rf"(?:.{{{TZ_FIELD_WIDTH}}})"
    r"(?P<message>.*)$"
)

# "Wed Nov 29 11:34:41 2017" -> weekday, month, day ... year
DATE_REGEX = re.compile(
    r"(?P<weekday>\w{3})\s(?P<month>\w{3})\s(?P<day>\d\d?).*(?P<year>\d{4})$"
)

# Each clause is optional, but they always appear in this order.
# Leading whitespace belongs to each clause so a clause without digits
# (" files changed") still matches and reports -1.
STATS_REGEX = re.compile(
    r"(?:\s*(?P<files>\d*)\sfiles?\schange[^,]*)?"
    r"(?:,?\s*(?P<insertions>\d*)\sinsertions?\(\+\)[^,]*)?"
    r"(?:,?\s*(?P<deletions>\d*)\sdeletions?\(-\).*)?"
)

SHORT_MONTH_NAME_TO_NUMBER = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}

STATS_MARKERS = ("(+)", "(-)")


class LineType(enum.Enum):
    COMMIT_HEADER = "commit_header"
    STATS = "stats"
    BLANK = "blank"
    OTHER = "other"


def _parse_group(value: Optional[str], absent: int) -> int:
    """
    Convert a regex group to an int.
    Missing group -> `absent`; present but not a number -> -1.
    """
    if value is None:
        return absent
    try:
        return int(value.strip())
    except ValueError:
        return -1


def parse_date(date_text: str) -> datetime.date:
    """
    Parse "Wed Nov 29 11:34:41 2017" into date(2017, 11, 29).
    Raises MalformedDateError for anything that is not a real calendar date.
    """
    match = DATE_REGEX.search(date_text)
    if not match:
        raise MalformedDateError(date_text, "expected 'Www Mmm DD ... YYYY'")

    month_name = match.group("month")
    month = SHORT_MONTH_NAME_TO_NUMBER.get(month_name)
    if month is None:
        raise MalformedDateError(date_text, f"unknown month '{month_name}'")

    day = _parse_group(match.group("day"), absent=-1)
    year = _parse_group(match.group("year"), absent=-1)
    try:
        return datetime.date(year, month, day)
    except ValueError as e:
        raise MalformedDateError(date_text, str(e)) from e


def match_commit_line(line: str) -> Optional[Tuple[str, str, str]]:
    """Return (commit_id, date_text, message) for a header line, else None."""
    match = COMMIT_REGEX.match(line)
    if not match:
        return None
    return (
        match.group("commit_id").strip(),
        match.group("date").strip(),
        match.group("message").strip(),
    )


def parse_stats_line(line: str) -> CommitStats:
    """
    Parse a summary line into CommitStats. Never fails: clauses that are
    missing count as 0, clauses whose digits do not parse count as -1.
    """
    match = STATS_REGEX.match(line)
    if not match:
        return CommitStats(files_changed=0, insertions=0, deletions=0, line=line)
    return CommitStats(
        files_changed=_parse_group(match.group("files"), absent=0),
        insertions=_parse_group(match.group("insertions"), absent=0),
        deletions=_parse_group(match.group("deletions"), absent=0),
        line=line,
    )


def classify_line(line: str) -> LineType:
    """First match wins: header, blank, stats marker, anything else."""
    if match_commit_line(line):
        return LineType.COMMIT_HEADER
    if not line.strip():
        return LineType.BLANK
    if any(marker in line for marker in STATS_MARKERS):
        return LineType.STATS
    return LineType.OTHER


def parse_commit_line(line: str, line_number: int = 0) -> CommitRecord:
    """Build a CommitRecord from a header line. The date must parse."""
    parts = match_commit_line(line)
    if parts is None:
        raise ValueError(f"Not a commit header line: {line!r}")
    commit_id, date_text, message = parts
    try:
        commit_date = parse_date(date_text)
    except MalformedDateError as e:
        logger.error(f"❌ Bad date on line {line_number}: {line}")
        raise MalformedDateError(e.date_text, e.reason, line_number) from e
    return CommitRecord(
        commit_id=commit_id,
        raw_date_text=date_text,
        message=message,
        date=commit_date,
        line_number=line_number,
        line=line,
    )


class RecordAssembler:
    """
    Turns classified log lines into CommitRecords.

    Holds at most one open record. A stats line closes it, a new header
    closes it without stats, and finish() flushes whatever is left.
    """

    def __init__(self):
        self.records: List[CommitRecord] = []
        self.current: Optional[CommitRecord] = None
        self.line_count = 0

    @property
    def is_open(self) -> bool:
        return self.current is not None

    def feed(self, line: str) -> None:
        self.line_count += 1
        line_type = classify_line(line)

        if line_type is LineType.COMMIT_HEADER:
            record = parse_commit_line(line, self.line_count)
            if self.current is not None:
                self._emit()
            self.current = record
        elif line_type is LineType.STATS:
            if self.current is None:
                raise OrphanStatsError(line, self.line_count)
            self.current.stats = parse_stats_line(line)
            self._emit()
        # BLANK and OTHER lines carry nothing

    def finish(self) -> List[CommitRecord]:
        if self.current is not None:
            self._emit()
        missing = sum(1 for record in self.records if not record.has_stats)
        if missing:
            logger.warning(f"⚠️ {missing} commit(s) had no stats line")
        logger.info(
            f"Assembled {len(self.records)} commit(s) from {self.line_count} line(s)"
        )
        return self.records

    def _emit(self) -> None:
        self.records.append(self.current)
        self.current = None


def assemble_records(lines: Iterable[str]) -> List[CommitRecord]:
    """Run a fresh RecordAssembler over `lines` and return the records."""
    assembler = RecordAssembler()
    for line in lines:
        assembler.feed(line.rstrip("\r\n"))
    return assembler.finish()
