# tsv_builder.py
"""
TSV report builder.
Renders assembled commits as delimited rows for spreadsheet analysis.
"""
import logging
from typing import Any, Iterable, List

from config import GlobalConfig
from context import RunContext
from models import CommitRecord

logger = logging.getLogger(__name__)

HEADER_COLUMNS = [
    "Committish",
    "FilesChanged",
    "Insertions",
    "Deletions",
    "Sum changes",
    "Date",
    "Month",
    "Comment",
]


def write_values(sep: str, values: Iterable[Any]) -> str:
    # Every value is followed by the separator, the last one included,
    # so existing spreadsheets keep their column layout.
    return "".join(f"{value}{sep}" for value in values)


def get_tsv_header(sep: str) -> str:
    """Column headings in the same order get_tsv_line() writes them."""
    return write_values(sep, HEADER_COLUMNS)


def get_tsv_line(record: CommitRecord, sep: str, global_config: GlobalConfig) -> str:
    """
    One row for `record`. A commit without a stats line gets empty count
    cells rather than made-up numbers.
    """
    stats = record.stats
    if stats is None:
        counts = ["", "", "", ""]
    else:
        counts = [
            stats.files_changed,
            stats.insertions,
            stats.deletions,
            stats.total_changes,
        ]
    return write_values(
        sep,
        [
            record.commit_id,
            *counts,
            record.date.strftime(global_config.DATE_FORMAT),
            record.date.strftime(global_config.MONTH_FORMAT),
            f'"{record.message}"',
        ],
    )


def generate_tsv_lines(records: List[CommitRecord], global_config: GlobalConfig) -> List[str]:
    """
    Full report, header first. Each row is prefixed with a 1-based line
    number so the original log order can be restored after sorting.
    """
    sep = global_config.SEPARATOR
    lines = [f"{global_config.LINE_NUMBER_HEADER}{sep}{get_tsv_header(sep)}"]
    for line_num, record in enumerate(records, start=1):
        lines.append(f"{line_num}{sep}{get_tsv_line(record, sep, global_config)}")
    return lines


def save_tsv_report(records: List[CommitRecord], context: RunContext) -> str:
    """Write the report to context.output_path and return the path."""
    global_config = context.global_config
    lines = generate_tsv_lines(records, global_config)
    with open(
        context.output_path, "w", encoding=global_config.OUTPUT_ENCODING, newline="\n"
    ) as f:
        for line in lines:
            f.write(line + "\n")
    logger.info(f"✅ TSV report saved: {context.output_path} ({len(records)} rows)")
    return context.output_path
