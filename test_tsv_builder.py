import unittest
import datetime
import os
import tempfile

from config import GlobalConfig
from context import RunContext
from models import CommitRecord, CommitStats
import tsv_builder

COMMIT_ID = "da9a9075992d880705004aa40c819546fea4d9f2"


def make_record(stats=None, message="Fix bug"):
    return CommitRecord(
        commit_id=COMMIT_ID,
        raw_date_text="Wed Nov 29 11:34:41 2017",
        message=message,
        date=datetime.date(2017, 11, 29),
        stats=stats,
    )


class TestTsvBuilder(unittest.TestCase):

    def setUp(self):
        self.config = GlobalConfig()
        # Pin the formats so .env overrides cannot change the expectations
        self.config.DATE_FORMAT = "%Y-%m-%d"
        self.config.MONTH_FORMAT = "%Y-%m"

    def test_header_keeps_trailing_separator(self):
        self.assertEqual(
            tsv_builder.get_tsv_header("\t"),
            "Committish\tFilesChanged\tInsertions\tDeletions\t"
            "Sum changes\tDate\tMonth\tComment\t",
        )

    def test_row_with_stats(self):
        record = make_record(CommitStats(files_changed=2, insertions=3, deletions=1))
        self.assertEqual(
            tsv_builder.get_tsv_line(record, "\t", self.config),
            f'{COMMIT_ID}\t2\t3\t1\t4\t2017-11-29\t2017-11\t"Fix bug"\t',
        )

    def test_row_without_stats_has_empty_counts(self):
        line = tsv_builder.get_tsv_line(make_record(), "\t", self.config)
        self.assertEqual(line, f'{COMMIT_ID}\t\t\t\t\t2017-11-29\t2017-11\t"Fix bug"\t')

    def test_sum_column_is_plain_addition(self):
        record = make_record(CommitStats(files_changed=1, insertions=-1, deletions=7))
        fields = tsv_builder.get_tsv_line(record, "\t", self.config).split("\t")
        self.assertEqual(fields[2:5], ["-1", "7", "6"])

    def test_custom_separator(self):
        record = make_record(CommitStats(files_changed=1, insertions=0, deletions=2))
        self.assertEqual(
            tsv_builder.get_tsv_line(record, ";", self.config),
            f'{COMMIT_ID};1;0;2;2;2017-11-29;2017-11;"Fix bug";',
        )

    def test_generate_lines_numbers_rows(self):
        records = [
            make_record(CommitStats(1, 1, 1), message="first"),
            make_record(message="second"),
        ]
        lines = tsv_builder.generate_tsv_lines(records, self.config)
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("Line#\tCommittish\t"))
        self.assertTrue(lines[1].startswith(f"1\t{COMMIT_ID}\t1\t1\t1\t2\t"))
        self.assertTrue(lines[2].startswith(f"2\t{COMMIT_ID}\t\t"))
        self.assertTrue(lines[2].endswith('"second"\t'))

    def test_save_writes_header_and_rows(self):
        with tempfile.TemporaryDirectory() as tmp:
            input_path = os.path.join(tmp, "git.log")
            context = RunContext.for_input(input_path, self.config)
            path = tsv_builder.save_tsv_report(
                [make_record(CommitStats(2, 3, 1))], context
            )
            self.assertEqual(path, input_path + ".tsv")
            with open(path, "r", encoding="utf-8") as f:
                content = f.read().splitlines()
        self.assertEqual(len(content), 2)
        self.assertEqual(
            content[1], f'1\t{COMMIT_ID}\t2\t3\t1\t4\t2017-11-29\t2017-11\t"Fix bug"\t'
        )


if __name__ == "__main__":
    unittest.main()
