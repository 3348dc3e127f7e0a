# orchestrator.py
"""
Runs one transformation: read the git log file, assemble commits, write the TSV.
"""
import logging
from typing import List

from context import RunContext
from models import CommitRecord
import log_parser
import tsv_builder

logger = logging.getLogger(__name__)


class TransformOrchestrator:
    """
    Drives the read -> assemble -> write pipeline for one input file.
    Any error aborts the run before the output file is opened.
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config

    def run(self) -> str:
        """Execute the run and return the path of the written report."""
        input_path = self.context.input_path
        logger.info(f"Processing file: {input_path}")

        # --- 1. Read and assemble ---
        records = self._read_records(input_path)
        logger.info("Finished processing. Writing output.")

        # --- 2. Write report ---
        output_path = tsv_builder.save_tsv_report(records, self.context)

        logger.info("Finished.")
        return output_path

    def _read_records(self, input_path: str) -> List[CommitRecord]:
        try:
            f = open(
                input_path,
                "r",
                encoding=self.global_config.INPUT_ENCODING,
                errors="replace",
            )
        except FileNotFoundError:
            logger.error(f"❌ Cannot find file: {input_path}")
            raise

        with f:
            return log_parser.assemble_records(f)
