# GitLogTsv.py
"""
Git log -> TSV transformer
  - cli.py: command line interface and run assembly
  - context.py: runtime configuration model
  - orchestrator.py: read / assemble / write pipeline
  - log_parser.py: line classification and commit assembly
  - tsv_builder.py: report rendering
  - GitLogTsv.py: launcher only

Usage:
    git log --compact-summary --format="%H %ad %s" > git.log
    python GitLogTsv.py git.log
"""

import logging
import sys

from config import GlobalConfig

# 1. Configure logging before the remaining modules are imported
import utils

utils.setup_logging(GlobalConfig.LOG_LEVEL)

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    try:
        import cli

        sys.exit(cli.main())

    except Exception as e:
        # Anything that escaped the CLI's own handling
        logger.error(f"❌ Unhandled error: {e}", exc_info=True)
        sys.exit(1)
