# cli.py
"""
Command line interface layer.
"""
import argparse
import logging
import sys
from typing import List, Optional

from config import GlobalConfig
from context import RunContext
from exceptions import GitLogTsvError, UsageError
from orchestrator import TransformOrchestrator
import utils

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        raise UsageError(message)


def setup_parser() -> argparse.ArgumentParser:
    """All argparse definitions."""
    parser = _ArgumentParser(
        description="Convert a git log file into a TSV report for spreadsheets.",
        epilog="Generate the input file with:\n"
        f"   {GlobalConfig.GIT_LOG_COMMAND} > git.log",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "log_file",
        type=str,
        help="Path to the git log output.\n"
        f"   The report is written to <log_file>{GlobalConfig.OUTPUT_SUFFIX}",
    )
    return parser


def run_cli(argv: Optional[List[str]] = None) -> str:
    """
    Parse arguments and run one transformation.
    Returns the report path; fatal errors propagate to the caller.
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    global_config = GlobalConfig()
    run_context = RunContext.for_input(args.log_file, global_config)

    logger.info("=" * 50)
    logger.info(f"   [Input]:  {run_context.input_path}")
    logger.info(f"   [Output]: {run_context.output_path}")
    logger.info("=" * 50)

    orchestrator = TransformOrchestrator(run_context)
    return orchestrator.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point: returns the process exit status."""
    utils.setup_logging(GlobalConfig.LOG_LEVEL)
    try:
        run_cli(argv)
    except UsageError as e:
        logger.error(f"❌ {e}")
        return 2
    except FileNotFoundError:
        # Already reported by the orchestrator
        return 1
    except (OSError, UnicodeError) as e:
        logger.error(f"❌ Cannot read or write {e.filename or 'file'}: {e}")
        return 1
    except GitLogTsvError as e:
        logger.error(f"❌ {e}")
        return 1
    return 0
