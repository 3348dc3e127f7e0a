# config.py
"""
Global configuration for the git log -> TSV transformer.
Values can be overridden from a .env file or the environment.
"""
import os
from dotenv import load_dotenv


# --- Script base path ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
else:
    load_dotenv()


class GlobalConfig:
    """
    Application-wide settings for one transformer run.
    """

    # --- Paths ---
    SCRIPT_BASE_PATH: str = SCRIPT_BASE_PATH

    # --- Upstream git command ---
    # The parser only understands the layout produced by this exact command.
    GIT_LOG_COMMAND = 'git log --compact-summary --format="%H %ad %s"'

    # --- Output layout ---
    SEPARATOR: str = "\t"
    OUTPUT_SUFFIX: str = ".tsv"
    LINE_NUMBER_HEADER: str = "Line#"

    # --- Date rendering ---
    # Use "%x" for the locale's short date.
    DATE_FORMAT: str = os.getenv("GITLOG_TSV_DATE_FORMAT", "%Y-%m-%d")
    MONTH_FORMAT: str = "%Y-%m"

    # --- Encodings ---
    INPUT_ENCODING: str = os.getenv("GITLOG_TSV_ENCODING", "utf-8")
    OUTPUT_ENCODING: str = os.getenv("GITLOG_TSV_ENCODING", "utf-8")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def output_path_for(self, input_path: str) -> str:
        """The report is written next to the input: <input><OUTPUT_SUFFIX>."""
        return input_path + self.OUTPUT_SUFFIX
