# context.py
"""
Runtime data model for a single transformer run.
"""
from dataclasses import dataclass
from config import GlobalConfig


@dataclass
class RunContext:
    """
    Everything one run needs. This is the only object passed from the CLI
    to the orchestrator.
    """

    # --- Core paths ---
    input_path: str
    output_path: str

    # --- Global config ---
    # Separator, encodings, date formats and .env overrides
    global_config: GlobalConfig

    @classmethod
    def for_input(cls, input_path: str, global_config: GlobalConfig) -> "RunContext":
        return cls(
            input_path=input_path,
            output_path=global_config.output_path_for(input_path),
            global_config=global_config,
        )
