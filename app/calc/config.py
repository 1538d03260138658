"""
Configuration Module

Loads settings from environment variables and .env file.
Every setting has a default, so the calculator runs without any.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

from .history import default_history_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Calculator configuration.

    All settings are loaded from environment variables.
    See config/.env.example for available options.
    """

    # === History Settings ===
    history_enabled: bool = True
    history_file: Optional[Path] = field(default_factory=default_history_path)

    # === Output Settings ===
    precision: int = 6               # Significant digits, like C++ streams
    prompt: str = ">>> "
    confirm_continue: bool = False   # Ask "Continue? (y/n)" in repeat mode

    # === Logging Settings ===
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        history_file = os.getenv("CALC_HISTORY_FILE")

        return cls(
            # History
            history_enabled=get_bool("CALC_HISTORY", True),
            history_file=Path(history_file).expanduser() if history_file else default_history_path(),

            # Output
            precision=get_int("CALC_PRECISION", 6),
            prompt=os.getenv("CALC_PROMPT", ">>> "),
            confirm_continue=get_bool("CALC_CONFIRM_CONTINUE", False),

            # Logging
            log_level=os.getenv("CALC_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("CALC_LOG_FILE") or None,
            json_logs=get_bool("CALC_JSON_LOGS", False),
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.precision < 1 or self.precision > 17:
            errors.append("CALC_PRECISION must be between 1 and 17")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"CALC_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

        return errors


# === Convenience function ===

def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from calc.config import load_config
        config = load_config()
    """
    return Config.from_env()
