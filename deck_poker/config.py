"""Runtime configuration and logging setup for the entry points."""

import logging
import os
from dataclasses import dataclass

from rich.logging import RichHandler

ENV_PREFIX = "DECK_POKER_"


@dataclass
class AppConfig:
    """Entry point configuration."""

    # Web playground
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "WARNING"

    # Interactive prompt
    prompt: str = "Cards"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from DECK_POKER_* environment variables.

        Raises:
            ValueError: If DECK_POKER_PORT is not an integer or
                DECK_POKER_LOG_LEVEL is not a logging level name
        """
        defaults = cls()
        port = os.getenv(f"{ENV_PREFIX}PORT")
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper()
        # getLevelName maps known names to ints and anything else to "Level %s"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")
        return cls(
            host=os.getenv(f"{ENV_PREFIX}HOST", defaults.host),
            port=int(port) if port else defaults.port,
            log_level=log_level,
            prompt=os.getenv(f"{ENV_PREFIX}PROMPT", defaults.prompt),
        )


def configure_logging(level: str = "WARNING") -> None:
    """Route log records through rich on the root logger."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
