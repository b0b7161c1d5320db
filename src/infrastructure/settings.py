"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
CACHE_INVALIDATION_MODES = ("log", "none")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for wiring the ledger adapters.

    Attributes:
        create_schema: Whether the container creates missing tables.
        cache_invalidation: Cache invalidation mode (log or none).
    """

    create_schema: bool = False
    cache_invalidation: str = "log"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        create_schema = (
            os.getenv("LEDGER_CREATE_SCHEMA", "false").strip().lower()
            in _TRUE_VALUES
        )
        mode = os.getenv("LEDGER_CACHE_INVALIDATION", "log").strip().lower()
        if mode not in CACHE_INVALIDATION_MODES:
            get_app_logger().warning(
                f"Unknown LEDGER_CACHE_INVALIDATION '{mode}', using 'log'"
            )
            mode = "log"
        return cls(create_schema=create_schema, cache_invalidation=mode)


__all__ = ["LedgerSettings", "CACHE_INVALIDATION_MODES"]
