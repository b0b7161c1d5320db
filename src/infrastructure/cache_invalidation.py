"""Cache invalidation adapters."""

from src.application.ports.cache_invalidation import CacheInvalidatorPort
from src.infrastructure.logging.logger import get_usage_logger


class LoggingCacheInvalidator(CacheInvalidatorPort):
    """Record invalidated view paths on the usage log.

    Presentation layers tail or subscribe to this log to refresh the
    dashboard and account pages.
    """

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_usage_logger()

    def invalidate(self, paths: list[str]) -> None:
        for path in dict.fromkeys(paths):
            self._logger.info(f"Invalidated cached view {path}")


class NullCacheInvalidator(CacheInvalidatorPort):
    """Cache invalidator that ignores every notification."""

    def invalidate(self, paths: list[str]) -> None:
        return None


__all__ = ["LoggingCacheInvalidator", "NullCacheInvalidator"]
