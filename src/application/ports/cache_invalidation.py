"""Port for invalidating cached views after ledger mutations."""

from typing import Protocol


class CacheInvalidatorPort(Protocol):
    """Port notified with the view paths affected by a mutation."""

    def invalidate(self, paths: list[str]) -> None:
        """Invalidate cached views for the given paths."""


def dashboard_paths(account_ids, *extra: str) -> list[str]:
    """Return the dashboard path, any extra paths and one per account."""
    paths = ["/dashboard", *extra]
    for account_id in account_ids:
        paths.append(f"/account/{account_id}")
    return paths


__all__ = ["CacheInvalidatorPort", "dashboard_paths"]
