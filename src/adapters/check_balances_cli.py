"""CLI adapter reconciling account balances with their transactions.

Set LEDGER_OWNER to an identity-provider subject to restrict the check to a
single user. The process exits with status 1 when a discrepancy is found.
"""

import os
import sys

from src.domain.errors import LedgerError
from src.infrastructure.container import build_check_balance_invariant
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the balance reconciliation and print a summary."""
    logger = get_app_logger()
    owner_id = os.getenv("LEDGER_OWNER") or None
    use_case = build_check_balance_invariant()

    try:
        report = use_case.execute(owner_id)
    except LedgerError as exc:
        logger.error(f"Balance check failed: {exc.kind}: {exc.message}")
        sys.exit(2)

    print(
        f"Checked {report.checked_count} accounts: "
        f"{len(report.discrepancies)} discrepancies."
    )
    for item in report.discrepancies:
        print(
            f"{item.account_id} ({item.account_name}): "
            f"stored={item.stored_balance} "
            f"computed={item.computed_balance} "
            f"difference={item.difference}"
        )
    if not report.is_consistent:
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
