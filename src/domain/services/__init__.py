"""Domain services package."""

from .ledger import (
    creation_adjustment,
    deletion_adjustments,
    signed_contribution,
    sum_contributions,
    update_adjustments,
)
from .normalization import (
    normalize_amount,
    serialize_account,
    serialize_account_summary,
    serialize_account_with_transactions,
    serialize_transaction,
)
from .receipts import parse_receipt_response
from .reconciliation import find_balance_discrepancies
from .recurrence import calculate_next_recurring_date, next_recurring_date
from .validation import parse_transaction_payload, require_owner

__all__ = [
    "calculate_next_recurring_date",
    "creation_adjustment",
    "deletion_adjustments",
    "find_balance_discrepancies",
    "next_recurring_date",
    "normalize_amount",
    "parse_receipt_response",
    "parse_transaction_payload",
    "require_owner",
    "serialize_account",
    "serialize_account_summary",
    "serialize_account_with_transactions",
    "serialize_transaction",
    "signed_contribution",
    "sum_contributions",
    "update_adjustments",
]
