"""Domain constants for the balance ledger."""

INCOME = "INCOME"
EXPENSE = "EXPENSE"

TRANSACTION_TYPES = (EXPENSE, INCOME)

DAILY = "DAILY"
WEEKLY = "WEEKLY"
MONTHLY = "MONTHLY"
YEARLY = "YEARLY"

RECURRING_INTERVALS = (DAILY, WEEKLY, MONTHLY, YEARLY)

ACCOUNT_TYPES = ("CURRENT", "SAVINGS")

EXPENSE_CATEGORIES = (
    "housing",
    "transportation",
    "groceries",
    "utilities",
    "entertainment",
    "food",
    "shopping",
    "healthcare",
    "education",
    "personal",
    "travel",
    "insurance",
    "gifts",
    "bills",
    "other-expense",
)

DEFAULT_EXPENSE_CATEGORY = "other-expense"


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "DAILY",
    "WEEKLY",
    "MONTHLY",
    "YEARLY",
    "RECURRING_INTERVALS",
    "ACCOUNT_TYPES",
    "EXPENSE_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORY",
]
