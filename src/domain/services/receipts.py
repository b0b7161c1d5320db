"""Parsing of receipt-scanner model output."""

import json
import re
from decimal import Decimal, InvalidOperation

from src.domain.constants import DEFAULT_EXPENSE_CATEGORY, EXPENSE_CATEGORIES
from src.domain.errors import InvalidPayload, ReceiptScanFailed
from src.domain.models.receipts import ScannedReceipt
from src.domain.services.validation import parse_date
from src.utils.decimal_utils import quantize_money

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def clean_model_response(text: str) -> str:
    """Strip Markdown code fences surrounding a JSON answer."""
    return _CODE_FENCE.sub("", text).strip()


def parse_receipt_response(text: str) -> ScannedReceipt:
    """Turn the scanner's raw text answer into a ScannedReceipt.

    Args:
        text: Raw model output, possibly wrapped in a ```json fence.

    Returns:
        ScannedReceipt: Parsed receipt with a Decimal amount.

    Raises:
        ReceiptScanFailed: If the output is not JSON, is empty (the image
            was not a receipt) or lacks a usable amount.
    """
    try:
        data = json.loads(clean_model_response(text))
    except json.JSONDecodeError as exc:
        raise ReceiptScanFailed("Invalid response format from scanner") from exc
    if not isinstance(data, dict) or not data:
        raise ReceiptScanFailed("Image is not a receipt")

    try:
        amount = quantize_money(data.get("amount"))
    except (InvalidOperation, ValueError) as exc:
        raise ReceiptScanFailed(
            f"Invalid receipt amount: {data.get('amount')!r}"
        ) from exc
    if not amount.is_finite() or amount <= Decimal("0"):
        raise ReceiptScanFailed(
            f"Invalid receipt amount: {data.get('amount')!r}"
        )

    receipt_date = None
    if data.get("date"):
        try:
            receipt_date = parse_date(str(data["date"]))
        except InvalidPayload as exc:
            raise ReceiptScanFailed(exc.message) from exc

    category = str(data.get("category") or "").strip().lower()
    if category not in EXPENSE_CATEGORIES:
        category = DEFAULT_EXPENSE_CATEGORY

    return ScannedReceipt(
        amount=amount,
        date=receipt_date,
        description=str(data.get("description") or ""),
        merchant_name=str(data.get("merchantName") or ""),
        category=category,
    )


__all__ = ["clean_model_response", "parse_receipt_response"]
