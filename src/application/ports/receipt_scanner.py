"""Port for the external receipt-scanning model."""

from typing import Protocol


class ReceiptScannerPort(Protocol):
    """Port returning the raw text answer of a receipt-reading model."""

    def extract_text(self, image: bytes, mime_type: str) -> str:
        """Return the model's answer for a receipt image.

        The answer is expected to be a JSON object with amount, date,
        description, merchantName and category keys, or an empty object when
        the image is not a receipt.
        """


__all__ = ["ReceiptScannerPort"]
