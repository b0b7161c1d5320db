"""Use case turning a receipt image into a prefilled transaction record."""

from dataclasses import asdict

from src.application.ports.receipt_scanner import ReceiptScannerPort
from src.application.use_cases.results import LedgerResult, failure_result
from src.domain.errors import LedgerError, ReceiptScanFailed
from src.domain.services.normalization import normalize_amount, normalize_date
from src.domain.services.receipts import parse_receipt_response
from src.infrastructure.logging.logger import get_app_logger


class ScanReceiptUseCase:
    """Ask the external scanner to read a receipt and validate its answer."""

    def __init__(self, scanner: ReceiptScannerPort, logger=None) -> None:
        self._scanner = scanner
        self._logger = logger or get_app_logger()

    def execute(self, image: bytes, mime_type: str) -> LedgerResult:
        """Scan a receipt image.

        Args:
            image: Raw image bytes.
            mime_type: Image MIME type (image/jpeg, image/png...).

        Returns:
            LedgerResult: Receipt fields with a float amount and ISO date, or
            a ReceiptScanFailed failure.
        """
        try:
            if not image:
                raise ReceiptScanFailed("Empty receipt image")
            try:
                text = self._scanner.extract_text(image, mime_type)
            except LedgerError:
                raise
            except Exception as exc:
                raise ReceiptScanFailed(f"Scanner error: {exc}") from exc
            receipt = parse_receipt_response(text)
        except LedgerError as exc:
            return failure_result(exc, self._logger, "scan receipt")

        data = asdict(receipt)
        data["amount"] = normalize_amount(receipt.amount)
        data["date"] = normalize_date(receipt.date)
        return LedgerResult.ok(data)


__all__ = ["ScanReceiptUseCase"]
