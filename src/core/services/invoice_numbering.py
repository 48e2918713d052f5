"""Invoice number generation."""

from datetime import date


class InvoiceNumberGenerator:
    """
    Formats invoice numbers from a monotonically increasing sequence.

    Numbers look like ``INV-202610-000042``: prefix, issue month, sequence.
    The sequence is global, so two invoices never share a number even when
    they are issued in different months.
    """

    def __init__(self, prefix: str = "INV"):
        if not prefix:
            raise ValueError("Invoice number prefix must not be empty")
        self.prefix = prefix

    def format(self, sequence: int, issued_on: date) -> str:
        """Build the display number for ``sequence``."""
        if sequence < 1:
            raise ValueError(f"Invoice sequence must be positive, got {sequence}")
        return f"{self.prefix}-{issued_on:%Y%m}-{sequence:06d}"
