"""
Pydantic models for encoder results.
"""

from jancode.models.encoding import (
    BarcodeSymbology,
    BatchReport,
    EncodedBarcode,
    RejectionReason,
)

__all__ = [
    "BarcodeSymbology",
    "RejectionReason",
    "EncodedBarcode",
    "BatchReport",
]
