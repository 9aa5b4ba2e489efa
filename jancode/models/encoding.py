"""
Result models for JAN code encoding.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BarcodeSymbology(str, Enum):
    """Input forms accepted by the encoder."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    UNKNOWN = "UNKNOWN"


class RejectionReason(str, Enum):
    """Why a code could not be encoded."""

    EMPTY_INPUT = "empty_input"
    NON_NUMERIC_INPUT = "non_numeric_input"
    UNSUPPORTED_LENGTH = "unsupported_length"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class EncodedBarcode(BaseModel):
    """Outcome of encoding a single code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="The code as supplied")
    normalized_code: str | None = Field(
        None, description="Zero-padded 8 or 13 digit form that was encoded"
    )
    symbology: BarcodeSymbology = Field(default=BarcodeSymbology.UNKNOWN)
    symbols: str | None = Field(None, description="Glyph string for the barcode font")

    error: RejectionReason | None = None
    message: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the code was encoded."""
        return self.error is None and self.symbols is not None


class BatchReport(BaseModel):
    """
    Results of encoding a list of codes.

    Rejected codes are kept in order alongside the encoded ones so callers can
    report them without re-running the batch.
    """

    model_config = ConfigDict(frozen=True)

    results: tuple[EncodedBarcode, ...] = ()

    @property
    def encoded(self) -> list[EncodedBarcode]:
        return [r for r in self.results if r.is_valid]

    @property
    def skipped(self) -> list[EncodedBarcode]:
        return [r for r in self.results if not r.is_valid]

    @property
    def encoded_count(self) -> int:
        return len(self.encoded)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
