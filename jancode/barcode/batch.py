"""
Encoding many codes at once.

Bad codes are skipped and reported; they never abort the rest of the batch.
"""

from collections.abc import Iterable

import structlog

from jancode.barcode.encoder import encode
from jancode.barcode.errors import EncodeError
from jancode.barcode.validator import detect_symbology, normalize_code
from jancode.models.encoding import BarcodeSymbology, BatchReport, EncodedBarcode

logger = structlog.get_logger(__name__)


def parse_code_list(text: str) -> list[str]:
    """Split text into codes, one per line, ignoring blank lines."""
    codes = []
    for line in text.splitlines():
        code = line.strip()
        if code:
            codes.append(code)
    return codes


def try_encode(code: str) -> EncodedBarcode:
    """Encode a code, returning the rejection instead of raising it."""
    symbology = detect_symbology(code)
    normalized = normalize_code(code) if symbology != BarcodeSymbology.UNKNOWN else None

    try:
        symbols = encode(code)
    except EncodeError as e:
        return EncodedBarcode(
            code=code,
            normalized_code=normalized,
            symbology=symbology,
            error=e.reason,
            message=e.message,
        )

    return EncodedBarcode(
        code=code,
        normalized_code=normalized,
        symbology=symbology,
        symbols=symbols,
    )


def encode_batch(codes: Iterable[str]) -> BatchReport:
    """
    Encode every code in order.

    Returns:
        Report holding one result per input code
    """
    results = []
    for code in codes:
        result = try_encode(code)
        if not result.is_valid:
            logger.warning(
                "Skipping invalid JAN code",
                code=code,
                reason=result.error.value if result.error else None,
                message=result.message,
            )
        results.append(result)

    report = BatchReport(results=tuple(results))
    logger.info(
        "Batch encoded",
        encoded=report.encoded_count,
        skipped=report.skipped_count,
    )
    return report
