"""
Input validation for JAN/EAN codes.
"""

from jancode.barcode.checksum import has_valid_check_digit
from jancode.barcode.errors import EncodeError
from jancode.models.encoding import BarcodeSymbology, RejectionReason

SUPPORTED_LENGTHS = (7, 8, 12, 13)


def detect_symbology(code: str) -> BarcodeSymbology:
    """
    Detect barcode symbology from code.

    7 digit codes are EAN-8 codes missing their leading zero.

    Args:
        code: Barcode string

    Returns:
        Detected symbology
    """
    if not (code.isascii() and code.isdigit()):
        return BarcodeSymbology.UNKNOWN

    length = len(code)

    if length == 13:
        return BarcodeSymbology.EAN_13
    elif length == 12:
        return BarcodeSymbology.UPC_A
    elif length == 8 or length == 7:
        return BarcodeSymbology.EAN_8
    else:
        return BarcodeSymbology.UNKNOWN


def validate_code(code: str) -> BarcodeSymbology:
    """
    Reject empty and non-numeric input.

    Length is not checked here; unsupported lengths come back as
    BarcodeSymbology.UNKNOWN and are rejected by the encoder.

    Raises:
        EncodeError: if the code is empty or has a non-digit character
    """
    if code == "":
        raise EncodeError(RejectionReason.EMPTY_INPUT, code)
    if not (code.isascii() and code.isdigit()):
        raise EncodeError(RejectionReason.NON_NUMERIC_INPUT, code)

    return detect_symbology(code)


def normalize_code(code: str) -> str:
    """
    Pad a code to the length it is encoded at.

    - 7 digits: leading 0 added, encoded as EAN-8
    - 12 digits (UPC-A): leading 0 added, encoded as EAN-13
    - Others: returned as-is
    """
    if len(code) in (7, 12):
        return "0" + code
    return code


def is_valid_code(code: str) -> tuple[bool, BarcodeSymbology, str]:
    """
    Validate a code completely without raising.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    try:
        symbology = validate_code(code)
    except EncodeError as e:
        return False, BarcodeSymbology.UNKNOWN, e.message

    if symbology == BarcodeSymbology.UNKNOWN:
        return False, symbology, f"Unsupported code length: {len(code)}"

    # EAN-8 check digits are always recomputed, never verified
    if symbology in (BarcodeSymbology.EAN_13, BarcodeSymbology.UPC_A):
        if not has_valid_check_digit(normalize_code(code)):
            return False, symbology, f"Invalid {symbology.value} checksum"

    return True, symbology, ""
