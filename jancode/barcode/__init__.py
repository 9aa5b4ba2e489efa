"""
JAN/EAN glyph encoding.
"""

from jancode.barcode.batch import encode_batch, parse_code_list, try_encode
from jancode.barcode.checksum import compute_check_digit, has_valid_check_digit
from jancode.barcode.encoder import encode, encode_long_form, encode_short_form
from jancode.barcode.errors import EncodeError
from jancode.barcode.tables import ParityClass, SymbolTables, get_tables
from jancode.barcode.validator import (
    detect_symbology,
    is_valid_code,
    normalize_code,
    validate_code,
)
from jancode.models.encoding import RejectionReason

__all__ = [
    "encode",
    "encode_short_form",
    "encode_long_form",
    "encode_batch",
    "parse_code_list",
    "try_encode",
    "compute_check_digit",
    "has_valid_check_digit",
    "EncodeError",
    "RejectionReason",
    "ParityClass",
    "SymbolTables",
    "get_tables",
    "detect_symbology",
    "is_valid_code",
    "normalize_code",
    "validate_code",
]
