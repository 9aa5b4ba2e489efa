"""
Glyph string encoder for the JAN barcode font.

Short form (EAN-8):  Y d0 d1 d2 d3 K C(d4) C(d5) C(d6) C(check) Z
Long form (EAN-13):  start(d0) P(d1)..P(d6) K C(d7)..C(d12) Z

where C is the class C glyph row and P the parity class chosen by the
pattern of d0.
"""

from jancode.barcode.checksum import compute_check_digit
from jancode.barcode.errors import EncodeError
from jancode.barcode.tables import (
    CENTER_GUARD,
    SHORT_START,
    STOP,
    ParityClass,
    bar_glyph,
    parity_pattern,
    start_glyph,
)
from jancode.barcode.validator import normalize_code, validate_code
from jancode.models.encoding import RejectionReason


def _require_digits(code: str, length: int) -> None:
    if not (code.isascii() and code.isdigit()):
        raise EncodeError(RejectionReason.NON_NUMERIC_INPUT, code)
    if len(code) != length:
        raise EncodeError(
            RejectionReason.UNSUPPORTED_LENGTH,
            code,
            f"Expected {length} digits, got {len(code)}",
        )


def encode_short_form(code: str) -> str:
    """
    Encode an 8 digit code.

    The left half is written as plain digit characters. The check digit is
    always computed from the first seven digits; the eighth is ignored.
    """
    _require_digits(code, 8)

    check_digit = compute_check_digit(("00000" + code)[:12])

    symbols = [SHORT_START, code[:4], CENTER_GUARD]
    symbols.extend(bar_glyph(ParityClass.C, int(d)) for d in code[4:7])
    symbols.append(bar_glyph(ParityClass.C, check_digit))
    symbols.append(STOP)
    return "".join(symbols)


def encode_long_form(code: str) -> str:
    """
    Encode a 13 digit code.

    Raises:
        EncodeError: if the trailing check digit is wrong
    """
    _require_digits(code, 13)

    expected = compute_check_digit(code[:12])
    if int(code[12]) != expected:
        raise EncodeError(
            RejectionReason.CHECKSUM_MISMATCH,
            code,
            f"Invalid check digit {code[12]}, expected {expected}",
        )

    digits = [int(d) for d in code]
    leading = digits[0]

    symbols = [start_glyph(leading)]
    for parity, digit in zip(parity_pattern(leading), digits[1:7]):
        symbols.append(bar_glyph(parity, digit))
    symbols.append(CENTER_GUARD)
    # Right half includes the check digit itself
    symbols.extend(bar_glyph(ParityClass.C, digit) for digit in digits[7:13])
    symbols.append(STOP)
    return "".join(symbols)


def encode(code: str) -> str:
    """
    Encode a JAN/EAN code as a glyph string.

    Accepts 7 or 8 digits (EAN-8) and 12 or 13 digits (UPC-A / EAN-13);
    7 and 12 digit codes are zero-padded first.

    Args:
        code: Numeric code, already stripped of whitespace

    Returns:
        Glyph string for the JAN barcode font

    Raises:
        EncodeError: if the code is empty, non-numeric, of unsupported
            length, or (13 digits) carries a wrong check digit
    """
    validate_code(code)

    length = len(code)
    if length in (7, 8):
        return encode_short_form(normalize_code(code))
    elif length in (12, 13):
        return encode_long_form(normalize_code(code))

    raise EncodeError(
        RejectionReason.UNSUPPORTED_LENGTH,
        code,
        f"Unsupported code length: {length}",
    )
