"""
EAN modulo-10 check digit.
"""


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def compute_check_digit(payload: str) -> int:
    """
    Calculate the check digit of a 12 digit payload.

    Algorithm (positions counted from the left, starting at 1):
    1. Sum the digits at even positions (2, 4, ..., 12) and multiply by 3
    2. Add the digits at odd positions (1, 3, ..., 11)
    3. Check digit = 0 if the total ends in 0, else 10 - (total mod 10)

    EAN-8 payloads are checked the same way after left-padding with zeros.
    """
    if len(payload) != 12:
        raise ValueError(f"Payload must have exactly 12 digits, got {len(payload)}")
    if not _is_ascii_digits(payload):
        raise ValueError(f"Invalid character in payload: {payload!r}")

    weighted_sum = 0
    plain_sum = 0
    for i in range(11, 0, -2):
        weighted_sum += int(payload[i])
        plain_sum += int(payload[i - 1])

    h = (weighted_sum * 3 + plain_sum) % 10
    return 0 if h == 0 else 10 - h


def has_valid_check_digit(code: str) -> bool:
    """
    Validate the trailing check digit of a 13 digit code.

    Returns:
        True if the last digit matches the computed one
    """
    if len(code) != 13:
        return False
    if not _is_ascii_digits(code):
        return False

    return compute_check_digit(code[:12]) == int(code[12])
