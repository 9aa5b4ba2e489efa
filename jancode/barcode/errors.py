"""
Encoding errors.
"""

from jancode.models.encoding import RejectionReason

DEFAULT_MESSAGES = {
    RejectionReason.EMPTY_INPUT: "Code is empty",
    RejectionReason.NON_NUMERIC_INPUT: "Code contains non-numeric characters",
    RejectionReason.UNSUPPORTED_LENGTH: "Unsupported code length",
    RejectionReason.CHECKSUM_MISMATCH: "Invalid check digit",
}


class EncodeError(ValueError):
    """Raised when a code cannot be turned into a glyph string."""

    def __init__(self, reason: RejectionReason, code: str, message: str | None = None):
        # args must match the constructor so the error survives pickling
        super().__init__(reason, code, message)
        self.reason = reason
        self.code = code
        self.message = message or DEFAULT_MESSAGES[reason]

    def __str__(self) -> str:
        return f"{self.message}: {self.code!r}"
