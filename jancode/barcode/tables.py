"""
Glyph tables of the JAN barcode font.

Every character of an encoded string maps to exactly one glyph of the font.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType


class ParityClass(IntEnum):
    """Bar pattern group a digit is drawn with."""

    A = 0
    B = 1
    C = 2


# Fixed guard glyphs
SHORT_START = "Y"
CENTER_GUARD = "K"
STOP = "Z"

BAR_TABLE: Mapping[ParityClass, str] = MappingProxyType(
    {
        ParityClass.A: "0123456789",
        ParityClass.B: "ABCDEFGHIJ",
        ParityClass.C: "LMNOPQRSTU",
    }
)

START_GLYPHS: tuple[str, ...] = ("a", "b", "W", "d", "X", "f", "g", "h", "i", "j")

# Left-half parity of an EAN-13 code, selected by its leading digit
PARITY_PATTERNS: tuple[tuple[ParityClass, ...], ...] = tuple(
    tuple(ParityClass(int(c)) for c in pattern)
    for pattern in (
        "000000", "001011", "001101", "001110", "010011",
        "011001", "011100", "010101", "010110", "011010",
    )
)


def check_table_sizes(
    bars: Mapping[ParityClass, str],
    parity_patterns: tuple[tuple[ParityClass, ...], ...],
    start_glyphs: tuple[str, ...],
) -> None:
    """Raise ValueError unless every table covers the digits 0-9."""
    if set(bars) != set(ParityClass):
        raise ValueError("Bar table must have one row per parity class")
    if any(len(row) != 10 for row in bars.values()):
        raise ValueError("Bar table rows must have 10 glyphs")
    if len(start_glyphs) != 10:
        raise ValueError(f"Expected 10 start glyphs, got {len(start_glyphs)}")
    if len(parity_patterns) != 10:
        raise ValueError(f"Expected 10 parity patterns, got {len(parity_patterns)}")
    if any(len(pattern) != 6 for pattern in parity_patterns):
        raise ValueError("Parity patterns must have 6 entries")


check_table_sizes(BAR_TABLE, PARITY_PATTERNS, START_GLYPHS)


@dataclass(frozen=True)
class SymbolTables:
    """The three lookup tables bundled together."""

    bars: Mapping[ParityClass, str]
    parity_patterns: tuple[tuple[ParityClass, ...], ...]
    start_glyphs: tuple[str, ...]


_TABLES = SymbolTables(
    bars=BAR_TABLE,
    parity_patterns=PARITY_PATTERNS,
    start_glyphs=START_GLYPHS,
)


def get_tables() -> SymbolTables:
    """Get the shared, read-only glyph tables."""
    return _TABLES


def _check_digit_range(digit: int) -> None:
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit must be between 0 and 9, got {digit}")


def bar_glyph(parity: ParityClass, digit: int) -> str:
    """Glyph drawing `digit` in the given parity class."""
    _check_digit_range(digit)
    return BAR_TABLE[ParityClass(parity)][digit]


def parity_pattern(leading_digit: int) -> tuple[ParityClass, ...]:
    """Parity classes of positions 1..6 for an EAN-13 leading digit."""
    _check_digit_range(leading_digit)
    return PARITY_PATTERNS[leading_digit]


def start_glyph(leading_digit: int) -> str:
    """Start glyph for an EAN-13 leading digit."""
    _check_digit_range(leading_digit)
    return START_GLYPHS[leading_digit]
