"""
Digit — Storage unit of big integers

A digit is an unsigned integer half as wide as the native machine word:
- 16 bits on 32-bit targets (LAYOUT_16)
- 32 bits on 64-bit targets (LAYOUT_32)

One machine word splits losslessly into exactly two digits (high, low), and two
digits join losslessly back into one machine word. Every carry and borrow of
the arithmetic engine goes through this split.

CRITICAL INVARIANTS:
1. DIGIT_BASE = 2 ** DIGIT_BITS
2. join_word(*split_word(n)) == n for every 0 <= n <= WORD_MAX
3. The default layout matches the interpreter's native word size
"""

import sys
from typing import Final, Literal

from pydantic import BaseModel, Field


# =============================================================================
# LAYOUT MODEL
# =============================================================================


class DigitLayout(BaseModel):
    """
    Width configuration of the digit storage.

    Immutable model (frozen=True). Only the two canonical widths are accepted,
    everything else is derived from digit_bits.
    """

    digit_bits: Literal[16, 32] = Field(..., description="Width of one digit in bits")

    model_config = {"frozen": True}

    @property
    def base(self) -> int:
        """Digit base: 2 ** digit_bits"""
        return 1 << self.digit_bits

    @property
    def mask(self) -> int:
        """Largest digit value"""
        return self.base - 1

    @property
    def word_bits(self) -> int:
        """Width of the native machine word"""
        return self.digit_bits * 2

    @property
    def word_max(self) -> int:
        """Largest native unsigned value"""
        return (1 << self.word_bits) - 1

    @property
    def int_max(self) -> int:
        """Largest native signed value"""
        return (1 << (self.word_bits - 1)) - 1

    @property
    def int_min(self) -> int:
        """Smallest native signed value"""
        return -(1 << (self.word_bits - 1))

    def split_word(self, n: int) -> tuple[int, int]:
        """
        Split one native unsigned word into two digits.

        Args:
            n: Native unsigned value (0 <= n <= word_max)

        Returns:
            (high, low) digit pair

        Examples:
            >>> LAYOUT_32.split_word(0x1_0000_0002)
            (1, 2)
        """
        return (n >> self.digit_bits) & self.mask, n & self.mask

    def join_word(self, hi: int, lo: int) -> int:
        """
        Join two digits into one native unsigned word.

        Examples:
            >>> LAYOUT_16.join_word(1, 2)
            65538
        """
        return (hi << self.digit_bits) | lo


LAYOUT_16: Final[DigitLayout] = DigitLayout(digit_bits=16)
LAYOUT_32: Final[DigitLayout] = DigitLayout(digit_bits=32)


def layout_for_bits(bits: int) -> DigitLayout:
    """
    Canonical layout for a digit width.

    Args:
        bits: Digit width (16 or 32)

    Returns:
        LAYOUT_16 or LAYOUT_32

    Raises:
        ValueError: For any other width
    """
    if bits == 16:
        return LAYOUT_16
    if bits == 32:
        return LAYOUT_32
    raise ValueError(f"digit_bits must be 16 or 32, got {bits}")


def native_layout() -> DigitLayout:
    """Layout matching the interpreter's word size (sys.maxsize)."""
    if sys.maxsize > 2**32:
        return LAYOUT_32
    return LAYOUT_16


# =============================================================================
# DEFAULT LAYOUT CONSTANTS
# =============================================================================

DEFAULT_LAYOUT: Final[DigitLayout] = native_layout()

DIGIT_BITS: Final[int] = DEFAULT_LAYOUT.digit_bits
DIGIT_BASE: Final[int] = DEFAULT_LAYOUT.base
DIGIT_MASK: Final[int] = DEFAULT_LAYOUT.mask

# Native machine word limits, used by the saturating conversions
WORD_MAX: Final[int] = DEFAULT_LAYOUT.word_max
INT_MAX: Final[int] = DEFAULT_LAYOUT.int_max
INT_MIN: Final[int] = DEFAULT_LAYOUT.int_min


def split_word(n: int) -> tuple[int, int]:
    """Split a native word into (high, low) digits of the default layout."""
    return (n >> DIGIT_BITS) & DIGIT_MASK, n & DIGIT_MASK


def join_word(hi: int, lo: int) -> int:
    """Join (high, low) digits of the default layout into a native word."""
    return (hi << DIGIT_BITS) | lo
