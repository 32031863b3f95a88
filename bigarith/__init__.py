"""
bigarith — Arbitrary-precision integer arithmetic

Unsigned magnitudes and signed integers stored as little-endian digits of
half the native word width, with Karatsuba multiplication, long division,
radix 2..16 text conversion and saturating native conversions.

    >>> from bigarith import SignedInteger
    >>> a = SignedInteger.from_str("-7")
    >>> b = SignedInteger.from_int(2)
    >>> [str(x) for x in a.divmod(b)]
    ['-4', '1']
    >>> [str(x) for x in a.quotrem(b)]
    ['-3', '-1']
"""

from bigarith.core.domain import (
    DEFAULT_LAYOUT,
    DIGIT_BASE,
    DIGIT_BITS,
    INT_MAX,
    INT_MIN,
    WORD_MAX,
    DigitLayout,
    Magnitude,
    MagnitudeRecord,
    Sign,
    SignedInteger,
    SignedIntegerRecord,
)
from bigarith.core.math.safeguards import (
    DivisionByZero,
    NegativeDifference,
    PreconditionViolation,
    RadixOutOfRange,
)

__version__ = "0.1.0"

__all__ = [
    # Layout
    "DigitLayout",
    "DEFAULT_LAYOUT",
    "DIGIT_BITS",
    "DIGIT_BASE",
    "WORD_MAX",
    "INT_MAX",
    "INT_MIN",
    # Values
    "Sign",
    "Magnitude",
    "SignedInteger",
    # Records
    "MagnitudeRecord",
    "SignedIntegerRecord",
    # Errors
    "PreconditionViolation",
    "DivisionByZero",
    "NegativeDifference",
    "RadixOutOfRange",
]
