"""
Domain models and value objects.

Contains the fundamental values: DigitLayout, Sign, Magnitude, SignedInteger
and their serialized records.
"""

from bigarith.core.domain.digit import (
    DEFAULT_LAYOUT,
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    INT_MAX,
    INT_MIN,
    LAYOUT_16,
    LAYOUT_32,
    WORD_MAX,
    DigitLayout,
    join_word,
    layout_for_bits,
    native_layout,
    split_word,
)
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.domain.records import MagnitudeRecord, SignedIntegerRecord
from bigarith.core.domain.sign import Sign
from bigarith.core.domain.signed_integer import SignedInteger

__all__ = [
    # Digit layout
    "DigitLayout",
    "LAYOUT_16",
    "LAYOUT_32",
    "DEFAULT_LAYOUT",
    "DIGIT_BITS",
    "DIGIT_BASE",
    "DIGIT_MASK",
    "WORD_MAX",
    "INT_MAX",
    "INT_MIN",
    "layout_for_bits",
    "native_layout",
    "split_word",
    "join_word",
    # Values
    "Sign",
    "Magnitude",
    "SignedInteger",
    # Records
    "MagnitudeRecord",
    "SignedIntegerRecord",
]
