"""
Core math modules for bigarith

Digit-level algorithms over Magnitude: Karatsuba multiplication, long division
and radix conversion, plus the precondition guards shared by the domain layer.

Only the safeguards are re-exported here. The algorithm modules import the
domain models, so they are imported by their full module path
(bigarith.core.math.multiplication, .division, .radix).
"""

from bigarith.core.math.safeguards import (
    RADIX_MAX,
    RADIX_MIN,
    DivisionByZero,
    NegativeDifference,
    PreconditionViolation,
    RadixOutOfRange,
    clamp,
    require_no_borrow,
    require_nonzero_divisor,
    require_radix,
    validate_digits,
    validate_in_range,
    validate_int,
    validate_non_negative,
)

__all__ = [
    # Radix bounds
    "RADIX_MIN",
    "RADIX_MAX",
    # Exceptions
    "PreconditionViolation",
    "DivisionByZero",
    "NegativeDifference",
    "RadixOutOfRange",
    # Guards
    "require_radix",
    "require_nonzero_divisor",
    "require_no_borrow",
    "validate_int",
    "validate_non_negative",
    "validate_in_range",
    "validate_digits",
    "clamp",
]
