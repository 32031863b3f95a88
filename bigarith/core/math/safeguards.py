"""
Safeguards — Preconditions and saturation primitives

The module separates the two error classes of the arithmetic engine:
- Precondition violations (division by zero, unsigned subtraction underflow,
  radix outside 2..16) are fatal and raise PreconditionViolation subclasses
- Invalid native arguments (digits out of range, words that do not fit the
  machine word, negative shift amounts) raise ValueError

Parse failures are NOT errors of this module: parsers return None.

CRITICAL INVARIANTS:
1. An operation that violates a precondition never returns a value
2. Saturating conversions never raise, they clamp to the native range
3. All checks are deterministic and side-effect free
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# RADIX LIMITS
# =============================================================================

RADIX_MIN: Final[int] = 2
RADIX_MAX: Final[int] = 16


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(Exception):
    """
    Caller or internal-algorithm bug detected by the arithmetic engine.

    Continuing after a violation would produce a silently wrong numeric
    result, so the operation is aborted.
    """
    pass


class DivisionByZero(PreconditionViolation, ZeroDivisionError):
    """Division or remainder with a zero divisor."""
    pass


class NegativeDifference(PreconditionViolation, ArithmeticError):
    """Unsigned result would be negative (a - b with a < b, or -a with a > 0)."""
    pass


class RadixOutOfRange(PreconditionViolation, ValueError):
    """Radix outside the supported range 2..16."""
    pass


# =============================================================================
# PRECONDITION CHECKS
# =============================================================================


def require_radix(radix: int) -> int:
    """
    Check that a radix is supported.

    Args:
        radix: Requested radix

    Returns:
        radix unchanged

    Raises:
        RadixOutOfRange: If radix is not in [RADIX_MIN, RADIX_MAX]

    Examples:
        >>> require_radix(10)
        10
        >>> require_radix(17)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        RadixOutOfRange: ...
    """
    if not RADIX_MIN <= radix <= RADIX_MAX:
        raise RadixOutOfRange(
            f"radix must be in [{RADIX_MIN}, {RADIX_MAX}], got {radix}"
        )
    return radix


def require_nonzero_divisor(is_zero: bool) -> None:
    """
    Raises:
        DivisionByZero: If the divisor is zero
    """
    if is_zero:
        raise DivisionByZero("division by zero")


def require_no_borrow(borrow: int) -> None:
    """
    Check the final borrow of an unsigned subtraction.

    A non-zero borrow after the last digit means the minuend was smaller
    than the subtrahend.

    Raises:
        NegativeDifference: If borrow != 0
    """
    if borrow != 0:
        raise NegativeDifference("unsigned subtraction underflow: minuend < subtrahend")


# =============================================================================
# ARGUMENT VALIDATION
# =============================================================================


def validate_int(value: object, name: str) -> None:
    """
    Validation that a value is a Python int (bool excluded).

    Raises:
        TypeError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_non_negative(value: int, name: str) -> None:
    """
    Validation that a value is non-negative.

    Args:
        value: Checked value
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value < 0
    """
    validate_int(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Validation that a value lies in a closed range.

    Args:
        value: Checked value
        name: Parameter name (for the error message)
        min_value: Smallest accepted value (optional)
        max_value: Largest accepted value (optional)

    Raises:
        TypeError: If value is not an int
        ValueError: If value is out of range
    """
    validate_int(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def validate_digits(digits: tuple[int, ...], base: int) -> None:
    """
    Validation of a digit sequence.

    Raises:
        TypeError: If a digit is not an int
        ValueError: If a digit is outside [0, base)
    """
    for index, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise TypeError(f"digit[{index}] must be an int, got {type(digit).__name__}")
        if not 0 <= digit < base:
            raise ValueError(f"digit[{index}] must be in [0, {base}), got {digit}")


# =============================================================================
# SATURATION
# =============================================================================


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Clamp a value into a range, logging when the value was saturated.

    Used by the native conversions, which silently saturate instead of
    reporting an overflow.

    Args:
        value: Source value
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Returns:
        value limited to [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    if result != value:
        logger.debug("native conversion saturated: %s -> %s", value, result)

    return result
