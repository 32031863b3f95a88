"""
Division — Unsigned long division with quotient-digit estimation

divmod_magnitude(a, b) returns (quotient, remainder) with
    a == b * quotient + remainder,  0 <= remainder < b

Algorithm:
1. Normalize: shift a and b left by the smallest bit count that brings the
   top digit of b to >= DIGIT_BASE / 4. This bounds the over-estimate of
   each quotient chunk. The quotient is shift-invariant; the remainder is
   shifted back at the end.
2. While the running remainder r >= b: estimate a quotient chunk d0 by
   dividing the top n digits of r by the top digit of b (n = 1, escalated to
   2 when the corrected estimate is zero), then correct: while b * d0 > r,
   step d0 down by one unit at the estimated digit position.
3. Accumulate d0 into the quotient and subtract b * d0 from r.

CRITICAL INVARIANTS:
1. A zero divisor is a precondition violation (DivisionByZero)
2. The correction loop only decrements; an under-estimate is absorbed by
   the next iteration
3. quot / rem are views of the same divmod result
"""

import logging

from bigarith.core.domain.digit import DIGIT_BITS, join_word
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.math.multiplication import multiply
from bigarith.core.math.safeguards import PreconditionViolation, require_nonzero_divisor

logger = logging.getLogger(__name__)


# =============================================================================
# PUBLIC API
# =============================================================================


def divmod_magnitude(a: Magnitude, b: Magnitude) -> tuple[Magnitude, Magnitude]:
    """
    Quotient and remainder of unsigned division.

    Args:
        a: Dividend
        b: Divisor (non-zero)

    Returns:
        (a // b, a % b)

    Raises:
        DivisionByZero: If b is zero

    Examples:
        >>> q, r = divmod_magnitude(Magnitude((7,)), Magnitude((2,)))
        >>> q.digits, r.digits
        ((3,), (1,))
    """
    require_nonzero_divisor(b.is_zero())

    if a.is_zero():
        return Magnitude.zero(), Magnitude.zero()
    if b == Magnitude.one():
        return a, Magnitude.zero()

    cmp = a.compare(b)
    if cmp < 0:
        return Magnitude.zero(), a
    if cmp == 0:
        return Magnitude.one(), Magnitude.zero()

    shift = normalization_shift(b.digits[-1])
    logger.debug(
        "long division: dividend=%d digits, divisor=%d digits, shift=%d",
        len(a.digits),
        len(b.digits),
        shift,
    )

    quotient, remainder = _divmod_normalized(a.shl(shift), b.shl(shift))
    return quotient, remainder.shr(shift)


def quot(a: Magnitude, b: Magnitude) -> Magnitude:
    return divmod_magnitude(a, b)[0]


def rem(a: Magnitude, b: Magnitude) -> Magnitude:
    return divmod_magnitude(a, b)[1]


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalization_shift(top_digit: int) -> int:
    """
    Smallest left shift that brings a non-zero top digit to >= DIGIT_BASE / 4.

    Examples:
        >>> normalization_shift(1) == DIGIT_BITS - 2
        True
        >>> normalization_shift(1 << (DIGIT_BITS - 1))
        0
    """
    threshold = 1 << (DIGIT_BITS - 2)

    shift = 0
    while top_digit < threshold:
        top_digit <<= 1
        shift += 1
    return shift


# =============================================================================
# LONG DIVISION
# =============================================================================


def _divmod_normalized(a: Magnitude, b: Magnitude) -> tuple[Magnitude, Magnitude]:
    r = a
    d = Magnitude.zero()
    n = 1

    while r >= b:
        d0, d_unit, b_unit = _estimate_chunk(r, b, n)
        prod = multiply(b, d0)
        while prod > r:
            d0 = d0.sub(d_unit)
            prod = prod.sub(b_unit)

        if d0.is_zero():
            if n == 2:
                raise PreconditionViolation(
                    "quotient estimation stalled: divisor is not normalized"
                )
            n = 2
            continue

        n = 1
        d = d.add(d0)
        r = r.sub(prod)

    return d, r


def _estimate_chunk(
    a: Magnitude, b: Magnitude, n: int
) -> tuple[Magnitude, Magnitude, Magnitude]:
    """
    Estimate of the next quotient chunk.

    Divides the top n digits of a by the top digit of b and places the result
    at the digit position it stands for.

    Returns:
        (estimate, unit, b * unit) where unit is one at the estimate's
        lowest digit position
    """
    if len(a.digits) < n:
        return Magnitude.zero(), Magnitude.zero(), Magnitude.zero()

    top = a.digits[len(a.digits) - n:]
    bn = b.digits[-1]

    estimate = []
    carry = 0
    for elem in reversed(top):
        ai = join_word(carry, elem)
        estimate.append(ai // bn)
        carry = ai % bn
    estimate.reverse()

    shift = (len(a.digits) - n) - (len(b.digits) - 1)
    chunk = Magnitude(tuple(estimate))
    if shift == 0:
        return chunk, Magnitude.one(), b

    return (
        chunk.shl_digits(shift),
        Magnitude.one().shl_digits(shift),
        b.shl_digits(shift),
    )
