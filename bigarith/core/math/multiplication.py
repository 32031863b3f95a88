"""
Multiplication — Schoolbook digit sweep and Karatsuba recursion

Base case: a single-digit operand is handled by a linear digit-times-magnitude
sweep (a Digit x Digit product fits exactly in one machine word).

Recursive case (Karatsuba), with B = DIGIT_BASE ** half:
    a = a1 * B + a0,  b = b1 * B + b0
    a * b = a1*b1 * B**2 + (a1*b1 + a0*b0 - (a1 - a0)*(b1 - b0)) * B + a0*b0

Magnitude subtraction requires minuend >= subtrahend, so the differences
(a1 - a0) and (b1 - b0) are carried as SignedDifference values: the sign of
their product decides whether |a1 - a0| * |b1 - b0| is added to or
subtracted from a1*b1 + a0*b0.

CRITICAL INVARIANTS:
1. The recursion terminates: every recursive call works on operands of at
   most ceil(max_len / 2) digits, and single-digit operands never recurse
2. The middle term is never negative (it equals a1*b0 + a0*b1)
"""

from typing import NamedTuple

from bigarith.core.domain.digit import split_word
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.domain.sign import Sign


# =============================================================================
# SIGNED DIFFERENCE
# =============================================================================


class SignedDifference(NamedTuple):
    """
    Difference of two magnitudes as (sign, |difference|).

    sign is ZERO exactly when magnitude is zero.
    """

    sign: Sign
    magnitude: Magnitude


def signed_difference(a: Magnitude, b: Magnitude) -> SignedDifference:
    """
    a - b without unsigned underflow.

    Examples:
        >>> signed_difference(Magnitude((2,)), Magnitude((5,)))
        SignedDifference(sign=<Sign.NEGATIVE: 'negative'>, magnitude=Magnitude(digits=(3,)))
    """
    cmp = a.compare(b)
    if cmp < 0:
        return SignedDifference(Sign.NEGATIVE, b.sub(a))
    if cmp > 0:
        return SignedDifference(Sign.POSITIVE, a.sub(b))
    return SignedDifference(Sign.ZERO, Magnitude.zero())


def middle_term(
    high_product: Magnitude,
    low_product: Magnitude,
    a_diff: SignedDifference,
    b_diff: SignedDifference,
) -> Magnitude:
    """
    Karatsuba middle term a1*b1 + a0*b0 - (a1 - a0)*(b1 - b0).

    Args:
        high_product: a1 * b1
        low_product: a0 * b0
        a_diff: a1 - a0
        b_diff: b1 - b0

    Returns:
        a1*b0 + a0*b1
    """
    base = high_product.add(low_product)
    product_sign = a_diff.sign.times(b_diff.sign)

    if product_sign is Sign.ZERO:
        return base

    cross = multiply(a_diff.magnitude, b_diff.magnitude)
    if product_sign is Sign.NEGATIVE:
        return base.add(cross)
    return base.sub(cross)


# =============================================================================
# BASE CASE
# =============================================================================


def multiply_digit(a: Magnitude, n: int) -> Magnitude:
    """
    Magnitude times a single digit, one carry sweep.

    Args:
        a: Multiplicand
        n: Digit (0 <= n < DIGIT_BASE)
    """
    if n == 0:
        return Magnitude.zero()
    if n == 1:
        return a

    carry = 0
    prod = []
    for ai in a.digits:
        carry, lo = split_word(ai * n + carry)
        prod.append(lo)

    if carry:
        prod.append(carry)
    return Magnitude(tuple(prod))


def cut_at(a: Magnitude, n: int) -> tuple[Magnitude, Magnitude]:
    """
    Split a magnitude at digit position n.

    Returns:
        (high, low) with a == high * DIGIT_BASE**n + low
    """
    mid = min(len(a.digits), n)
    return Magnitude(a.digits[mid:]), Magnitude(a.digits[:mid])


# =============================================================================
# KARATSUBA
# =============================================================================


def multiply(a: Magnitude, b: Magnitude) -> Magnitude:
    """
    Product of two magnitudes.

    Examples:
        >>> multiply(Magnitude((1, 2)), Magnitude((1, 2, 3))).digits
        (1, 4, 7, 6)
    """
    if a.is_zero() or b.is_zero():
        return Magnitude.zero()

    a_len, b_len = len(a.digits), len(b.digits)
    if a_len == 1:
        return multiply_digit(b, a.digits[0])
    if b_len == 1:
        return multiply_digit(a, b.digits[0])

    half = max(a_len, b_len) // 2
    a_hi, a_lo = cut_at(a, half)
    b_hi, b_lo = cut_at(b, half)

    low_product = multiply(a_lo, b_lo)
    high_product = multiply(a_hi, b_hi)
    middle = middle_term(
        high_product,
        low_product,
        signed_difference(a_hi, a_lo),
        signed_difference(b_hi, b_lo),
    )

    return (
        low_product
        .add(middle.shl_digits(half))
        .add(high_product.shl_digits(half * 2))
    )
