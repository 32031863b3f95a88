"""
Magnitude — Unsigned arbitrary-precision integer

Immutable value type holding a little-endian sequence of digits:
digits[0] is the least significant digit, and the value is
    digits[0] + digits[1] * DIGIT_BASE + digits[2] * DIGIT_BASE**2 + ...

The class owns the linear-time primitives (add, sub, compare, shifts).
Multiplication, division and radix conversion live in bigarith.core.math
and are reached through the operator protocol.

CRITICAL INVARIANTS:
1. No trailing (most significant) zero digit is ever stored
2. Zero is the empty digit sequence
3. Every digit satisfies 0 <= d < DIGIT_BASE
4. Operations never mutate their operands, they return new values
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from bigarith.core.domain.digit import (
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    INT_MAX,
    INT_MIN,
    WORD_MAX,
    join_word,
    split_word,
)
from bigarith.core.math.safeguards import (
    NegativeDifference,
    clamp,
    require_no_borrow,
    validate_digits,
    validate_in_range,
    validate_non_negative,
)


@dataclass(frozen=True)
class Magnitude:
    """
    Unsigned big integer.

    Immutable (frozen=True). The constructor normalizes, so a denormalized
    instance cannot exist:

        >>> Magnitude((1, 2, 0, 0)).digits
        (1, 2)
        >>> Magnitude((0, 0, 0)).digits
        ()
    """

    digits: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        validate_digits(digits, DIGIT_BASE)

        end = len(digits)
        while end > 0 and digits[end - 1] == 0:
            end -= 1

        object.__setattr__(self, "digits", digits[:end])

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def zero(cls) -> "Magnitude":
        return cls(())

    @classmethod
    def one(cls) -> "Magnitude":
        return cls((1,))

    @classmethod
    def new(cls, digits: Iterable[int]) -> "Magnitude":
        """Magnitude from little-endian digits (trailing zeros are dropped)."""
        return cls(tuple(digits))

    @classmethod
    def from_slice(cls, digits: Iterable[int]) -> "Magnitude":
        return cls.new(digits)

    @classmethod
    def from_uint(cls, n: int) -> "Magnitude":
        """
        Magnitude from a native unsigned word.

        Args:
            n: 0 <= n <= WORD_MAX

        Raises:
            ValueError: If n does not fit the native word
        """
        validate_in_range(n, "n", 0, WORD_MAX)

        hi, lo = split_word(n)
        return cls((lo, hi))

    @classmethod
    def from_int(cls, n: int) -> "Magnitude":
        """
        Magnitude from a native signed word; negative values map to zero.

        Raises:
            ValueError: If n does not fit the native signed word
        """
        validate_in_range(n, "n", INT_MIN, INT_MAX)

        if n < 0:
            return cls.zero()
        return cls.from_uint(n)

    @classmethod
    def from_integer(cls, n: int) -> "Magnitude":
        """
        Magnitude from an arbitrary non-negative Python int.

        Raises:
            ValueError: If n < 0
        """
        validate_non_negative(n, "n")

        digits = []
        while n:
            digits.append(n & DIGIT_MASK)
            n >>= DIGIT_BITS
        return cls(tuple(digits))

    @classmethod
    def parse_bytes(cls, buf: bytes, radix: int) -> Optional["Magnitude"]:
        """Parse ASCII digits in the given radix; None on malformed input."""
        from bigarith.core.math.radix import parse_bytes

        return parse_bytes(buf, radix)

    @classmethod
    def from_str_radix(cls, s: str, radix: int) -> Optional["Magnitude"]:
        from bigarith.core.math.radix import parse_str

        return parse_str(s, radix)

    @classmethod
    def from_str(cls, s: str) -> Optional["Magnitude"]:
        return cls.from_str_radix(s, 10)

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_zero(self) -> bool:
        return not self.digits

    def is_not_zero(self) -> bool:
        return bool(self.digits)

    def is_positive(self) -> bool:
        return self.is_not_zero()

    def is_negative(self) -> bool:
        return False

    def is_nonpositive(self) -> bool:
        return self.is_zero()

    def is_nonnegative(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return self.is_not_zero()

    @property
    def digit_count(self) -> int:
        return len(self.digits)

    def bit_length(self) -> int:
        """Number of significant bits (0 for zero)."""
        if not self.digits:
            return 0
        return (len(self.digits) - 1) * DIGIT_BITS + self.digits[-1].bit_length()

    def abs(self) -> "Magnitude":
        return self

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: "Magnitude") -> int:
        """
        Three-way comparison.

        The representation is normalized, so a longer digit sequence is the
        larger value; equal lengths are decided by the most significant
        differing digit.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        s_len, o_len = len(self.digits), len(other.digits)
        if s_len < o_len:
            return -1
        if s_len > o_len:
            return 1

        for left, right in zip(reversed(self.digits), reversed(other.digits)):
            if left < right:
                return -1
            if left > right:
                return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) >= 0

    # =========================================================================
    # ADDITION / SUBTRACTION
    # =========================================================================

    def add(self, other: "Magnitude") -> "Magnitude":
        """Digit-wise sum with carry; a final carry appends one digit."""
        a, b = self.digits, other.digits
        if len(a) < len(b):
            a, b = b, a

        carry = 0
        total = []
        for i, ai in enumerate(a):
            bi = b[i] if i < len(b) else 0
            carry, lo = split_word(ai + bi + carry)
            total.append(lo)

        if carry:
            total.append(carry)
        return Magnitude(tuple(total))

    def sub(self, other: "Magnitude") -> "Magnitude":
        """
        Digit-wise difference with borrow.

        Each position computes DIGIT_BASE + ai - bi - borrow; a high half of
        zero means the position borrowed from the next one.

        Raises:
            NegativeDifference: If self < other
        """
        a, b = self.digits, other.digits
        new_len = max(len(a), len(b))

        borrow = 0
        diff = []
        for i in range(new_len):
            ai = a[i] if i < len(a) else 0
            bi = b[i] if i < len(b) else 0
            hi, lo = split_word(DIGIT_BASE + ai - bi - borrow)
            borrow = 1 if hi == 0 else 0
            diff.append(lo)

        require_no_borrow(borrow)
        return Magnitude(tuple(diff))

    def __add__(self, other: object) -> "Magnitude":
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Magnitude":
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Magnitude":
        if self.is_zero():
            return self
        raise NegativeDifference("cannot negate a non-zero unsigned magnitude")

    def __pos__(self) -> "Magnitude":
        return self

    # =========================================================================
    # MULTIPLICATION / DIVISION
    # =========================================================================

    def mul(self, other: "Magnitude") -> "Magnitude":
        from bigarith.core.math.multiplication import multiply

        return multiply(self, other)

    def divmod(self, other: "Magnitude") -> tuple["Magnitude", "Magnitude"]:
        """(quotient, remainder); raises DivisionByZero for a zero divisor."""
        from bigarith.core.math.division import divmod_magnitude

        return divmod_magnitude(self, other)

    def quotrem(self, other: "Magnitude") -> tuple["Magnitude", "Magnitude"]:
        # Floor and truncate conventions coincide for unsigned values
        return self.divmod(other)

    def div(self, other: "Magnitude") -> "Magnitude":
        return self.divmod(other)[0]

    def modulo(self, other: "Magnitude") -> "Magnitude":
        return self.divmod(other)[1]

    def quot(self, other: "Magnitude") -> "Magnitude":
        return self.quotrem(other)[0]

    def rem(self, other: "Magnitude") -> "Magnitude":
        return self.quotrem(other)[1]

    def __mul__(self, other: object) -> "Magnitude":
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.mul(other)

    def __floordiv__(self, other: object) -> "Magnitude":
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.div(other)

    def __mod__(self, other: object) -> "Magnitude":
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.modulo(other)

    def __divmod__(self, other: object) -> tuple["Magnitude", "Magnitude"]:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.divmod(other)

    # =========================================================================
    # SHIFTS
    # =========================================================================

    def shl(self, bits: int) -> "Magnitude":
        """
        Shift left by a number of bits.

        Whole digits are prepended as zero digits, the remaining
        bits % DIGIT_BITS are carried between adjacent digits.

        Raises:
            ValueError: If bits < 0
        """
        validate_non_negative(bits, "bits")

        n_unit, n_bits = divmod(bits, DIGIT_BITS)
        return self.shl_digits(n_unit)._shl_bits(n_bits)

    def shr(self, bits: int) -> "Magnitude":
        """
        Shift right by a number of bits (bits shifted out are discarded).

        Raises:
            ValueError: If bits < 0
        """
        validate_non_negative(bits, "bits")

        n_unit, n_bits = divmod(bits, DIGIT_BITS)
        return self.shr_digits(n_unit)._shr_bits(n_bits)

    def shl_digits(self, n_unit: int) -> "Magnitude":
        """Multiply by DIGIT_BASE ** n_unit."""
        if n_unit == 0 or self.is_zero():
            return self
        return Magnitude((0,) * n_unit + self.digits)

    def shr_digits(self, n_unit: int) -> "Magnitude":
        """Floor-divide by DIGIT_BASE ** n_unit."""
        if n_unit == 0:
            return self
        if len(self.digits) < n_unit:
            return Magnitude.zero()
        return Magnitude(self.digits[n_unit:])

    def _shl_bits(self, n_bits: int) -> "Magnitude":
        if n_bits == 0 or self.is_zero():
            return self

        carry = 0
        shifted = []
        for elem in self.digits:
            hi, lo = split_word((elem << n_bits) | carry)
            carry = hi
            shifted.append(lo)

        if carry:
            shifted.append(carry)
        return Magnitude(tuple(shifted))

    def _shr_bits(self, n_bits: int) -> "Magnitude":
        if n_bits == 0 or self.is_zero():
            return self

        borrow = 0
        shifted = [0] * len(self.digits)
        for i in range(len(self.digits) - 1, -1, -1):
            elem = self.digits[i]
            shifted[i] = (elem >> n_bits) | borrow
            borrow = (elem << (DIGIT_BITS - n_bits)) & DIGIT_MASK
        return Magnitude(tuple(shifted))

    def __lshift__(self, bits: int) -> "Magnitude":
        return self.shl(bits)

    def __rshift__(self, bits: int) -> "Magnitude":
        return self.shr(bits)

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def to_uint(self) -> int:
        """Native unsigned word, saturating at WORD_MAX."""
        if len(self.digits) == 0:
            return 0
        if len(self.digits) == 1:
            return self.digits[0]
        if len(self.digits) == 2:
            return join_word(self.digits[1], self.digits[0])
        return clamp(int(self), max_value=WORD_MAX)

    def to_int(self) -> int:
        """Native signed word, saturating at INT_MAX."""
        return clamp(self.to_uint(), max_value=INT_MAX)

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self.digits):
            value = (value << DIGIT_BITS) | digit
        return value

    def to_str_radix(self, radix: int) -> str:
        from bigarith.core.math.radix import to_str_radix

        return to_str_radix(self, radix)

    def __str__(self) -> str:
        return self.to_str_radix(10)

