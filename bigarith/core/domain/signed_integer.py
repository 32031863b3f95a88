"""
SignedInteger — Signed arbitrary-precision integer

Immutable pair (sign, magnitude). Every operation reduces to a Magnitude
operation plus a sign decision over the 3x3 sign combinations.

Two division conventions are provided, both on top of the unsigned divmod:
- divmod / div / modulo (floor): the remainder takes the DIVISOR's sign.
  This is also what the Python operators //, % and divmod() use.
- quotrem / quot / rem (truncate): the remainder takes the DIVIDEND's sign.

CRITICAL INVARIANTS:
1. sign is ZERO if and only if magnitude is zero (enforced by the constructor)
2. a == b * q + r under both conventions
3. floor:    r == 0 or sign(r) == sign(b),  |r| < |b|
4. truncate: r == 0 or sign(r) == sign(a),  |r| < |b|
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from bigarith.core.domain.digit import INT_MAX, INT_MIN
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.domain.sign import Sign
from bigarith.core.math.safeguards import (
    clamp,
    require_nonzero_divisor,
    require_radix,
    validate_in_range,
    validate_int,
)


@dataclass(frozen=True)
class SignedInteger:
    """
    Signed big integer.

    Immutable (frozen=True). Construction canonicalizes: a ZERO sign or a
    zero magnitude always yields (ZERO, empty magnitude).

        >>> SignedInteger(Sign.ZERO, Magnitude((1,))).magnitude.digits
        ()
        >>> SignedInteger(Sign.POSITIVE, Magnitude()).sign
        <Sign.ZERO: 'zero'>
    """

    sign: Sign = Sign.ZERO
    magnitude: Magnitude = Magnitude()

    def __post_init__(self) -> None:
        if not isinstance(self.sign, Sign):
            raise TypeError(f"sign must be a Sign, got {type(self.sign).__name__}")
        if not isinstance(self.magnitude, Magnitude):
            raise TypeError(
                f"magnitude must be a Magnitude, got {type(self.magnitude).__name__}"
            )

        if self.sign is Sign.ZERO or self.magnitude.is_zero():
            object.__setattr__(self, "sign", Sign.ZERO)
            object.__setattr__(self, "magnitude", Magnitude.zero())

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def zero(cls) -> "SignedInteger":
        return cls(Sign.ZERO, Magnitude.zero())

    @classmethod
    def one(cls) -> "SignedInteger":
        return cls(Sign.POSITIVE, Magnitude.one())

    @classmethod
    def from_magnitude(cls, sign: Sign, magnitude: Magnitude) -> "SignedInteger":
        return cls(sign, magnitude)

    @classmethod
    def new(cls, sign: Sign, digits: Iterable[int]) -> "SignedInteger":
        return cls(sign, Magnitude.new(digits))

    @classmethod
    def from_slice(cls, sign: Sign, digits: Iterable[int]) -> "SignedInteger":
        return cls.new(sign, digits)

    @classmethod
    def from_uint(cls, n: int) -> "SignedInteger":
        """
        SignedInteger from a native unsigned word.

        Raises:
            ValueError: If n does not fit the native word
        """
        return cls(Sign.POSITIVE, Magnitude.from_uint(n))

    @classmethod
    def from_int(cls, n: int) -> "SignedInteger":
        """
        SignedInteger from a native signed word (INT_MIN included).

        Raises:
            ValueError: If n does not fit the native signed word
        """
        validate_in_range(n, "n", INT_MIN, INT_MAX)

        if n > 0:
            return cls(Sign.POSITIVE, Magnitude.from_uint(n))
        if n < 0:
            return cls(Sign.NEGATIVE, Magnitude.from_uint(-n))
        return cls.zero()

    @classmethod
    def from_integer(cls, n: int) -> "SignedInteger":
        """SignedInteger from an arbitrary Python int."""
        validate_int(n, "n")

        if n < 0:
            return cls(Sign.NEGATIVE, Magnitude.from_integer(-n))
        return cls(Sign.POSITIVE, Magnitude.from_integer(n))

    @classmethod
    def parse_bytes(cls, buf: bytes, radix: int) -> Optional["SignedInteger"]:
        """
        Parse an optionally '-'-prefixed numeral.

        Returns:
            Parsed value, or None for empty or malformed input

        Raises:
            RadixOutOfRange: If radix is outside 2..16
        """
        require_radix(radix)

        buf = bytes(buf)
        if not buf:
            return None

        sign = Sign.POSITIVE
        start = 0
        if buf[0] == ord("-"):
            sign = Sign.NEGATIVE
            start = 1

        magnitude = Magnitude.parse_bytes(buf[start:], radix)
        if magnitude is None:
            return None
        return cls(sign, magnitude)

    @classmethod
    def from_str_radix(cls, s: str, radix: int) -> Optional["SignedInteger"]:
        """
        Examples:
            >>> SignedInteger.from_str_radix("-10", 10).to_int()
            -10
            >>> SignedInteger.from_str_radix("_", 10) is None
            True
        """
        require_radix(radix)

        try:
            buf = s.encode("ascii")
        except UnicodeEncodeError:
            return None
        return cls.parse_bytes(buf, radix)

    @classmethod
    def from_str(cls, s: str) -> Optional["SignedInteger"]:
        return cls.from_str_radix(s, 10)

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    def is_not_zero(self) -> bool:
        return self.sign is not Sign.ZERO

    def is_positive(self) -> bool:
        return self.sign is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def is_nonpositive(self) -> bool:
        return self.sign is not Sign.POSITIVE

    def is_nonnegative(self) -> bool:
        return self.sign is not Sign.NEGATIVE

    def __bool__(self) -> bool:
        return self.is_not_zero()

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: "SignedInteger") -> int:
        """
        Three-way comparison.

        Differing signs decide by sign order; equal signs compare the
        magnitudes, reversed for negative values.
        """
        if self.sign is not other.sign:
            return self.sign.compare(other.sign)

        if self.sign is Sign.ZERO:
            return 0
        if self.sign is Sign.POSITIVE:
            return self.magnitude.compare(other.magnitude)
        return -self.magnitude.compare(other.magnitude)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) >= 0

    # =========================================================================
    # ADDITIVE OPERATIONS
    # =========================================================================

    def negate(self) -> "SignedInteger":
        return SignedInteger(self.sign.negate(), self.magnitude)

    def abs(self) -> "SignedInteger":
        return SignedInteger(Sign.POSITIVE, self.magnitude)

    def add(self, other: "SignedInteger") -> "SignedInteger":
        """
        Sum.

        - either operand zero: the other operand
        - same sign: magnitudes add, sign kept
        - opposite signs: smaller magnitude subtracted from the larger one,
          sign of the larger one
        """
        if self.sign is Sign.ZERO:
            return other
        if other.sign is Sign.ZERO:
            return self

        if self.sign is other.sign:
            return SignedInteger(self.sign, self.magnitude.add(other.magnitude))

        cmp = self.magnitude.compare(other.magnitude)
        if cmp > 0:
            return SignedInteger(self.sign, self.magnitude.sub(other.magnitude))
        if cmp < 0:
            return SignedInteger(other.sign, other.magnitude.sub(self.magnitude))
        return SignedInteger.zero()

    def sub(self, other: "SignedInteger") -> "SignedInteger":
        return self.add(other.negate())

    def __neg__(self) -> "SignedInteger":
        return self.negate()

    def __pos__(self) -> "SignedInteger":
        return self

    def __abs__(self) -> "SignedInteger":
        return self.abs()

    def __add__(self, other: object) -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.sub(other)

    # =========================================================================
    # MULTIPLICATIVE OPERATIONS
    # =========================================================================

    def mul(self, other: "SignedInteger") -> "SignedInteger":
        return SignedInteger(
            self.sign.times(other.sign),
            self.magnitude.mul(other.magnitude),
        )

    def divmod(self, other: "SignedInteger") -> tuple["SignedInteger", "SignedInteger"]:
        """
        Floor division: the remainder takes the divisor's sign.

        When the raw remainder is non-zero and the signs differ, the quotient
        moves one step down and the remainder becomes |b| - raw remainder.

        Raises:
            DivisionByZero: If other is zero

        Examples:
            >>> q, r = SignedInteger.from_int(-7).divmod(SignedInteger.from_int(2))
            >>> q.to_int(), r.to_int()
            (-4, 1)
        """
        require_nonzero_divisor(other.is_zero())

        d, m = self.magnitude.divmod(other.magnitude)
        quotient_sign = self.sign.times(other.sign)

        if quotient_sign is Sign.NEGATIVE and m.is_not_zero():
            return (
                SignedInteger(Sign.NEGATIVE, d.add(Magnitude.one())),
                SignedInteger(other.sign, other.magnitude.sub(m)),
            )

        return SignedInteger(quotient_sign, d), SignedInteger(other.sign, m)

    def quotrem(self, other: "SignedInteger") -> tuple["SignedInteger", "SignedInteger"]:
        """
        Truncating division: the remainder takes the dividend's sign.

        Raises:
            DivisionByZero: If other is zero

        Examples:
            >>> q, r = SignedInteger.from_int(-7).quotrem(SignedInteger.from_int(2))
            >>> q.to_int(), r.to_int()
            (-3, -1)
        """
        require_nonzero_divisor(other.is_zero())

        q, r = self.magnitude.quotrem(other.magnitude)
        return (
            SignedInteger(self.sign.times(other.sign), q),
            SignedInteger(self.sign, r),
        )

    def div(self, other: "SignedInteger") -> "SignedInteger":
        return self.divmod(other)[0]

    def modulo(self, other: "SignedInteger") -> "SignedInteger":
        return self.divmod(other)[1]

    def quot(self, other: "SignedInteger") -> "SignedInteger":
        return self.quotrem(other)[0]

    def rem(self, other: "SignedInteger") -> "SignedInteger":
        return self.quotrem(other)[1]

    def __mul__(self, other: object) -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.mul(other)

    def __floordiv__(self, other: object) -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.div(other)

    def __mod__(self, other: object) -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.modulo(other)

    def __divmod__(self, other: object) -> tuple["SignedInteger", "SignedInteger"]:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.divmod(other)

    # =========================================================================
    # SHIFTS
    # =========================================================================

    def shl(self, bits: int) -> "SignedInteger":
        """Shift the magnitude left, keeping the sign."""
        return SignedInteger(self.sign, self.magnitude.shl(bits))

    def shr(self, bits: int) -> "SignedInteger":
        """Shift the magnitude right, keeping the sign (may reach zero)."""
        return SignedInteger(self.sign, self.magnitude.shr(bits))

    def __lshift__(self, bits: int) -> "SignedInteger":
        return self.shl(bits)

    def __rshift__(self, bits: int) -> "SignedInteger":
        return self.shr(bits)

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def to_uint(self) -> int:
        """Native unsigned word; negative values convert to 0, large ones saturate."""
        if self.sign is Sign.POSITIVE:
            return self.magnitude.to_uint()
        return 0

    def to_int(self) -> int:
        """Native signed word, saturating to [INT_MIN, INT_MAX]."""
        if self.sign is Sign.POSITIVE:
            return clamp(self.magnitude.to_uint(), max_value=INT_MAX)
        if self.sign is Sign.NEGATIVE:
            return -clamp(self.magnitude.to_uint(), max_value=-INT_MIN)
        return 0

    def __int__(self) -> int:
        if self.sign is Sign.NEGATIVE:
            return -int(self.magnitude)
        return int(self.magnitude)

    def to_str_radix(self, radix: int) -> str:
        """
        Raises:
            RadixOutOfRange: If radix is outside 2..16
        """
        text = self.magnitude.to_str_radix(radix)
        if self.sign is Sign.NEGATIVE:
            return "-" + text
        return text

    def __str__(self) -> str:
        return self.to_str_radix(10)
