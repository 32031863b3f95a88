"""
Tests for SignedInteger

Covers:
1. Canonical zero and construction from a sign and a magnitude
2. Ordering across signs
3. Addition / subtraction / multiplication over every sign combination
4. Floor division (divmod) and truncating division (quotrem)
5. Native conversions with saturation
6. Parsing and formatting with a sign
"""

import dataclasses
import random

import pytest

from bigarith.core.domain.digit import INT_MAX, INT_MIN, WORD_MAX
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.domain.sign import Sign
from bigarith.core.domain.signed_integer import SignedInteger
from bigarith.core.math.safeguards import DivisionByZero, RadixOutOfRange
from tests.unit.digit_tables import DIVMOD_QUADRUPLES, MUL_TRIPLES, SUM_TRIPLES


def plus(*digits: int) -> SignedInteger:
    return SignedInteger.from_slice(Sign.POSITIVE, digits)


def minus(*digits: int) -> SignedInteger:
    return SignedInteger.from_slice(Sign.NEGATIVE, digits)


ZERO = SignedInteger.zero()
ONE = SignedInteger.one()


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Zero is always (ZERO, empty magnitude)"""

    def test_from_magnitude(self) -> None:
        def check(inp_sign: Sign, inp_n: int, ans_sign: Sign, ans_n: int) -> None:
            inp = SignedInteger.from_magnitude(inp_sign, Magnitude.from_uint(inp_n))
            assert inp.sign is ans_sign
            assert inp.magnitude == Magnitude.from_uint(ans_n)

        check(Sign.POSITIVE, 1, Sign.POSITIVE, 1)
        check(Sign.POSITIVE, 0, Sign.ZERO, 0)
        check(Sign.NEGATIVE, 1, Sign.NEGATIVE, 1)
        check(Sign.ZERO, 1, Sign.ZERO, 0)

    def test_default_is_zero(self) -> None:
        assert SignedInteger() == ZERO
        assert SignedInteger.new(Sign.NEGATIVE, []) == ZERO

    def test_type_checked(self) -> None:
        with pytest.raises(TypeError, match="sign must be a Sign"):
            SignedInteger("positive", Magnitude.one())
        with pytest.raises(TypeError, match="magnitude must be a Magnitude"):
            SignedInteger(Sign.POSITIVE, 1)

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ONE.sign = Sign.NEGATIVE

    def test_from_integer(self) -> None:
        for value in (0, 1, -1, 10**30, -(10**30)):
            assert int(SignedInteger.from_integer(value)) == value

    def test_predicates(self) -> None:
        assert ZERO.is_zero() and ZERO.is_nonnegative() and ZERO.is_nonpositive()
        assert ONE.is_positive() and ONE.is_not_zero() and not ONE.is_nonpositive()
        assert minus(1).is_negative() and not minus(1).is_nonnegative()
        assert not ZERO
        assert minus(1)


# =============================================================================
# ORDERING
# =============================================================================


class TestCompare:
    def test_increasing_sequence(self) -> None:
        vs = [(2,), (1, 1), (2, 1), (1, 1, 1)]
        nums = [minus(*v) for v in reversed(vs)] + [ZERO] + [plus(*v) for v in vs]

        for i, ni in enumerate(nums):
            for j in range(i, len(nums)):
                nj = nums[j]
                if i == j:
                    assert ni.compare(nj) == 0
                    assert ni == nj
                    assert ni <= nj and ni >= nj
                    assert not (ni < nj) and not (ni > nj)
                else:
                    assert ni.compare(nj) < 0
                    assert nj.compare(ni) > 0
                    assert ni != nj
                    assert ni < nj and ni <= nj
                    assert nj > ni and nj >= ni
                    assert not (ni >= nj)
                    assert not (nj <= ni)


# =============================================================================
# ADDITIVE / MULTIPLICATIVE
# =============================================================================


class TestArithmetic:
    def test_neg(self) -> None:
        assert -plus(1, 1, 1) == minus(1, 1, 1)
        assert -minus(1, 1, 1) == plus(1, 1, 1)
        assert -ZERO == ZERO
        assert abs(minus(3)) == plus(3)
        assert plus(3).abs() == plus(3)

    def test_add(self) -> None:
        for a_digits, b_digits, c_digits in SUM_TRIPLES:
            a, b, c = plus(*a_digits), plus(*b_digits), plus(*c_digits)
            assert a + b == c
            assert b + a == c
            assert c + (-a) == b
            assert c + (-b) == a
            assert a + (-c) == -b
            assert b + (-c) == -a
            assert (-a) + (-b) == -c
            assert a + (-a) == ZERO

    def test_sub(self) -> None:
        for a_digits, b_digits, c_digits in SUM_TRIPLES:
            a, b, c = plus(*a_digits), plus(*b_digits), plus(*c_digits)
            assert c - a == b
            assert c - b == a
            assert (-b) - a == -c
            assert (-a) - b == -c
            assert b - (-a) == c
            assert a - (-b) == c
            assert (-c) - (-a) == -b
            assert a - a == ZERO

    def test_mul(self) -> None:
        for a_digits, b_digits, c_digits in MUL_TRIPLES:
            a, b, c = plus(*a_digits), plus(*b_digits), plus(*c_digits)
            assert a * b == c
            assert b * a == c
            assert (-a) * b == -c
            assert (-b) * a == -c
            assert (-a) * (-b) == c

        for a_digits, b_digits, q_digits, r_digits in DIVMOD_QUADRUPLES:
            a, b = plus(*a_digits), plus(*b_digits)
            q, r = plus(*q_digits), plus(*r_digits)
            assert a == b * q + r
            assert a == q * b + r


# =============================================================================
# DIVISION
# =============================================================================


def division_cases():
    """(a, b, q, r) with non-negative operands and b != 0"""
    for a_digits, b_digits, c_digits in MUL_TRIPLES:
        a, b, c = plus(*a_digits), plus(*b_digits), plus(*c_digits)
        if a.is_not_zero():
            yield c, a, b, ZERO
        if b.is_not_zero():
            yield c, b, a, ZERO

    for a_digits, b_digits, q_digits, r_digits in DIVMOD_QUADRUPLES:
        yield plus(*a_digits), plus(*b_digits), plus(*q_digits), plus(*r_digits)


class TestDivmod:
    """Floor division: remainder takes the divisor's sign"""

    def check_sub(self, a, b, ans_d, ans_m) -> None:
        d, m = a.divmod(b)
        if m.is_not_zero():
            assert m.sign is b.sign
        assert m.abs() <= b.abs()
        assert a == b * d + m
        assert d == ans_d
        assert m == ans_m

    def test_divmod_sign_cases(self) -> None:
        for a, b, d, m in division_cases():
            if m.is_zero():
                self.check_sub(a, b, d, m)
                self.check_sub(a, -b, -d, m)
                self.check_sub(-a, b, -d, m)
                self.check_sub(-a, -b, d, m)
            else:
                self.check_sub(a, b, d, m)
                self.check_sub(a, -b, -d - ONE, m - b)
                self.check_sub(-a, b, -d - ONE, b - m)
                self.check_sub(-a, -b, d, -m)

    def test_operators_are_floor(self) -> None:
        a, b = SignedInteger.from_int(-7), SignedInteger.from_int(2)
        assert a // b == SignedInteger.from_int(-4)
        assert a % b == SignedInteger.from_int(1)
        assert divmod(a, b) == a.divmod(b)
        assert a.div(b) == a // b
        assert a.modulo(b) == a % b

    def test_matches_python_floor_division(self) -> None:
        rng = random.Random(5)
        for _ in range(200):
            a = rng.getrandbits(rng.randint(0, 200)) * rng.choice((-1, 1))
            b = (rng.getrandbits(rng.randint(1, 120)) | 1) * rng.choice((-1, 1))
            q, r = SignedInteger.from_integer(a).divmod(SignedInteger.from_integer(b))
            assert (int(q), int(r)) == divmod(a, b)


class TestQuotrem:
    """Truncating division: remainder takes the dividend's sign"""

    def check_sub(self, a, b, ans_q, ans_r) -> None:
        q, r = a.quotrem(b)
        if r.is_not_zero():
            assert r.sign is a.sign
        assert r.abs() <= b.abs()
        assert a == b * q + r
        assert q == ans_q
        assert r == ans_r

    def test_quotrem_sign_cases(self) -> None:
        for a, b, q, r in division_cases():
            self.check_sub(a, b, q, r)
            self.check_sub(a, -b, -q, r)
            self.check_sub(-a, b, -q, -r)
            self.check_sub(-a, -b, q, -r)

    def test_quot_rem_views(self) -> None:
        a, b = SignedInteger.from_int(-7), SignedInteger.from_int(2)
        assert a.quot(b) == SignedInteger.from_int(-3)
        assert a.rem(b) == SignedInteger.from_int(-1)

    def test_matches_truncation(self) -> None:
        rng = random.Random(6)
        for _ in range(200):
            a = rng.getrandbits(rng.randint(0, 200)) * rng.choice((-1, 1))
            b = (rng.getrandbits(rng.randint(1, 120)) | 1) * rng.choice((-1, 1))
            q, r = SignedInteger.from_integer(a).quotrem(SignedInteger.from_integer(b))
            expected_q = abs(a) // abs(b) * (1 if (a < 0) == (b < 0) else -1)
            assert int(q) == expected_q
            assert int(r) == a - b * expected_q


class TestDivisionByZero:
    def test_raises(self) -> None:
        for a in (ZERO, ONE, minus(5)):
            with pytest.raises(DivisionByZero):
                a.divmod(ZERO)
            with pytest.raises(DivisionByZero):
                a.quotrem(ZERO)
            with pytest.raises(ZeroDivisionError):
                a // ZERO


# =============================================================================
# SHIFTS
# =============================================================================


class TestShifts:
    def test_shifts_keep_sign(self) -> None:
        assert int(minus(3) << 4) == -48
        assert int(minus(48) >> 4) == -3
        assert int(plus(3) << 1) == 6

    def test_right_shift_can_reach_zero(self) -> None:
        assert (minus(1) >> 1) == ZERO
        assert (minus(1) >> 1).sign is Sign.ZERO


# =============================================================================
# NATIVE CONVERSIONS
# =============================================================================


class TestConvertInt:
    def check(self, b: SignedInteger, i: int) -> None:
        assert b == SignedInteger.from_int(i)
        assert b.to_int() == i

    def test_exact(self) -> None:
        self.check(ZERO, 0)
        self.check(ONE, 1)
        self.check(SignedInteger(Sign.POSITIVE, Magnitude.from_uint(INT_MAX)), INT_MAX)
        self.check(SignedInteger(Sign.NEGATIVE, Magnitude.from_uint(-INT_MIN)), INT_MIN)
        self.check(SignedInteger.from_int(-10), -10)

    def test_saturates(self) -> None:
        assert SignedInteger(Sign.POSITIVE, Magnitude.from_uint(INT_MAX + 1)).to_int() == INT_MAX
        assert plus(1, 2, 3).to_int() == INT_MAX
        assert SignedInteger(Sign.NEGATIVE, Magnitude.from_uint(-INT_MIN + 1)).to_int() == INT_MIN
        assert minus(1, 2, 3).to_int() == INT_MIN

    def test_from_int_range(self) -> None:
        with pytest.raises(ValueError):
            SignedInteger.from_int(INT_MAX + 1)
        with pytest.raises(ValueError):
            SignedInteger.from_int(INT_MIN - 1)


class TestConvertUint:
    def check(self, b: SignedInteger, u: int) -> None:
        assert b == SignedInteger.from_uint(u)
        assert b.to_uint() == u

    def test_exact(self) -> None:
        self.check(ZERO, 0)
        self.check(ONE, 1)
        self.check(SignedInteger(Sign.POSITIVE, Magnitude.from_uint(WORD_MAX)), WORD_MAX)

    def test_saturates(self) -> None:
        assert plus(1, 2, 3).to_uint() == WORD_MAX

    def test_negative_converts_to_zero(self) -> None:
        assert SignedInteger(Sign.NEGATIVE, Magnitude.from_uint(WORD_MAX)).to_uint() == 0
        assert minus(1, 2, 3).to_uint() == 0


# =============================================================================
# TEXT
# =============================================================================


class TestText:
    def test_to_str_radix(self) -> None:
        cases = [(10, "10"), (1, "1"), (0, "0"), (-1, "-1"), (-10, "-10")]
        for n, text in cases:
            assert SignedInteger.from_int(n).to_str_radix(10) == text
            assert str(SignedInteger.from_int(n)) == text

    def test_to_str_other_radix(self) -> None:
        assert SignedInteger.from_int(-255).to_str_radix(16) == "-ff"
        assert SignedInteger.from_int(-5).to_str_radix(2) == "-101"

    def test_from_str_radix(self) -> None:
        cases = [
            ("10", 10),
            ("1", 1),
            ("0", 0),
            ("-1", -1),
            ("-10", -10),
            ("-0", 0),
        ]
        for text, n in cases:
            assert SignedInteger.from_str_radix(text, 10) == SignedInteger.from_int(n)

    def test_malformed_input(self) -> None:
        for text in ("Z", "_", "", "-", "--1", "+1", "1-", "é"):
            assert SignedInteger.from_str_radix(text, 10) is None

    def test_parse_negate(self) -> None:
        n = SignedInteger.from_str("-10")
        assert -n == SignedInteger.from_int(10)

    def test_parse_bytes(self) -> None:
        assert SignedInteger.parse_bytes(b"-ff", 16) == SignedInteger.from_int(-255)
        assert SignedInteger.parse_bytes(b"", 16) is None

    def test_bad_radix(self) -> None:
        with pytest.raises(RadixOutOfRange):
            SignedInteger.from_str_radix("1", 17)
        with pytest.raises(RadixOutOfRange):
            SignedInteger.from_int(1).to_str_radix(1)

    def test_int_is_exact(self) -> None:
        assert int(minus(0, 0, 1)) == -int(Magnitude((0, 0, 1)))
