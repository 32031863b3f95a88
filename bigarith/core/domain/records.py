"""
Records — Interchange models for big integers

Immutable Pydantic models describing Magnitude and SignedInteger values as
plain JSON data. Fully compatible with the JSON Schema contracts
(bigarith/core/contracts/schema/magnitude.json, signed_integer.json).

    {"schema_version": "1", "digit_bits": 32, "digits": [1, 2]}
    {"schema_version": "1", "sign": "negative",
     "magnitude": {"schema_version": "1", "digit_bits": 32, "digits": [10]}}

Digits are little-endian and carry the digit width they were written with;
a record written with another width than the default layout is rejected on
conversion.
"""

from typing import Final, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from bigarith.core.domain.digit import DEFAULT_LAYOUT
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.domain.sign import Sign
from bigarith.core.domain.signed_integer import SignedInteger

RECORD_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# MAGNITUDE RECORD
# =============================================================================


class MagnitudeRecord(BaseModel):
    """
    Serialized Magnitude.

    Immutable model (frozen=True). Digits must be normalized: no trailing
    zero digit, zero is the empty list.
    """

    schema_version: Literal["1"] = Field(default=RECORD_SCHEMA_VERSION)
    digit_bits: Literal[16, 32] = Field(..., description="Digit width in bits")
    digits: tuple[int, ...] = Field(
        default=(), description="Little-endian digits, no trailing zero digit"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_normalized(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Trailing zero digits are rejected (the record must be canonical)"""
        if v and v[-1] == 0:
            raise ValueError("digits must not end with a zero digit")
        return v

    @model_validator(mode="after")
    def validate_digit_range(self) -> "MagnitudeRecord":
        """Every digit fits the declared width"""
        base = 1 << self.digit_bits
        for index, digit in enumerate(self.digits):
            if not 0 <= digit < base:
                raise ValueError(f"digit[{index}] must be in [0, {base}), got {digit}")
        return self

    @classmethod
    def from_magnitude(cls, value: Magnitude) -> "MagnitudeRecord":
        return cls(digit_bits=DEFAULT_LAYOUT.digit_bits, digits=value.digits)

    def to_magnitude(self) -> Magnitude:
        """
        Raises:
            ValueError: If the record was written with another digit width
        """
        if self.digit_bits != DEFAULT_LAYOUT.digit_bits:
            raise ValueError(
                f"record uses {self.digit_bits}-bit digits, "
                f"runtime uses {DEFAULT_LAYOUT.digit_bits}-bit digits"
            )
        return Magnitude(self.digits)


# =============================================================================
# SIGNED INTEGER RECORD
# =============================================================================


class SignedIntegerRecord(BaseModel):
    """
    Serialized SignedInteger.

    Immutable model (frozen=True). sign is "zero" if and only if the
    magnitude has no digits.
    """

    schema_version: Literal["1"] = Field(default=RECORD_SCHEMA_VERSION)
    sign: Sign = Field(..., description="negative / zero / positive")
    magnitude: MagnitudeRecord

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_sign_matches_magnitude(self) -> "SignedIntegerRecord":
        """ZERO sign <=> empty magnitude"""
        if (self.sign is Sign.ZERO) != (not self.magnitude.digits):
            raise ValueError(
                f"sign {self.sign.value!r} inconsistent with "
                f"{len(self.magnitude.digits)} magnitude digits"
            )
        return self

    @classmethod
    def from_signed_integer(cls, value: SignedInteger) -> "SignedIntegerRecord":
        return cls(
            sign=value.sign,
            magnitude=MagnitudeRecord.from_magnitude(value.magnitude),
        )

    def to_signed_integer(self) -> SignedInteger:
        """
        Raises:
            ValueError: If the record was written with another digit width
        """
        return SignedInteger(self.sign, self.magnitude.to_magnitude())
