"""
Sign — Three-valued sign of a signed big integer

Closed enumeration with the total order NEGATIVE < ZERO < POSITIVE.
The string values are the interchange representation (see records.py).
"""

from enum import Enum


class Sign(str, Enum):
    """Sign of a SignedInteger"""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    @property
    def rank(self) -> int:
        """Position in the order NEGATIVE < ZERO < POSITIVE: -1, 0 or 1"""
        if self is Sign.NEGATIVE:
            return -1
        if self is Sign.ZERO:
            return 0
        return 1

    def compare(self, other: "Sign") -> int:
        """
        Three-way comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        return (self.rank > other.rank) - (self.rank < other.rank)

    def negate(self) -> "Sign":
        """NEGATIVE <-> POSITIVE, ZERO stays ZERO"""
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.ZERO

    def times(self, other: "Sign") -> "Sign":
        """
        Sign of a product.

        ZERO if either factor is ZERO, POSITIVE if the signs are equal,
        NEGATIVE if they differ.
        """
        if self is Sign.ZERO or other is Sign.ZERO:
            return Sign.ZERO
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE

    # str mixin would order members alphabetically; order by rank instead
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank >= other.rank
