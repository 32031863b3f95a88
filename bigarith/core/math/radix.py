"""
Radix — Parsing and formatting of magnitudes in radix 2..16

Text is processed in chunks: for each radix, (chunk_base, chunk_len) is the
largest power of the radix that fits one digit, chunk_base == radix ** chunk_len.
Each chunk costs one native integer conversion instead of one big-integer
operation per character.

Parsing consumes the text from the right, chunk_len characters at a time:
    total += chunk * power;  power *= chunk_base

Formatting either emits the digits directly (when chunk_base == DIGIT_BASE,
i.e. radix 2, 4 and 16) or repeatedly divides by chunk_base, collecting
remainders. Every chunk is zero-padded to chunk_len characters, the leading
zeros of the final text are trimmed, and zero formats as "0".

CRITICAL INVARIANTS:
1. parse_str(to_str_radix(x, r), r) == x for every magnitude x and radix r
2. Malformed text (empty, invalid character for the radix) parses to None
3. A radix outside 2..16 is a precondition violation (RadixOutOfRange)
"""

import logging
from types import MappingProxyType
from typing import Final, Mapping, Optional

from bigarith.core.domain.digit import DEFAULT_LAYOUT, DigitLayout
from bigarith.core.domain.magnitude import Magnitude
from bigarith.core.math.division import divmod_magnitude
from bigarith.core.math.multiplication import multiply
from bigarith.core.math.safeguards import require_radix

logger = logging.getLogger(__name__)

# =============================================================================
# CHUNK TABLES
# =============================================================================

# radix -> (chunk_base, chunk_len) for 32-bit digits (64-bit targets)
RADIX_TABLE_32: Final[Mapping[int, tuple[int, int]]] = MappingProxyType({
    2: (4294967296, 32),
    3: (3486784401, 20),
    4: (4294967296, 16),
    5: (1220703125, 13),
    6: (2176782336, 12),
    7: (1977326743, 11),
    8: (1073741824, 10),
    9: (3486784401, 10),
    10: (1000000000, 9),
    11: (2357947691, 9),
    12: (429981696, 8),
    13: (815730721, 8),
    14: (1475789056, 8),
    15: (2562890625, 8),
    16: (4294967296, 8),
})

# radix -> (chunk_base, chunk_len) for 16-bit digits (32-bit targets)
RADIX_TABLE_16: Final[Mapping[int, tuple[int, int]]] = MappingProxyType({
    2: (65536, 16),
    3: (59049, 10),
    4: (65536, 8),
    5: (15625, 6),
    6: (46656, 6),
    7: (16807, 5),
    8: (32768, 5),
    9: (59049, 5),
    10: (10000, 4),
    11: (14641, 4),
    12: (20736, 4),
    13: (28561, 4),
    14: (38416, 4),
    15: (50625, 4),
    16: (65536, 4),
})

_DIGIT_CHARS: Final[str] = "0123456789abcdef"

# Accepted characters (both letter cases) -> digit value
_CHAR_VALUES: Final[Mapping[str, int]] = MappingProxyType({
    **{ch: value for value, ch in enumerate(_DIGIT_CHARS)},
    **{ch.upper(): value for value, ch in enumerate(_DIGIT_CHARS)},
})


def get_radix_base(radix: int, layout: DigitLayout = DEFAULT_LAYOUT) -> tuple[int, int]:
    """
    Chunk parameters for a radix.

    Args:
        radix: 2..16
        layout: Digit layout selecting the table (default: native layout)

    Returns:
        (chunk_base, chunk_len)

    Raises:
        RadixOutOfRange: If radix is outside 2..16

    Examples:
        >>> from bigarith.core.domain.digit import LAYOUT_16
        >>> get_radix_base(10, LAYOUT_16)
        (10000, 4)
    """
    require_radix(radix)

    if layout.digit_bits == 32:
        return RADIX_TABLE_32[radix]
    return RADIX_TABLE_16[radix]


# =============================================================================
# PARSING
# =============================================================================


def _parse_chunk(chunk: str, radix: int) -> Optional[int]:
    """Native integer value of a chunk, None if a character is invalid."""
    value = 0
    for ch in chunk:
        digit = _CHAR_VALUES.get(ch, radix)
        if digit >= radix:
            logger.debug("invalid character %r for radix %d", ch, radix)
            return None
        value = value * radix + digit
    return value


def parse_str(s: str, radix: int) -> Optional[Magnitude]:
    """
    Parse a magnitude.

    Args:
        s: Digits of the radix, most significant first, no sign and no prefix
        radix: 2..16

    Returns:
        Parsed magnitude, or None for empty or malformed input

    Raises:
        RadixOutOfRange: If radix is outside 2..16

    Examples:
        >>> parse_str("ff", 16).digits
        (255,)
        >>> parse_str("Z", 10) is None
        True
    """
    chunk_base, chunk_len = get_radix_base(radix)

    if not s:
        logger.debug("empty input for radix %d", radix)
        return None

    base_num = Magnitude.from_uint(chunk_base)
    total = Magnitude.zero()
    power = Magnitude.one()

    end = len(s)
    while True:
        start = max(end - chunk_len, 0)
        value = _parse_chunk(s[start:end], radix)
        if value is None:
            return None

        total = total.add(multiply(Magnitude.from_uint(value), power))
        if start == 0:
            return total

        end = start
        power = multiply(power, base_num)


def parse_bytes(buf: bytes, radix: int) -> Optional[Magnitude]:
    """Parse ASCII bytes; non-ASCII input is malformed (None)."""
    try:
        text = bytes(buf).decode("ascii")
    except UnicodeDecodeError:
        require_radix(radix)
        logger.debug("non-ASCII input for radix %d", radix)
        return None
    return parse_str(text, radix)


# =============================================================================
# FORMATTING
# =============================================================================


def _format_chunk(value: int, radix: int, width: int) -> str:
    chars = []
    while value:
        value, digit = divmod(value, radix)
        chars.append(_DIGIT_CHARS[digit])
    return "".join(reversed(chars)).rjust(width, "0")


def _convert_base(n: Magnitude, chunk_base: int) -> list[int]:
    """Little-endian chunks of n in base chunk_base."""
    divider = Magnitude.from_uint(chunk_base)

    chunks = []
    r = n
    while r.is_not_zero():
        r, chunk = divmod_magnitude(r, divider)
        chunks.append(chunk.to_uint())
    return chunks


def to_str_radix(n: Magnitude, radix: int) -> str:
    """
    Format a magnitude in a radix (lowercase letters).

    Raises:
        RadixOutOfRange: If radix is outside 2..16

    Examples:
        >>> to_str_radix(Magnitude((255,)), 16)
        'ff'
        >>> to_str_radix(Magnitude(), 2)
        '0'
    """
    chunk_base, chunk_len = get_radix_base(radix)

    if n.is_zero():
        return "0"

    if chunk_base == DEFAULT_LAYOUT.base:
        chunks = list(n.digits)
    else:
        chunks = _convert_base(n, chunk_base)

    text = "".join(_format_chunk(c, radix, chunk_len) for c in reversed(chunks))
    return text.lstrip("0")
