"""
base_decoder.py

Positional decoding of share values written in bases 2..16.

Functions:
- digit_value(char) -> int | None
- decode(digits, base) -> DecodeResult(value, warnings)
- encode(value, base) -> digits
- decode_share(share) -> Point

Design notes:
- Values are accumulated as Python ints, so digit strings far longer than
  64 bits decode exactly.
- A digit that is valid hex but too large for the base is skipped and
  reported as a DigitWarning. Characters outside 0-9a-f are skipped silently.
- decode() never logs; decode_share() is the caller that surfaces warnings.
"""

from typing import List, Optional
from .. import constants, logger
from .errors import InvalidBaseError
from .models import DecodeResult, DigitWarning, Point, Share


def check_base(base: int) -> None:
    lo = constants.DEFAULTS["MIN_BASE"]
    hi = constants.DEFAULTS["MAX_BASE"]
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"base must be an integer, got {base!r}")
    if not (lo <= base <= hi):
        raise InvalidBaseError(f"base must be in [{lo}, {hi}], got {base}")


def digit_value(char: str) -> Optional[int]:
    """Map one character to its digit value, or None if it is not 0-9a-fA-F."""
    if len(char) != 1:
        return None
    idx = constants.DEFAULTS["DIGIT_ALPHABET"].find(char.lower())
    return idx if idx >= 0 else None


def decode(digits: str, base: int) -> DecodeResult:
    """
    Decode `digits` (most significant first) in `base`.
    Returns DecodeResult(value, warnings); an empty string decodes to 0.
    """
    check_base(base)
    result = 0
    warnings: List[DigitWarning] = []
    for pos, ch in enumerate(digits):
        d = digit_value(ch)
        if d is None:
            continue
        if d >= base:
            warnings.append(DigitWarning(position=pos, char=ch, base=base))
            continue
        result = result * base + d
    return DecodeResult(result, tuple(warnings))


def encode(value: int, base: int) -> str:
    """Inverse of decode for non-negative integers, lowercase digits."""
    check_base(base)
    if value < 0:
        raise ValueError("only non-negative values can be encoded")
    if value == 0:
        return "0"
    alphabet = constants.DEFAULTS["DIGIT_ALPHABET"]
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(alphabet[d])
    return "".join(reversed(out))


def decode_share(share: Share) -> Point:
    value, warnings = decode(share.digits, share.base)
    for w in warnings:
        logger.secure_log("warning", f"Share {share.identifier}: {w}, skipped",
                          x=share.identifier, base=share.base, position=w.position)
    return Point(x=share.identifier, y=value)
