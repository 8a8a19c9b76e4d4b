"""
models.py

Value types passed between the loader, the base decoder and the reconstructor.
All of them are immutable; a share lives for exactly one reconstruction.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class Share:
    identifier: int  # becomes the x-coordinate
    base: int  # 2..16
    digits: str  # value in `base`, case-insensitive 0-9a-f


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class DigitWarning:
    position: int  # index of the skipped character in the digit string
    char: str
    base: int

    def __str__(self) -> str:
        return f"invalid digit {self.char!r} at position {self.position} for base {self.base}"


class DecodeResult(NamedTuple):
    value: int
    warnings: Tuple[DigitWarning, ...] = ()


@dataclass
class ShareSet:
    threshold: int
    total: Optional[int] = None  # informational "n" from the document metadata
    shares: List[Share] = field(default_factory=list)
