"""
shamir.py

Secret reconstruction by Lagrange interpolation at x=0, over the rationals.

Functions:
- interpolate_at(x, points) -> Fraction
- reconstruct(points, rounding=None) -> int
- round_secret(value, mode=None) -> int
- split_secret(secret, n, k, base, xs=None) -> List[Share]

Design notes:
- Shares are plain integers (no prime field): the secret is the constant term
  of an integer polynomial, and interpolation runs in fractions.Fraction so the
  result is exact and independent of point order.
- Rounding only changes the result when the points are not on an integer
  polynomial. The tie rule comes from constants.DEFAULTS['ROUNDING'].
"""

import math
from fractions import Fraction
from typing import List, Optional, Sequence
from .. import constants, dp_rng, logger
from .base_decoder import check_base, encode
from .errors import DuplicateXError, InsufficientSharesError
from .models import Point, Share


def _eval_polynomial(coeffs: List[int], x: int) -> int:
    """Evaluate polynomial with integer coefficients (constant term first) at x"""
    res = 0
    for a in reversed(coeffs):
        res = res * x + a
    return res


def _lagrange_interpolate(x: int, xs: List[int], ys: List[int]) -> Fraction:
    """
    Compute Lagrange interpolation at point x given points xs, ys.
    Raises DuplicateXError as soon as two x-coordinates collide.
    """
    assert len(xs) == len(ys)
    total = Fraction(0)
    k = len(xs)
    for j in range(k):
        basis = Fraction(1)
        xj = xs[j]
        for m in range(k):
            if m == j:
                continue
            xm = xs[m]
            denominator = xj - xm
            if denominator == 0:
                raise DuplicateXError(xj)
            basis *= Fraction(x - xm, denominator)
        total += ys[j] * basis
    return total


def interpolate_at(x: int, points: Sequence[Point]) -> Fraction:
    """Value at `x` of the lowest-degree polynomial through `points`."""
    if len(points) == 0:
        raise InsufficientSharesError(0, 1)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return _lagrange_interpolate(x, xs, ys)


def round_secret(value, mode: Optional[str] = None) -> int:
    """
    Round an interpolated value to an integer.

    half_away_from_zero: 2.5 -> 3, -2.5 -> -3
    half_even:           2.5 -> 2, 3.5 -> 4
    """
    if mode is None:
        mode = constants.DEFAULTS["ROUNDING"]
    value = Fraction(value)
    if mode == "half_away_from_zero":
        magnitude = math.floor(abs(value) + Fraction(1, 2))
        return magnitude if value >= 0 else -magnitude
    if mode == "half_even":
        return round(value)
    raise ValueError(f"unknown rounding mode {mode!r}; expected one of {constants.DEFAULTS['ROUNDING_MODES']}")


def reconstruct(points: Sequence[Point], rounding: Optional[str] = None) -> int:
    """
    Recover the secret (the polynomial's value at x=0) from k points.
    The caller is responsible for passing exactly the threshold number of points.
    """
    raw = interpolate_at(0, points)
    if raw.denominator != 1:
        logger.secure_log("warning", "Interpolated value is not an integer; rounding",
                          k=len(points), rounding=rounding or constants.DEFAULTS["ROUNDING"])
    return round_secret(raw, rounding)


def split_secret(secret: int, n: int, k: int, base: Optional[int] = None,
                 xs: Optional[Sequence[int]] = None) -> List[Share]:
    """
    Split a non-negative integer secret into n shares with threshold k.
    Each share's y value is encoded in `base`. x defaults to 1..n.
    """
    if base is None:
        base = constants.DEFAULTS["DEFAULT_SHARE_BASE"]
    check_base(base)
    if not (1 <= k <= n):
        raise ValueError("Threshold k must satisfy 1 <= k <= n")
    if secret < 0:
        raise ValueError("Secret must be non-negative")
    if xs is None:
        xs = list(range(1, n + 1))
    if len(xs) != n:
        raise ValueError("xs must contain exactly n x-coordinates")
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicateXError(x)
        seen.add(x)
    if any(x < 1 for x in xs):
        raise ValueError("x-coordinates must be positive")

    # coefficients: a_0 = secret, a_1..a_{k-1} random in [0, COEFF_BOUND)
    rng = dp_rng.get_numpy_rng()
    bound = constants.DEFAULTS["COEFF_BOUND"]
    coeffs = [secret] + [int(rng.integers(0, bound)) for _ in range(k - 1)]
    shares = []
    for x in xs:
        y = _eval_polynomial(coeffs, x)
        shares.append(Share(identifier=x, base=base, digits=encode(y, base)))
    return shares
