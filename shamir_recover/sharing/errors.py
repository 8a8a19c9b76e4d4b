# -*- coding: utf-8 -*-
"""
Custom exception types for share decoding and secret reconstruction.
"""

from __future__ import annotations


class ShareError(ValueError):
    """
    Base class for every fatal share / reconstruction error.

    Invalid digits inside a share are not errors: they are reported as
    DigitWarning records and decoding continues.
    """
    pass


class DuplicateXError(ShareError):
    """
    Raised when two interpolation points share an x-coordinate.

    The Lagrange denominator x_j - x_i would be zero, so the reconstruction is
    aborted without returning a partial result.
    """

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"x values must be unique: x={x} appears more than once")


class InsufficientSharesError(ShareError):
    """
    Raised when fewer shares are available than the threshold requires.
    """

    def __init__(self, found: int, need: int):
        self.found = found
        self.need = need
        super().__init__(f"not enough shares: found {found}, need {need}")


class InvalidBaseError(ShareError):
    """
    Raised for a base outside the supported range.
    """
    pass


class ShareFormatError(ShareError):
    """
    Raised when a share document or one of its entries is malformed.
    """
    pass
