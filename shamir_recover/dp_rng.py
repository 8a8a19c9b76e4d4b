"""
dp_rng.py

Central RNG utilities for reproducible share generation and to remove magic seeds.

Usage:
    from shamir_recover import dp_rng
    dp_rng.set_seed(42)
    rng = dp_rng.get_numpy_rng()
"""

import random
import secrets
import numpy as np
from typing import Optional
from . import constants

_numpy_rng: Optional[np.random.Generator] = None
_current_seed: Optional[int] = None


def set_seed(seed: Optional[int]):
    """
    Set global seed for python.random and numpy.
    Use this function once at bootstrap. None draws a fresh seed from the OS.
    """
    global _numpy_rng, _current_seed
    if seed is None:
        seed = secrets.randbelow(2**31 - 1)
    _current_seed = int(seed)

    # python random
    random.seed(_current_seed)

    # numpy
    _numpy_rng = np.random.default_rng(_current_seed)


def get_numpy_rng() -> np.random.Generator:
    global _numpy_rng
    if _numpy_rng is None:
        set_seed(constants.DEFAULTS.get("DEFAULT_SEED", 0))
    return _numpy_rng


def current_seed() -> Optional[int]:
    return _current_seed
