"""
constants.py

Centralized constants for shamir_recover. Covers the digit alphabet and base
range used by the decoder, the share-document layout read by data_loader,
the rounding policy of the reconstructor and the logging defaults.
"""

from typing import Dict, Any

DEFAULTS: Dict[str, Any] = {
    # Base decoding
    "DIGIT_ALPHABET": "0123456789abcdef",
    "MIN_BASE": 2,
    "MAX_BASE": 16,

    # Share document layout (JSON)
    # {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}, ...}
    "METADATA_KEY": "keys",
    "THRESHOLD_FIELD": "k",
    "TOTAL_FIELD": "n",
    "BASE_FIELD": "base",
    "VALUE_FIELD": "value",
    "DEFAULT_INPUT": "input.json",

    # CSV share tables
    "CSV_ID_COLUMN": "id",
    "CSV_BASE_COLUMN": "base",
    "CSV_VALUE_COLUMN": "value",

    # Reconstruction
    # Exact rational arithmetic only needs rounding when the shares do not lie
    # on an integer polynomial. "half_away_from_zero" matches C round().
    "ROUNDING": "half_away_from_zero",
    "ROUNDING_MODES": ("half_away_from_zero", "half_even"),

    # Share generation
    "DEFAULT_SEED": 0,
    "COEFF_BOUND": 1 << 31,  # coefficients drawn from [0, COEFF_BOUND)
    "DEFAULT_SHARE_BASE": 10,

    # Logging
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "LOG_LEVEL": "INFO",
    "LOGGER_NAME": "shamir_recover",
}

# convenience accessors
MIN_BASE = DEFAULTS["MIN_BASE"]
MAX_BASE = DEFAULTS["MAX_BASE"]
ROUNDING = DEFAULTS["ROUNDING"]


def update_from_dict(d):
    DEFAULTS.update(d)
    # update convenience names
    globals()["MIN_BASE"] = DEFAULTS["MIN_BASE"]
    globals()["MAX_BASE"] = DEFAULTS["MAX_BASE"]
    globals()["ROUNDING"] = DEFAULTS["ROUNDING"]
