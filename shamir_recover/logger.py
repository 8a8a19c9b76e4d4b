"""
logger.py

Centralized logging helpers with sanitization so share values and recovered
secrets never end up in log output. The CLI prints the secret itself; logs
only carry coordinates, bases and counts.
"""

import logging
from typing import Any
from . import constants

LOG_FORMAT = constants.DEFAULTS["LOG_FORMAT"]
logging.basicConfig(level=constants.DEFAULTS["LOG_LEVEL"], format=LOG_FORMAT)
logger = logging.getLogger(constants.DEFAULTS["LOGGER_NAME"])

_SENSITIVE_KEYS = {"secret", "value", "digits", "y", "ys", "coeffs", "shares", "points"}


def _sanitize(obj: Any) -> Any:
    """
    Recursively sanitize common containers to avoid logging share material.
    """
    try:
        if isinstance(obj, dict):
            out = {}
            for k, v in obj.items():
                if str(k).lower() in _SENSITIVE_KEYS:
                    out[k] = "<REDACTED>"
                else:
                    out[k] = _sanitize(v)
            return out
        elif isinstance(obj, (list, tuple)):
            return type(obj)(_sanitize(x) for x in obj)
        else:
            return obj
    except Exception:
        return "<UNSANITIZABLE>"


def secure_log(level: str, msg: str, **kwargs):
    """
    Log while sanitizing kwargs.
    Example: secure_log('info', 'decoded share', x=3, base=16, y=12345)
    logs "decoded share | {'x': 3, 'base': 16, 'y': '<REDACTED>'}".
    """
    lg = getattr(logger, level.lower(), logger.info)
    sanitized = _sanitize(kwargs)
    if sanitized:
        lg(msg + " | " + str(sanitized))
    else:
        lg(msg)


def set_level(level: str) -> None:
    logger.setLevel(level.upper())
