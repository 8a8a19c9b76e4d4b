# utils/serialization.py
"""
Share document writer, the inverse of data_loader.parse_share_document:
 - shares_to_document: ShareSet-like data -> JSON-compatible dict
 - dump_share_document: same, as a JSON string
"""
import json
from typing import Any, Dict, List
from .. import constants
from ..sharing.models import Share


def shares_to_document(shares: List[Share], k: int) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        constants.DEFAULTS["METADATA_KEY"]: {
            constants.DEFAULTS["TOTAL_FIELD"]: len(shares),
            constants.DEFAULTS["THRESHOLD_FIELD"]: k,
        }
    }
    for s in shares:
        doc[str(s.identifier)] = {
            # bases are written as decimal strings, like the documents we read
            constants.DEFAULTS["BASE_FIELD"]: str(s.base),
            constants.DEFAULTS["VALUE_FIELD"]: s.digits,
        }
    return doc


def dump_share_document(shares: List[Share], k: int, indent: int = 2) -> str:
    return json.dumps(shares_to_document(shares, k), indent=indent)
