"""
data_loader.py

Share documents -> ShareSet, and threshold selection.

JSON format:
{
  "keys": {"n": 4, "k": 3},
  "1": {"base": "10", "value": "4"},
  "2": {"base": "2", "value": "111"},
  ...
}
Every key except the metadata key is a share identifier (the x-coordinate).
Shares keep document order.
"""

import json
from typing import Any, Dict, List, Optional
from . import constants, logger
from .sharing.errors import InsufficientSharesError, ShareFormatError
from .sharing.models import Share, ShareSet


def _parse_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool):
        raise ShareFormatError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            pass
    raise ShareFormatError(f"{what} must be an integer, got {raw!r}")


def parse_share_entry(key: Any, entry: Any) -> Share:
    if not isinstance(entry, dict):
        raise ShareFormatError(f"share {key!r} must be an object with 'base' and 'value'")
    base_field = constants.DEFAULTS["BASE_FIELD"]
    value_field = constants.DEFAULTS["VALUE_FIELD"]
    if base_field not in entry or value_field not in entry:
        raise ShareFormatError(f"share {key!r} is missing '{base_field}' or '{value_field}'")
    x = _parse_int(key, "share identifier")
    base = _parse_int(entry[base_field], f"base of share {key!r}")
    digits = entry[value_field]
    if not isinstance(digits, str):
        raise ShareFormatError(f"value of share {key!r} must be a string")
    return Share(identifier=x, base=base, digits=digits)


def parse_share_document(obj: Dict[str, Any]) -> ShareSet:
    if not isinstance(obj, dict):
        raise ShareFormatError("share document must be a JSON object")
    meta_key = constants.DEFAULTS["METADATA_KEY"]
    meta = obj.get(meta_key)
    if not isinstance(meta, dict):
        raise ShareFormatError(f"share document has no '{meta_key}' metadata object")
    k_field = constants.DEFAULTS["THRESHOLD_FIELD"]
    n_field = constants.DEFAULTS["TOTAL_FIELD"]
    if k_field not in meta:
        raise ShareFormatError(f"metadata is missing threshold '{k_field}'")
    threshold = _parse_int(meta[k_field], "threshold")
    total = _parse_int(meta[n_field], "share count") if n_field in meta else None

    shares = [parse_share_entry(key, entry) for key, entry in obj.items() if key != meta_key]
    if total is not None and total != len(shares):
        logger.secure_log("warning", "Share count in metadata differs from document",
                          declared=total, found=len(shares))
    return ShareSet(threshold=threshold, total=total, shares=shares)


def load_shares_from_json(json_path: str) -> ShareSet:
    with open(json_path, "r", encoding="utf-8") as f:
        try:
            obj = json.load(f)
        except json.JSONDecodeError as e:
            raise ShareFormatError(f"{json_path}: invalid JSON ({e})") from e
    share_set = parse_share_document(obj)
    logger.secure_log("info", "Loaded share document", path=json_path,
                      k=share_set.threshold, n=share_set.total, found=len(share_set.shares))
    return share_set


def load_shares_from_csv(csv_path: str, threshold: int, total: Optional[int] = None) -> ShareSet:
    """
    CSV with columns id, base, value (one share per row, kept in row order).
    The threshold is not stored in the table, so the caller supplies it.
    """
    import pandas as pd
    id_col = constants.DEFAULTS["CSV_ID_COLUMN"]
    base_col = constants.DEFAULTS["CSV_BASE_COLUMN"]
    value_col = constants.DEFAULTS["CSV_VALUE_COLUMN"]
    # read as strings so long values and leading zeros survive
    table = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    missing = {id_col, base_col, value_col} - set(table.columns)
    if missing:
        raise ShareFormatError(f"{csv_path}: CSV is missing column(s) {sorted(missing)}")

    shares = []
    for row in table.to_dict(orient="records"):
        key = row[id_col]
        shares.append(Share(
            identifier=_parse_int(key, "share identifier"),
            base=_parse_int(row[base_col], f"base of share {key!r}"),
            digits=row[value_col],
        ))
    return ShareSet(threshold=_parse_int(threshold, "threshold"), total=total, shares=shares)


def select_threshold(shares: List[Share], k: int) -> List[Share]:
    """
    Take the first k shares. Fails before any reconstruction when fewer exist.
    """
    if k < 1:
        raise ShareFormatError(f"threshold must be at least 1, got {k}")
    if len(shares) < k:
        raise InsufficientSharesError(found=len(shares), need=k)
    return list(shares[:k])
