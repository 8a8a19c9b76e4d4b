"""
run_recover.py

Command line entrypoint: recover a secret from a share document, or split a
secret into a share document. Uses centralized constants, logger and dp_rng.
"""

import argparse
import sys
from . import constants, dp_rng, logger
from .data_loader import load_shares_from_csv, load_shares_from_json, select_threshold
from .sharing.base_decoder import decode_share
from .sharing.errors import ShareError
from .sharing.shamir import reconstruct, split_secret
from .utils.serialization import dump_share_document


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="shamir-recover",
                                description="Recover a Shamir secret from base-encoded shares")
    p.add_argument("--log-level", type=str, default=constants.DEFAULTS["LOG_LEVEL"])
    sub = p.add_subparsers(dest="cmd", required=True)

    p_rec = sub.add_parser("recover", help="Reconstruct the secret from a share document")
    p_rec.add_argument("--input", type=str, default=constants.DEFAULTS["DEFAULT_INPUT"])
    p_rec.add_argument("--threshold", type=int, default=None,
                       help="threshold k for CSV input (JSON documents carry their own)")
    p_rec.add_argument("--rounding", type=str, default=None,
                       choices=constants.DEFAULTS["ROUNDING_MODES"])

    p_split = sub.add_parser("split", help="Split a secret into a share document")
    p_split.add_argument("--secret", type=int, required=True)
    p_split.add_argument("-n", type=int, required=True, help="number of shares")
    p_split.add_argument("-k", type=int, required=True, help="threshold")
    p_split.add_argument("--base", type=int, default=constants.DEFAULTS["DEFAULT_SHARE_BASE"])
    p_split.add_argument("--seed", type=int, default=None)
    p_split.add_argument("--output", type=str, default=None)
    return p.parse_args(argv)


def recover(input_path: str, threshold: int | None = None, rounding: str | None = None) -> int:
    if input_path.lower().endswith(".csv"):
        if threshold is None:
            raise ShareError("CSV input needs --threshold")
        share_set = load_shares_from_csv(input_path, threshold)
    else:
        share_set = load_shares_from_json(input_path)
    k = share_set.threshold
    logger.secure_log("info", "Minimum number of points required", k=k)

    chosen = select_threshold(share_set.shares, k)
    points = []
    for i, share in enumerate(chosen, start=1):
        point = decode_share(share)
        points.append(point)
        logger.secure_log("info", f"Parsed point {i}", x=point.x, base=share.base, y=point.y)
    return reconstruct(points, rounding)


def split(secret: int, n: int, k: int, base: int, seed: int | None, output: str | None) -> str:
    dp_rng.set_seed(seed)
    logger.secure_log("info", "Seed set", seed=dp_rng.current_seed())
    shares = split_secret(secret, n=n, k=k, base=base)
    doc = dump_share_document(shares, k)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(doc + "\n")
        logger.secure_log("info", "Wrote share document", path=output, n=n, k=k)
    return doc


def main(argv=None):
    args = parse_args(argv)
    logger.set_level(args.log_level)
    try:
        if args.cmd == "recover":
            secret = recover(args.input, args.threshold, args.rounding)
            print(f"secret: {secret}")
        else:
            doc = split(args.secret, args.n, args.k, args.base, args.seed, args.output)
            if not args.output:
                print(doc)
    except (ValueError, OSError) as e:  # ShareError is a ValueError
        logger.secure_log("error", f"An error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
