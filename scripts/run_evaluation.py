"""CLI entry point for the conformance and evaluation suite.

Usage:
    python scripts/run_evaluation.py                              # KATs + roundtrips, all ciphers
    python scripts/run_evaluation.py --ciphers des aes128 --sac   # subset, with SAC
    python scripts/run_evaluation.py --output results.json        # save JSON report

Exit status is 1 when any check fails.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from refcrypto.cipher.registry import CipherRegistry
from refcrypto.config import configure_logging, load_settings
from refcrypto.evaluation import compute_sac, run_roundtrip_tests
from refcrypto.evaluation.roundtrip import MODES
from refcrypto.vectors import run_known_answer_tests

logger = logging.getLogger("run_evaluation")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Known-answer, roundtrip and SAC evaluation")
    parser.add_argument(
        "--ciphers", nargs="+", default=None,
        help="Cipher registry names (default: all)",
    )
    parser.add_argument(
        "--modes", nargs="+", default=list(MODES), choices=list(MODES),
        help="Chaining modes for roundtrip tests (default: ECB CBC)",
    )
    parser.add_argument(
        "--vectors", type=int, default=100,
        help="Roundtrip vectors per (cipher, mode) (default: 100)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (default: REFCRYPTO_GLOBAL_SEED)",
    )
    parser.add_argument(
        "--sac", action="store_true",
        help="Also compute the Strict Avalanche Criterion for each cipher",
    )
    parser.add_argument(
        "--sac-trials", type=int, default=50,
        help="SAC trials per input bit (default: 50)",
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write a JSON report to this path",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "INFO")
    seed = args.seed if args.seed is not None else load_settings().global_seed

    registry = CipherRegistry()
    names = args.ciphers or registry.list_names()
    unknown = [n for n in names if not registry.exists(n)]
    if unknown:
        parser.error(f"unknown cipher(s): {', '.join(unknown)}; available: {', '.join(registry.list_names())}")

    kat = run_known_answer_tests(registry)
    roundtrips = [
        run_roundtrip_tests(name, mode, num_vectors=args.vectors, seed=seed, registry=registry)
        for name in names
        for mode in args.modes
    ]
    sac = [compute_sac(registry.create(name), trials=args.sac_trials, seed=seed) for name in names] if args.sac else []

    for r in kat:
        print(r.summary())
    for r in roundtrips:
        print(r.summary())
    for r in sac:
        print(r.summary())

    if args.output:
        report = {
            "seed": seed,
            "known_answer": [r.to_dict() for r in kat],
            "roundtrip": [r.to_dict() for r in roundtrips],
            "sac": [r.to_dict() for r in sac],
        }
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Report written to %s", out_path)

    ok = all(r.passed for r in kat) and all(r.is_perfect for r in roundtrips)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
