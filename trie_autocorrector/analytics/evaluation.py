#!/usr/bin/env python3
"""
evaluation.py - Evaluation harness

- Loads a dictionary into an AutoCorrector.
- Reads (misspelling, expected) pairs, one whitespace-separated pair per line.
- Counts how often the expected word is the first suggestion (top1) and
  how often it is anywhere in the suggestions (topk).
- Optionally writes a JSON summary report.

Usage:
python -m trie_autocorrector.analytics.evaluation dictionary.txt pairs.txt --out results.json

"""
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from trie_autocorrector.context.normalizer import normalize_token
from trie_autocorrector.core.corrector import AutoCorrector

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


def load_pairs(path: Path) -> List[Pair]:
    """Read 'misspelling expected' lines; blank lines and '#' comments are skipped."""
    pairs: List[Pair] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, ln in enumerate(fh, 1):
            ln = ln.strip()
            if not ln or ln.startswith("#"):
                continue
            parts = ln.split()
            if len(parts) != 2:
                logger.warning("%s:%d: expected two tokens, got %d", path, lineno, len(parts))
                continue
            pairs.append((parts[0], parts[1]))
    return pairs


def evaluate(ac: AutoCorrector, pairs: Iterable[Pair]) -> Dict:
    """
    For each pair ask the corrector for suggestions on the misspelling and
    check where the expected word lands. Returns hits/total/time per bucket.
    """
    stats = {
        "top1": {"hits": 0, "total": 0},
        "topk": {"hits": 0, "total": 0},
        "time": 0.0,
    }

    t0 = time.perf_counter()
    for wrong, expected in pairs:
        target = normalize_token(expected)
        suggestions = ac.correct(wrong)
        for bucket in ("top1", "topk"):
            stats[bucket]["total"] += 1
        if suggestions and suggestions[0] == target:
            stats["top1"]["hits"] += 1
        if target in suggestions:
            stats["topk"]["hits"] += 1
    stats["time"] = time.perf_counter() - t0
    return stats


def accuracy(hits: int, total: int) -> float:
    return 100.0 * hits / total if total else 0.0


def summarize(stats: Dict) -> str:
    """Human readable summary of evaluate() output."""
    lines = ["=== Evaluation Summary ==="]
    for k in ("top1", "topk"):
        hit = stats[k]["hits"]
        tot = stats[k]["total"]
        lines.append(f"{k:5s} | hits: {hit}/{tot} | acc: {accuracy(hit, tot):.2f}%")
    tot = stats["top1"]["total"]
    avg = stats["time"] / tot if tot else 0.0
    lines.append(f"time: {stats['time']:.3f}s | avg time/query: {avg:.6f}s")
    return "\n".join(lines)


def write_report(stats: Dict, out_path: Path) -> None:
    with out_path.open("w", encoding="utf-8") as fh:
        json.dump(stats, fh, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate the corrector on misspelling pairs")
    parser.add_argument("dictionary", type=str, help="Whitespace-delimited word list")
    parser.add_argument("pairs", type=str, help="File of 'misspelling expected' lines")
    parser.add_argument("--out", type=str, default=None, help="Output JSON file")
    parser.add_argument("--max-dist", type=int, default=2)
    args = parser.parse_args(argv)

    pairs_path = Path(args.pairs)
    if not pairs_path.exists():
        print(f"Pairs file not found: {pairs_path}")
        return 1

    ac = AutoCorrector(args.dictionary, max_dist=args.max_dist)
    stats = evaluate(ac, load_pairs(pairs_path))
    print(summarize(stats))
    if args.out:
        write_report(stats, Path(args.out))
        print(f"Full JSON written to: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
