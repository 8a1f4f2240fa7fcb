#!/usr/bin/env python3
"""
Lightweight CLI evaluator for the labelled self-check samples.

- Runs every labelled sample through the detector a number of times
- Counts how often the base-set dominant emotion matches the expected label
  (invalid-input samples count as a hit when the detector rejects them)
- Reports the hit rate per sample and optionally saves the table as CSV

Scores are randomised per call, so rates rather than single runs are reported.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from emotion_detection.core import AnalysisStatus
from emotion_detection.inference.detector import detect_emotions
from emotion_detection.samples import LABELLED_SAMPLES
from emotion_detection.utils.config import BACKEND, BACKENDS, LOG_DIR


def evaluate(samples: List[Tuple[str, Optional[str]]], trials: int = 100, rng=None,
             backend: Optional[str] = None, verbose: bool = False) -> pd.DataFrame:
    rng = rng if rng is not None else np.random.default_rng()
    rows = []
    for text, expected in samples:
        hits = 0
        counts = {}
        for _ in range(trials):
            res = detect_emotions(text, rng=rng, backend=backend)
            if expected is None:
                label = None if res.status is AnalysisStatus.INVALID_INPUT else res.original.dominant_emotion
            else:
                label = res.original.dominant_emotion if res.ok else None
            counts[label] = counts.get(label, 0) + 1
            if label == expected:
                hits += 1
        most_common = max(counts, key=counts.get) if counts else None
        rate = float(hits) / float(trials) if trials else 0.0
        rows.append({
            "text": text,
            "expected": expected if expected is not None else "invalid",
            "most_common": most_common if most_common is not None else "invalid",
            "hit_rate": rate,
        })
        if verbose:
            print(f"{text!r} -> {counts}")
    return pd.DataFrame(rows, columns=["text", "expected", "most_common", "hit_rate"])


def main(argv=None):
    parser = argparse.ArgumentParser(description="CLI evaluator for the labelled emotion samples")
    parser.add_argument("--trials", type=int, default=100, help="Runs per sample")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible sweep")
    parser.add_argument("--backend", type=str, choices=BACKENDS, default=BACKEND, help="Base-set scoring backend")
    parser.add_argument("--csv-out", type=str, default=None, help="Where to save the results CSV")
    parser.add_argument("--verbose", action="store_true", help="Print per-sample label counts")
    args = parser.parse_args(argv)

    if args.trials <= 0 or not LABELLED_SAMPLES:
        print("Nothing to evaluate.")
        sys.exit(1)

    df = evaluate(LABELLED_SAMPLES, trials=int(args.trials), rng=np.random.default_rng(args.seed),
                  backend=args.backend, verbose=bool(args.verbose))

    print("\n=== Labelled Sample Results ===")
    print(df.to_string(index=False))
    print(f"Mean hit rate: {df['hit_rate'].mean():.4f}")

    out_path = Path(args.csv_out) if args.csv_out else LOG_DIR / "evaluate_samples_results.csv"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    print(f"Saved results to {out_path}")


if __name__ == "__main__":
    main()
