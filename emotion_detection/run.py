import argparse
import sys

import numpy as np

from emotion_detection.inference.predictor import predict_emotion
from emotion_detection.utils.config import BACKEND, BACKENDS

# CLI wrapper around the formatted predictor


def main(argv=None):
    parser = argparse.ArgumentParser(description="Emotion Detection CLI")
    parser.add_argument("--text", type=str, default=None, help="Text to analyse (reads stdin when omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible scores")
    parser.add_argument("--backend", type=str, choices=BACKENDS, default=BACKEND, help="Base-set scoring backend")
    args = parser.parse_args(argv)
    text = args.text if args.text is not None else sys.stdin.read()
    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    print(predict_emotion(text, rng=rng, backend=args.backend))


if __name__ == "__main__":
    main()
