"""Command that fits a two-feature linear regression on a TSV file."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from methopts.linear_regression import LinearRegressionSGD

LEARNING_RATE = 0.01
MAX_ITERS = 1000
LOWER_BOUNDS = (-10.0, -10.0)
UPPER_BOUNDS = (10.0, 10.0)
INITIAL_BETA = (0.0, 0.0)

_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_number(token: str) -> float:
    """Parse the leading number of ``token``, ignoring anything after it."""
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return float(match.group(0))


def load_dataset(path: str | Path) -> tuple[list[list[float]], list[float]]:
    """Read ``x1<TAB>x2<TAB>target`` rows after a header line.

    Rows with fewer than three fields are skipped silently; rows that do not
    parse are skipped with a warning on stderr.
    """
    features: list[list[float]] = []
    targets: list[float] = []
    with open(path, encoding="utf-8") as infile:
        next(infile, None)
        for raw in infile:
            line = raw.rstrip("\n")
            tokens = line.split("\t")
            if tokens and tokens[-1] == "":
                tokens.pop()
            if len(tokens) < 3:
                continue
            try:
                x1, x2, target = (_parse_number(t) for t in tokens[:3])
            except ValueError:
                print(f"Warning: skipping invalid row: {line}", file=sys.stderr)
                continue
            features.append([x1, x2])
            targets.append(target)
    return features, targets


def resolve_output_path(out_arg: str | Path) -> Path:
    """Turn a directory or file argument into the path of the coefficients file."""
    out_path = Path(out_arg)
    if out_path.is_dir():
        return out_path / "beta.txt"
    if out_path.suffix:
        return out_path
    return out_path / "beta.txt"


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: train-regression <data.tsv> <output_dir_or_file>", file=sys.stderr)
        return 1

    data_file, out_arg = args[0], args[1]
    try:
        features, targets = load_dataset(data_file)
    except OSError:
        print(f"Failed to open data file: {data_file}", file=sys.stderr)
        return 1

    print(f"Loaded {len(features)} samples.")
    if not features:
        print("ERROR: No data loaded! Check your dataset file format.", file=sys.stderr)
        return 1

    model = LinearRegressionSGD(LEARNING_RATE, MAX_ITERS, LOWER_BOUNDS, UPPER_BOUNDS)
    beta = model.fit(features, targets, INITIAL_BETA)

    print("Trained beta parameters:")
    for i, b in enumerate(beta):
        print(f"  beta[{i}] = {b:g}")

    beta_path = resolve_output_path(out_arg)
    try:
        beta_path.parent.mkdir(parents=True, exist_ok=True)
        with open(beta_path, "w", encoding="utf-8") as outfile:
            outfile.writelines(f"{b:g}\n" for b in beta)
    except OSError:
        print(f'Failed to open output file: "{beta_path}"', file=sys.stderr)
        return 1

    print(f'Saved beta to "{beta_path}"')
    return 0


if __name__ == "__main__":
    sys.exit(main())