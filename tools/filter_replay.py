"""
Filter Replayer

Runs a recorded signal through a One Euro filter and writes the filtered
samples as CSV. Use this to tune presets offline against real recordings.

Input rows are "time,v0[,v1,...]". One value column picks the scalar
filter, two a 2D filter, three a 3D filter. Pass --kind to filter three
columns as a direction or four as a rotation [w, x, y, z].

Usage:
    python tools/filter_replay.py --input hand.csv
    python tools/filter_replay.py --input head.csv --kind rotation --preset rotation
    python tools/filter_replay.py --input ticks.csv --delta --beta 0.5 --output out.csv
"""

import argparse
import csv
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from one_euro.filters.factory import create_filter
from one_euro.utils.config import get_filter_params, load_config

logger = logging.getLogger(__name__)

KIND_BY_COLUMNS = {1: "scalar", 2: "vector2", 3: "vector3"}


def load_recording(input_file: str) -> List[Tuple[float, List[float]]]:
    """Load (time, values) rows, skipping blank lines and '#' comments."""
    samples = []

    with open(input_file, 'r', newline='') as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row or row[0].lstrip().startswith('#'):
                continue
            try:
                values = [float(v) for v in row]
            except ValueError:
                if line_no == 1:
                    continue  # header
                raise ValueError(f"{input_file}:{line_no}: non-numeric value in {row}")
            samples.append((values[0], values[1:]))

    return samples


def replay(samples, kind: Optional[str], params, delta: bool = False):
    """Filter samples and return (time, filtered values) rows."""
    if not samples:
        return []

    columns = len(samples[0][1])
    kind = kind or KIND_BY_COLUMNS.get(columns)
    if kind is None:
        raise ValueError(f"Cannot pick a filter for {columns} value columns; pass --kind")

    filt = create_filter(kind, params)
    first_time, first_values = samples[0]
    filt.reset(first_values[0] if kind == "scalar" else first_values)
    logger.info(f"Replaying {len(samples)} samples through {type(filt).__name__} ({params})")

    rows = []
    for t, values in samples:
        value = values[0] if kind == "scalar" else values
        if delta:
            out = filt.delta_step(value, t)
            t = filt.time
        else:
            out = filt.step(t, value)
        rows.append((t, np.atleast_1d(out).tolist()))

    return rows


def write_rows(rows, out):
    writer = csv.writer(out)
    for t, values in rows:
        writer.writerow([f"{t:.6f}"] + [f"{v:.6f}" for v in values])


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replay a recorded signal through a One Euro filter")
    parser.add_argument("--input", "-i", required=True, help="Input CSV file")
    parser.add_argument("--output", "-o", help="Output CSV file (default: stdout)")
    parser.add_argument("--kind", "-k", choices=["scalar", "vector2", "vector3", "direction", "rotation"],
                        help="Filter kind (default: from column count)")
    parser.add_argument("--config", "-c", help="Config file with filter presets")
    parser.add_argument("--preset", "-p", default="default", help="Filter preset name")
    parser.add_argument("--beta", type=float, help="Override preset beta")
    parser.add_argument("--min-cutoff", type=float, help="Override preset min_cutoff")
    parser.add_argument("--delta", action="store_true", help="First column holds time deltas")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    params = get_filter_params(load_config(args.config), args.preset)
    if args.beta is not None:
        params.beta = args.beta
    if args.min_cutoff is not None:
        params.min_cutoff = args.min_cutoff

    rows = replay(load_recording(args.input), args.kind, params, delta=args.delta)

    if args.output:
        with open(args.output, 'w', newline='') as f:
            write_rows(rows, f)
        logger.info(f"Wrote {len(rows)} rows to {args.output}")
    else:
        write_rows(rows, sys.stdout)


if __name__ == "__main__":
    main()
