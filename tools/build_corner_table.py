#!/usr/bin/env python3
"""
Corner table builder.

Builds the 2x2x2 corner pattern database once and pickles it, so the
console can load it instead of rebuilding it on every start.

Usage:
    python build_corner_table.py [output_path]

Examples:
    python tools/build_corner_table.py
    python tools/build_corner_table.py cache/corner_table.pkl
"""

import sys
import logging
from collections import Counter
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nxcube.heuristics import HeuristicsTables
from nxcube.settings import load_settings


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    output = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(load_settings()["table_cache"])
    output.parent.mkdir(parents=True, exist_ok=True)

    tables = HeuristicsTables()
    tables.calc_corner_heuristics_table()
    tables.save(output)

    # Distance histogram
    counts = Counter(tables.corners.values())
    print(f"\n{'='*40}")
    print(f"{'Distance':>10} {'States':>12}")
    print(f"{'='*40}")
    for distance in sorted(counts):
        print(f"{distance:>10} {counts[distance]:>12}")
    print(f"{'Total':>10} {len(tables):>12}")
    print(f"\nSaved to {output}")


if __name__ == "__main__":
    main()
