#!/usr/bin/env python3
"""Check per-file line coverage against thresholds defined in coverage-thresholds.json.

Reads the report written by ``coverage json`` (``coverage.json`` by default,
or the path given as the first argument, or ``-`` for stdin).
"""

import json
import sys
from pathlib import Path


def main():
    root = Path(__file__).resolve().parent.parent
    thresholds_path = root / "coverage-thresholds.json"

    with open(thresholds_path) as f:
        config = json.load(f)
    default_threshold = config.get("default", 80)
    file_thresholds = config.get("files", {})

    report = sys.argv[1] if len(sys.argv) > 1 else str(root / "coverage.json")
    if report == "-":
        cov_data = json.load(sys.stdin)
    else:
        with open(report) as f:
            cov_data = json.load(f)

    files = cov_data["files"]
    root_str = str(root) + "/"

    failures = []
    passed = 0

    for path, entry in files.items():
        if path.startswith(root_str):
            rel_path = path[len(root_str):]
        else:
            rel_path = path

        percent = entry["summary"]["percent_covered"]
        threshold = file_thresholds.get(rel_path, default_threshold)

        if percent < threshold:
            failures.append((rel_path, percent, threshold))
        else:
            passed += 1

    total = passed + len(failures)
    print(f"Coverage check: {passed}/{total} files passed\n")

    if failures:
        print("FAILED files:")
        for path, actual, required in sorted(failures):
            print(f"  {path}: {actual:.1f}% < {required}%")
        print()
        sys.exit(1)
    else:
        print("All files meet their coverage thresholds.")


if __name__ == "__main__":
    main()
