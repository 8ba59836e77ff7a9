"""
Output helpers for sweep runs.

- write_csv:      one row per width (schema: harness.core.FIELDS).
- write_manifest: JSON with the run configuration and word-list report.
- timestamp_id:   UTC run id for file names.
- git_commit_or_unknown: short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

from wordtree.harness.core import FIELDS


def write_csv(rows: List[Dict], path: str) -> str:
    """Write sweep rows to CSV and return the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            row = dict(r)
            row["average"] = f"{float(r['average']):.6f}"
            row["time_ms"] = round(float(r["time_ms"]), 3)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest.

    Typical keys: run_id, git_commit, config (CLI args), wordlists
    (datasets.validate_wordlists output), rows.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the current checkout, or 'unknown' outside a repo."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
