"""
Module: bfstats.targets

Purpose:
    Load the per-group deployment targets from a comma-separated file.

Input:
    - One group per line: "<group name>,<target count>"
      e.g.  Workstations,1200
            OS,350
      The group name is everything before the first comma.

Output:
    - DataFrame with columns [group, target], in file order.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from bfstats.inputs import normalize_name, parse_count, read_lines, warn

# =========================
# Defaults & Constants
# =========================
TARGET_DELIM = ","


def empty_targets() -> pd.DataFrame:
    return pd.DataFrame({"group": pd.Series(dtype=str), "target": pd.Series(dtype="int64")})


def split_target_lines(lines: list[str]) -> pd.DataFrame:
    """
    Split "name,target" lines on the first delimiter.

    Blank lines are dropped here; lines without a delimiter keep an empty
    target so clean_targets can report them.
    """
    records = []
    for line in lines:
        if not line.strip():
            continue
        group, _, target = line.partition(TARGET_DELIM)
        records.append({"group": group, "target": target, "line": line})
    return pd.DataFrame(records, columns=["group", "target", "line"])


def clean_targets(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Coerce and validate a raw [group, target, line] frame.

    Args:
        raw (pd.DataFrame): String columns from split_target_lines.

    Returns:
        pd.DataFrame: [group, target] rows with a non-empty group and a
        non-negative integer target. Duplicate groups keep their first
        occurrence.
    """
    if raw.empty:
        return empty_targets()

    df = raw.copy()
    df["group"] = df["group"].map(normalize_name)
    # the delimiter is a comma, so no thousands separators here
    numbers = df["target"].map(lambda t: parse_count(t, thousands=False))

    valid = df["group"].ne("") & numbers.notna()
    for line in df.loc[~valid, "line"]:
        warn(f"Skipping malformed target line: {line}")

    df = df.loc[valid, ["group"]].copy()
    df["target"] = numbers[valid].astype("int64")
    df = df.drop_duplicates(subset="group", keep="first")
    return df.reset_index(drop=True)


def load_targets(path: Path | str) -> pd.DataFrame:
    """
    Read the target file into a [group, target] frame.

    A missing or unreadable file is reported and yields an empty frame.
    """
    lines = read_lines(path)
    if lines is None:
        return empty_targets()
    return clean_targets(split_target_lines(lines))
