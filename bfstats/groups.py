"""
Module: bfstats.groups

Purpose:
    Join targets with current counts into one row per computer group,
    apply the fixed group rules and append the TOTAL row.

Group rules:
    - Merged groups: the row is relabelled (e.g. OS -> OS*) and its current
      count also absorbs whatever the report lists under the new label.
    - Self-targeted groups: target is set to the current count (MBDA has no
      fixed fleet size, so it is always shown as complete).
"""
from __future__ import annotations

import pandas as pd

# =========================
# Defaults & Constants
# =========================
MERGED_GROUPS = {"OS": "OS*"}
SELF_TARGETED_GROUPS = ("MBDA",)
TOTAL_LABEL = "TOTAL"
GROUP_COLUMNS = ["group", "current", "target"]


def percent(current: int, target: int) -> int:
    """
    Percent complete, rounded half away from zero; 0 when there is no target.

    Integer arithmetic keeps exact divisions exact (50/100 -> 50).
    """
    if target <= 0:
        return 0
    return (200 * current + target) // (2 * target)


def apply_group_rules(
    df: pd.DataFrame,
    current: dict[str, int],
    merged: dict[str, str],
    self_targeted: tuple[str, ...] | list[str],
) -> pd.DataFrame:
    """
    Apply merge/self-target rules to a joined [group, current, target] frame.

    Only looks groups up by name, so the result does not depend on the
    order rows appeared in either input.
    """
    df = df.copy()
    for source, label in merged.items():
        mask = df["group"].eq(source)
        if not mask.any():
            continue
        df.loc[mask, "current"] = current.get(source, 0) + current.get(label, 0)
        df.loc[mask, "group"] = label

    mask = df["group"].isin(list(self_targeted))
    df.loc[mask, "target"] = df.loc[mask, "current"]
    return df


def merge_groups(
    targets: pd.DataFrame,
    current: dict[str, int] | None,
    merged: dict[str, str] | None = None,
    self_targeted: tuple[str, ...] | list[str] | None = None,
) -> pd.DataFrame:
    """
    Left-join targets with current counts.

    Args:
        targets (pd.DataFrame): [group, target] in display order.
        current (dict | None): group -> current count, or None when the
            report could not be read (rules are then skipped).
        merged (dict): overrides MERGED_GROUPS.
        self_targeted (sequence): overrides SELF_TARGETED_GROUPS.

    Returns:
        pd.DataFrame: [group, current, target] with int64 counts.
    """
    merged = MERGED_GROUPS if merged is None else merged
    self_targeted = SELF_TARGETED_GROUPS if self_targeted is None else self_targeted

    counts = pd.DataFrame(
        list((current or {}).items()), columns=["group", "current"]
    )
    df = targets[["group", "target"]].merge(counts, on="group", how="left")
    df["current"] = pd.to_numeric(df["current"], errors="coerce").fillna(0).astype("int64")
    df["target"] = df["target"].astype("int64")
    df = df[GROUP_COLUMNS]

    if current is not None:
        df = apply_group_rules(df, current, merged, self_targeted)
    return df.reset_index(drop=True)


def add_total(groups: pd.DataFrame, label: str = TOTAL_LABEL) -> pd.DataFrame:
    """Append a row summing current and target over every group."""
    total = pd.DataFrame(
        [{
            "group": label,
            "current": int(groups["current"].sum()),
            "target": int(groups["target"].sum()),
        }],
        columns=GROUP_COLUMNS,
    )
    out = pd.concat([groups[GROUP_COLUMNS], total], ignore_index=True)
    out[["current", "target"]] = out[["current", "target"]].astype("int64")
    return out


def with_percent(groups: pd.DataFrame) -> pd.DataFrame:
    df = groups.copy()
    df["percent"] = [percent(int(c), int(t)) for c, t in zip(df["current"], df["target"])]
    return df
