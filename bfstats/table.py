"""
Module: bfstats.table

Purpose:
    Render groups as the four-line Confluence wiki table pasted into the
    rollout status page.

Layout:
    || Nodes       || OS*   || TOTAL || 
    | *Current*    | 1,024  | 1,024  | 
    | *Target*     | 2,048  | 2,048  | 
    | *% Comp*     | *50*   | *50*   | 

    Every group column is padded to the widest of its four cells. Header
    cells pad one less because "||" is one character wider than "|".
"""
from __future__ import annotations

import pandas as pd

from bfstats.groups import with_percent

# =========================
# Row labels
# =========================
HEADER_LABEL = "|| Nodes       || "
CURRENT_LABEL = "| *Current*    | "
TARGET_LABEL = "| *Target*     | "
PERCENT_LABEL = "| *% Comp*     | "


def format_count(n: int) -> str:
    """1234567 -> '1,234,567'"""
    return f"{int(n):,}"


def column_width(name: str, current: int, target: int, pct: int) -> int:
    # percent is shown wrapped in "*...*"
    return max(len(name), len(format_count(current)), len(format_count(target)), len(str(pct)) + 2)


def format_column(name: str, current: int, target: int, pct: int) -> tuple[str, str, str, str]:
    """Return the padded (header, current, target, percent) cells for one group."""
    width = column_width(name, current, target, pct)
    return (
        name.ljust(width),
        format_count(current).ljust(width + 1),
        format_count(target).ljust(width + 1),
        f"*{pct}*".ljust(width + 1),
    )


def render_table(groups: pd.DataFrame) -> str:
    """Render a [group, current, target] frame (TOTAL already appended)."""
    header, current, target, pct = HEADER_LABEL, CURRENT_LABEL, TARGET_LABEL, PERCENT_LABEL
    for row in with_percent(groups).itertuples(index=False):
        cells = format_column(str(row.group), int(row.current), int(row.target), int(row.percent))
        header += cells[0] + " || "
        current += cells[1] + " | "
        target += cells[2] + " | "
        pct += cells[3] + " | "
    return "\n".join([header, current, target, pct])
