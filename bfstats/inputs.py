"""
Module: bfstats.inputs

Shared helpers for reading the target file and the report: status
messages, tolerant file reads, group-name and count normalisation.
"""
from __future__ import annotations

import re
import sys
from pathlib import Path

import numpy as np

WHITESPACE_RE = re.compile(r"\s+")
COUNT_RE = re.compile(r"[0-9]+")
MAX_COUNT = int(np.iinfo("int64").max)


def warn(msg: str) -> None:
    print(f"⚠️ {msg}", file=sys.stderr)


def open_error(path: Path | str) -> None:
    """Report an unreadable input file; callers carry on with empty data."""
    print(f"Error: Could not open file {path}", file=sys.stderr)


def read_lines(path: Path | str) -> list[str] | None:
    """
    Return the file's lines, or None (after reporting) if it can't be opened.

    Bytes that aren't valid UTF-8 are replaced rather than failing the read,
    so one stray Latin-1 character doesn't drop the rest of the file.
    """
    try:
        return Path(path).read_text(encoding="utf-8-sig", errors="replace").splitlines()
    except OSError:
        open_error(path)
        return None


def normalize_name(name: str) -> str:
    """Collapse runs of whitespace so 'Lab  Machines' matches 'Lab Machines'."""
    return WHITESPACE_RE.sub(" ", name).strip()


def parse_count(text: str, thousands: bool = True) -> int | None:
    """
    Parse a non-negative integer count; None for anything else.

    Only plain digits are accepted (no sign, exponent or decimal point).
    Values that don't fit in int64 are rejected.
    """
    digits = text.strip()
    if thousands:
        digits = digits.replace(",", "")
    if not COUNT_RE.fullmatch(digits):
        return None
    value = int(digits)
    if value > MAX_COUNT:
        return None
    return value
