"""
Module: bfstats.report

Purpose:
    Pull current deployment counts out of a BigFix Web Reports export.

Workflow:
    1) Keep only lines that start with the record marker (table rows)
    2) Walk the line left to right collecting the text between each
       cell-start and cell-end token
    3) Pair cells up as (group name, count)
    4) Later rows overwrite earlier ones for the same group

Input:
    - Export where each data row sits on one line, e.g.
      <tr><td>Workstations</td><td>1,024</td><td>OS</td><td>311</td></tr>

Output:
    - dict mapping group name -> current count
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup

from bfstats.inputs import normalize_name, parse_count, read_lines

# =========================
# Report tokens
# =========================
RECORD_MARKER = "<tr"
CELL_START = "<td>"
CELL_END = "</td>"


def iter_cells(line: str, start: str = CELL_START, end: str = CELL_END) -> Iterator[str]:
    """
    Yield the raw text between each start token and the next end token.

    Scanning stops at the first start token that has no closing end token.
    """
    pos = line.find(start)
    while pos != -1:
        text_from = pos + len(start)
        stop = line.find(end, text_from)
        if stop == -1:
            return
        yield line[text_from:stop]
        pos = line.find(start, stop + len(end))


def cell_text(raw: str) -> str:
    """Strip inline markup (links, spans, entities) from a cell."""
    if "<" in raw or "&" in raw:
        raw = BeautifulSoup(raw, "html.parser").get_text(" ")
    return normalize_name(raw)


def parse_line(line: str, start: str = CELL_START, end: str = CELL_END) -> list[tuple[str, int]]:
    """
    Pair up the cells of one record line as (group, count).

    Pairs with a non-numeric count and a trailing name without a count
    cell are dropped.
    """
    cells = [cell_text(c) for c in iter_cells(line, start, end)]
    pairs = []
    for group, count_text in zip(cells[0::2], cells[1::2]):
        count = parse_count(count_text)
        if count is None:
            continue
        pairs.append((group, count))
    return pairs


def parse_report(
    lines: list[str],
    marker: str = RECORD_MARKER,
    start: str = CELL_START,
    end: str = CELL_END,
) -> dict[str, int]:
    current: dict[str, int] = {}
    for line in lines:
        if not line.startswith(marker):
            continue
        for group, count in parse_line(line, start, end):
            current[group] = count
    return current


def load_current(path: Path | str) -> dict[str, int] | None:
    """
    Read current counts from a report file.

    Returns None (after printing an error) when the file can't be opened,
    so the merge step can tell "no report" apart from "empty report".
    """
    lines = read_lines(path)
    if lines is None:
        return None
    return parse_report(lines)
