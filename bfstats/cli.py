"""
bfstats command line.

Usage examples:
    bfstats -t targets.csv -c web_report.html
    bfstats -t targets.csv -c web_report.html -o rollout_table.txt
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from bfstats import PROGRAM_NAME, VERSION
from bfstats.groups import add_total, merge_groups
from bfstats.report import load_current
from bfstats.table import render_table
from bfstats.targets import load_targets


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=(
            f"{PROGRAM_NAME}, version {VERSION}\n\n"
            "Convert BigFix deployment reports into Confluence wiki tables."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("-t", "--target", type=Path, help="Comma-separated computer group targets.")
    ap.add_argument("-c", "--current", type=Path, help="Current computer group deployment statistics.")
    ap.add_argument("-o", "--out", type=Path, help="Write the table here instead of stdout.")
    ap.add_argument(
        "-V", "--version", action="version", version=f"{PROGRAM_NAME}, version {VERSION}"
    )
    return ap


def build_table(target_path: Path | None, current_path: Path | None) -> str:
    """Run the whole pipeline and return the rendered wiki table."""
    targets = load_targets(target_path if target_path is not None else "")
    current = load_current(current_path if current_path is not None else "")
    groups = merge_groups(targets, current)
    return render_table(add_total(groups))


def write_output(text: str, out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    tmp.write_text(text + "\n", encoding="utf-8")
    os.replace(tmp, out)
    print(f"Wrote {out}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        ap.print_help()
        return 0
    args = ap.parse_args(argv)

    table = build_table(args.target, args.current)
    if args.out:
        write_output(table, args.out)
    else:
        print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
