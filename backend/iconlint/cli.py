"""
iconlint — lint SVG icons from the command line.

Usage:
  iconlint icons/                              # lint every *.svg in a folder
  iconlint icons/github.svg --json             # machine-readable report
  iconlint icons/ --update-ignore              # rebuild the known-issues ledger
  ICONLINT_UPDATE_IGNORE=true iconlint icons/  # same, from the environment

Exit status: 0 clean, 1 some icon has diagnostics, 2 unusable inputs.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from iconlint.config import settings
from iconlint.engine.config import LintConfig
from iconlint.engine.ledger import Ledger, LedgerError
from iconlint.engine.linter import Linter
from iconlint.models.diagnostics import Diagnostic, LintReport
from iconlint.svg.catalog import CatalogError, IconCatalog

logger = logging.getLogger("iconlint")

# Diagnostic rule name for files that cannot be decoded
UNREADABLE = "unreadable"


def collect_files(paths: list[str]) -> list[Path]:
    """Expand directories to their *.svg files, keep files as given."""
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            files.extend(sorted(p.glob("*.svg")))
        else:
            files.append(p)
    return files


def read_icons(files: list[Path]) -> tuple[list[tuple[str, str]], list[LintReport]]:
    """Read SVG sources; files that are not UTF-8 come back as failed reports."""
    icons = []
    unreadable = []
    for f in files:
        try:
            # newline="" keeps \r\n intact for the extraneous-markup rule
            with open(f, encoding="utf-8", newline="") as fh:
                icons.append((str(f), fh.read()))
        except UnicodeDecodeError as e:
            logger.warning("Cannot decode %s: %s", f, e)
            unreadable.append(
                LintReport(
                    icon=f.name,
                    source=str(f),
                    diagnostics=[Diagnostic(rule=UNREADABLE, message=f"File is not valid UTF-8: {e}")],
                )
            )
    return icons, unreadable


def load_catalog(path: str | None) -> IconCatalog | None:
    if path is not None:
        return IconCatalog.load(path)
    if Path(settings.catalog_path).exists():
        return IconCatalog.load(settings.catalog_path)
    logger.warning("Catalog %s not found, title lookup disabled", settings.catalog_path)
    return None


def format_report(report: LintReport) -> str:
    lines = [f"{report.source or report.icon}"]
    for d in report.diagnostics:
        lines.append(f"  [{d.rule}] {d.message}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconlint", description="Lint single-path SVG icons")
    parser.add_argument("paths", nargs="+", help="SVG files or folders of SVG files")
    parser.add_argument("--catalog", default=None, help="Icon catalog JSON (title lookup)")
    parser.add_argument("--ledger", default=settings.ledger_path, help="Known-issues ledger JSON")
    parser.add_argument(
        "--update-ignore",
        action="store_true",
        default=settings.update_ignore,
        help="Rebuild the ledger from the current failures",
    )
    parser.add_argument("--workers", type=int, default=settings.max_workers, help="Parallel lint workers")
    parser.add_argument("--json", action="store_true", help="Print reports as JSON")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        icons, unreadable = read_icons(collect_files(args.paths))
        ledger = Ledger.open(args.ledger, regenerate=args.update_ignore, required=settings.ledger_required)
        catalog = load_catalog(args.catalog)
    except (OSError, LedgerError, CatalogError) as e:
        print(f"iconlint: {e}", file=sys.stderr)
        return 2

    linter = Linter(
        config=LintConfig.from_settings(settings),
        ledger=ledger,
        catalog=catalog,
        max_workers=args.workers,
    )
    # Leaving the block writes a regenerated ledger, exactly once
    with ledger:
        reports = linter.lint_many(icons)
    reports.extend(unreadable)

    failed = [r for r in reports if not r.passed]
    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in reports], indent=2))
    else:
        for report in failed:
            print(format_report(report))
        print(f"{len(reports)} icons checked, {len(failed)} with problems")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
