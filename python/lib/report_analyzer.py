#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
report_analyzer.py
------------------

Display the most commonly reported WCAG recommendations.

Accessibility reports mention WCAG success criteria as tags such as
``wcag111`` or ``wcag1410``.  Every tag found across the reports is counted
through a ``MinPQ`` using negated counts (priority = -occurrences), so the
``k`` smallest priorities are the ``k`` most frequent tags.

Command line
~~~~~~~~~~~~
    report-analyzer --reports data/reports --definitions data/wcag.tsv --top 3

The definitions file is tab‑separated: ``<criterion number>\\t<title>``,
e.g. ``1.4.10\\tReflow`` which is looked up as ``wcag1410``.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, TypeVar, Union

from min_pq_factory import BACKENDS, DEFAULT_BACKEND, create_min_pq

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

WCAG_TAG_PATTERN: re.Pattern[str] = re.compile(r"wcag\d{3,4}")

DEFAULT_REPORTS_DIR = Path("data/reports")
DEFAULT_DEFINITIONS = Path("data/wcag.tsv")
DEFAULT_TOP = 3


# ----------------------------------------------------------------------
#  Input parsing
# ----------------------------------------------------------------------
def extract_tags(text: str, pattern: re.Pattern[str] = WCAG_TAG_PATTERN) -> List[str]:
    """Return every tag matched by *pattern* in *text*, in order."""
    return pattern.findall(text)


def load_definitions(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read the WCAG definitions TSV into ``{"wcag111": "Non-text Content", ...}``.
    Raises ``ValueError`` on a non‑blank line that has no tab.
    """
    definitions: Dict[str, str] = {}
    with open(path, encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            number, sep, title = line.partition("\t")
            if not sep:
                raise ValueError(f"{path}:{lineno}: expected '<number>\\t<title>'")
            definitions["wcag" + number.replace(".", "")] = title
    return definitions


def read_reports(directory: Union[str, Path]) -> Iterator[str]:
    """
    Yield the text of every file below *directory*, in sorted path order.
    Files that cannot be read or decoded are logged and skipped.
    """
    for path in sorted(Path(directory).rglob("*")):
        if not path.is_file():
            continue
        try:
            yield path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("skipping unreadable report %s: %s", path, exc)


# ----------------------------------------------------------------------
#  Ranking
# ----------------------------------------------------------------------
def rank_most_frequent(
    observations: Iterable[T], k: int, backend: str = DEFAULT_BACKEND
) -> List[T]:
    """
    Return the *k* most frequent observations, most frequent first.

    Each new item goes in with priority -1; a repeat lowers its priority by
    one.  The k minimums are then the k largest counts.
    """
    pq = create_min_pq(backend)
    for item in observations:
        if pq.contains(item):
            pq.change_priority(item, pq.get_priority(item) - 1)
        else:
            pq.add(item, -1.0)
    logger.debug("ranking %d distinct items", pq.size())
    return pq.remove_min_k(k)


# ----------------------------------------------------------------------
#  Command‑line entry point
# ----------------------------------------------------------------------
def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="report-analyzer",
        description="Display the most commonly-reported WCAG recommendations.",
    )
    parser.add_argument(
        "--reports", type=Path, default=DEFAULT_REPORTS_DIR,
        help="directory of report files (default: %(default)s)",
    )
    parser.add_argument(
        "--definitions", type=Path, default=DEFAULT_DEFINITIONS,
        help="WCAG definitions TSV (default: %(default)s)",
    )
    parser.add_argument(
        "--top", type=int, default=DEFAULT_TOP,
        help="number of recommendations to show (default: %(default)s)",
    )
    parser.add_argument(
        "--backend", choices=sorted(BACKENDS), default=DEFAULT_BACKEND,
        help="priority queue backend (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if args.top < 0:
        parser.error("--top must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.definitions.is_file():
        print(f"definitions file not found: {args.definitions}", file=sys.stderr)
        return 1
    if not args.reports.is_dir():
        print(f"reports directory not found: {args.reports}", file=sys.stderr)
        return 1

    definitions = load_definitions(args.definitions)
    logger.info("loaded %d WCAG definitions", len(definitions))

    tags: List[str] = []
    report_count = 0
    for text in read_reports(args.reports):
        report_count += 1
        tags.extend(extract_tags(text))
    logger.info("read %d report files", report_count)
    logger.info("found %d WCAG tags", len(tags))

    for tag in rank_most_frequent(tags, args.top, backend=args.backend):
        print(definitions.get(tag, tag))
    return 0


if __name__ == "__main__":
    sys.exit(main())
