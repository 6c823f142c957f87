#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_report_analyzer.py
-----------------------
Tests for the WCAG report ranking built on top of ``MinPQ``.
"""

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from min_pq_factory import BACKENDS
from report_analyzer import (
    extract_tags,
    load_definitions,
    main,
    rank_most_frequent,
    read_reports,
)


class TestParsing(unittest.TestCase):

    def test_extract_tags(self):
        text = "fails wcag111 and wcag1410; also wcag143, not wcag12 or WCAG111"
        self.assertEqual(extract_tags(text), ["wcag111", "wcag1410", "wcag143"])

    def test_load_definitions(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "wcag.tsv"
            path.write_text("1.1.1\tNon-text Content\n\n1.4.10\tReflow\n", encoding="utf-8")
            self.assertEqual(
                load_definitions(path),
                {"wcag111": "Non-text Content", "wcag1410": "Reflow"},
            )

    def test_load_definitions_rejects_malformed_line(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "wcag.tsv"
            path.write_text("1.1.1 Non-text Content\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_definitions(path)

    def test_read_reports_recurses_and_skips_undecodable(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "nested").mkdir()
            (root / "a.html").write_text("wcag111", encoding="utf-8")
            (root / "nested" / "b.html").write_text("wcag143", encoding="utf-8")
            (root / "c.bin").write_bytes(b"\xff\xfe\xfa")
            with self.assertLogs("report_analyzer", level="WARNING"):
                texts = list(read_reports(root))
            self.assertEqual(texts, ["wcag111", "wcag143"])


class TestRanking(unittest.TestCase):

    def test_rank_most_frequent_on_every_backend(self):
        observations = ["a", "b", "a", "c", "a", "b"]
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                self.assertEqual(rank_most_frequent(observations, 2, backend), ["a", "b"])

    def test_k_larger_than_distinct_items(self):
        self.assertEqual(rank_most_frequent(["x", "y", "y"], 10), ["y", "x"])

    def test_no_observations(self):
        self.assertEqual(rank_most_frequent([], 3), [])


class TestMain(unittest.TestCase):

    def _write_fixture(self, root: Path) -> None:
        (root / "wcag.tsv").write_text(
            "1.1.1\tNon-text Content\n1.4.3\tContrast (Minimum)\n2.4.4\tLink Purpose\n",
            encoding="utf-8",
        )
        reports = root / "reports"
        reports.mkdir()
        (reports / "one.html").write_text("wcag143 wcag143 wcag111", encoding="utf-8")
        (reports / "two.html").write_text("wcag143 wcag111 wcag244 wcag999", encoding="utf-8")

    def test_prints_top_definitions(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write_fixture(root)
            out = io.StringIO()
            with contextlib.redirect_stdout(out), \
                    self.assertLogs("report_analyzer", level="INFO") as logs:
                status = main([
                    "--reports", str(root / "reports"),
                    "--definitions", str(root / "wcag.tsv"),
                    "--top", "2",
                    "--backend", "unsorted",
                ])
            self.assertEqual(status, 0)
            messages = [record.getMessage() for record in logs.records]
            self.assertIn("loaded 3 WCAG definitions", messages)
            self.assertIn("read 2 report files", messages)
            self.assertIn("found 7 WCAG tags", messages)
            self.assertEqual(
                out.getvalue().splitlines(),
                ["Contrast (Minimum)", "Non-text Content"],
            )

    def test_missing_definitions(self):
        with tempfile.TemporaryDirectory() as tmp:
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                status = main(["--reports", tmp, "--definitions", str(Path(tmp) / "nope.tsv")])
            self.assertEqual(status, 1)
            self.assertIn("definitions file not found", err.getvalue())

    def test_missing_reports_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write_fixture(root)
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                status = main([
                    "--reports", str(root / "absent"),
                    "--definitions", str(root / "wcag.tsv"),
                ])
            self.assertEqual(status, 1)
            self.assertIn("reports directory not found", err.getvalue())


if __name__ == "__main__":
    unittest.main(verbosity=2)
