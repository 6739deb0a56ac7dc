"""Tests for client-side author/year post-filtering."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from BookFinder.core.filters import RecordFilter, filter_records
from BookFinder.core.models import BookRecord


def _record(key: str, *, authors: tuple[str, ...] = (), year: int | None = None) -> BookRecord:
    return BookRecord(id=f"/works/{key}", title=key, author_names=authors, first_publish_year=year)


DUNE = _record("dune", authors=("Frank Herbert",), year=1965)
MESSIAH = _record("messiah", authors=("Frank Herbert",), year=1969)
PRELUDE = _record("prelude", authors=("Brian Herbert", "Kevin J. Anderson"), year=1999)
UNDATED = _record("undated", authors=("Anonymous",))
RECORDS = [DUNE, PRELUDE, UNDATED, MESSIAH]


class TestFilterRecords(unittest.TestCase):
    def test_no_constraints_returns_everything_in_order(self) -> None:
        self.assertEqual(filter_records(RECORDS), tuple(RECORDS))

    def test_author_match_is_case_insensitive_against_any_author(self) -> None:
        self.assertEqual(filter_records(RECORDS, author="ANDERSON"), (PRELUDE,))
        self.assertEqual(filter_records(RECORDS, author="herbert"), (DUNE, PRELUDE, MESSIAH))

    def test_year_bounds_are_inclusive(self) -> None:
        self.assertEqual(filter_records(RECORDS, year_min=1965, year_max=1969), (DUNE, MESSIAH))

    def test_missing_year_fails_any_active_bound(self) -> None:
        self.assertNotIn(UNDATED, filter_records(RECORDS, year_min=1900))
        self.assertNotIn(UNDATED, filter_records(RECORDS, year_max=2100))
        self.assertIn(UNDATED, filter_records(RECORDS, author="anon"))

    def test_order_is_preserved(self) -> None:
        result = filter_records(RECORDS, year_min=1960)
        self.assertEqual(result, (DUNE, PRELUDE, MESSIAH))

    def test_filter_is_idempotent(self) -> None:
        once = filter_records(RECORDS, author="herbert", year_max=1970)
        twice = filter_records(once, author="herbert", year_max=1970)
        self.assertEqual(once, twice)

    def test_record_without_authors_fails_author_constraint(self) -> None:
        anonymous = _record("x")
        self.assertEqual(filter_records([anonymous], author="a"), ())

    def test_empty_filter_flag(self) -> None:
        self.assertTrue(RecordFilter().is_empty)
        self.assertFalse(RecordFilter(year_min=0).is_empty)


if __name__ == "__main__":
    unittest.main()
