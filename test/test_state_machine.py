"""Tests for search state transitions and stale-event rejection."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))
sys.path.insert(0, str(REPO_ROOT / "test"))

from BookFinder.core.models import SearchStatus
from BookFinder.core.query import QueryDescriptor
from BookFinder.core.state import (
    Cancelled,
    QueryCleared,
    QueryDispatched,
    ResponseFailed,
    ResponseReceived,
    SearchStateMachine,
)
from fakes import make_record

DUNE = QueryDescriptor("dune", 1)
HERBERT = QueryDescriptor("frank herbert", 1)


class TestSearchStateMachine(unittest.TestCase):
    def setUp(self) -> None:
        self.machine = SearchStateMachine()

    def test_starts_idle(self) -> None:
        state = self.machine.state
        self.assertIs(state.status, SearchStatus.IDLE)
        self.assertEqual(state.records, ())
        self.assertEqual(state.total_found, 0)

    def test_dispatch_then_response(self) -> None:
        record = make_record("OL1W", "Dune", year=1965)
        loading = self.machine.handle(QueryDispatched(1, DUNE))
        self.assertIs(loading.status, SearchStatus.LOADING)
        self.assertEqual(loading.query, "dune")

        state = self.machine.handle(ResponseReceived(1, DUNE, (record,), total_found=42, returned_count=12))
        self.assertIs(state.status, SearchStatus.SUCCESS)
        self.assertEqual(state.records, (record,))
        self.assertEqual(state.total_found, 42)
        self.assertTrue(state.has_next)
        self.assertFalse(state.has_previous)

    def test_stale_response_never_populates_records(self) -> None:
        self.machine.handle(QueryDispatched(1, DUNE))
        self.machine.handle(QueryDispatched(2, HERBERT))
        stale = make_record("OLstaleW", "Dune")

        state = self.machine.handle(ResponseReceived(1, DUNE, (stale,), total_found=1, returned_count=1))
        self.assertIs(state.status, SearchStatus.LOADING)
        self.assertEqual(state.query, "frank herbert")

        state = self.machine.handle(ResponseFailed(1, DUNE, "boom"))
        self.assertIs(state.status, SearchStatus.LOADING)

    def test_stale_response_after_clear_is_dropped(self) -> None:
        self.machine.handle(QueryDispatched(1, DUNE))
        self.machine.handle(QueryCleared(2))
        state = self.machine.handle(ResponseReceived(1, DUNE, (make_record("x"),), total_found=1, returned_count=1))
        self.assertIs(state.status, SearchStatus.SUCCESS)
        self.assertEqual(state.records, ())

    def test_error_clears_records_and_keeps_message(self) -> None:
        self.machine.handle(QueryDispatched(1, DUNE))
        self.machine.handle(ResponseReceived(1, DUNE, (make_record("x"),), total_found=1, returned_count=1))
        self.machine.handle(QueryDispatched(2, DUNE))
        state = self.machine.handle(ResponseFailed(2, DUNE, "Open Library returned 503"))
        self.assertIs(state.status, SearchStatus.ERROR)
        self.assertEqual(state.records, ())
        self.assertEqual(state.error_message, "Open Library returned 503")
        self.assertFalse(state.has_next)

        next_state = self.machine.handle(QueryDispatched(3, DUNE))
        self.assertIsNone(next_state.error_message)

    def test_cancelled_produces_no_transition(self) -> None:
        loading = self.machine.handle(QueryDispatched(1, DUNE))
        self.assertIs(self.machine.handle(Cancelled(1)), loading)

    def test_listeners_receive_snapshots_and_failures_are_isolated(self) -> None:
        seen = []

        def _broken(state) -> None:
            raise RuntimeError("listener bug")

        self.machine.subscribe(_broken)
        unsubscribe = self.machine.subscribe(seen.append)
        self.machine.handle(QueryDispatched(1, DUNE))
        unsubscribe()
        self.machine.handle(QueryCleared(2))

        self.assertEqual([state.status for state in seen], [SearchStatus.LOADING])

    def test_reset_returns_to_idle_and_forgets_token(self) -> None:
        self.machine.handle(QueryDispatched(1, DUNE))
        self.assertIs(self.machine.reset().status, SearchStatus.IDLE)
        state = self.machine.handle(ResponseReceived(1, DUNE, (make_record("x"),), total_found=1, returned_count=1))
        self.assertIs(state.status, SearchStatus.IDLE)


if __name__ == "__main__":
    unittest.main()
