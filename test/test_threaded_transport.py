"""Tests for running blocking sources behind the async transport."""

import sys
import threading
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from BookFinder.core.models import SearchPage
from BookFinder.core.query import QueryDescriptor
from BookFinder.services.search import ThreadedSearchTransport


class _StubSource:
    name = "stub"

    def __init__(self, *, should_fail: bool = False) -> None:
        self.should_fail = should_fail
        self.thread_ids: list[int] = []
        self.closed = False

    def search(self, descriptor: QueryDescriptor) -> SearchPage:
        self.thread_ids.append(threading.get_ident())
        if self.should_fail:
            raise RuntimeError("stub failed")
        return SearchPage(num_found=1)

    def close(self) -> None:
        self.closed = True


class TestThreadedSearchTransport(unittest.IsolatedAsyncioTestCase):
    async def test_runs_source_off_the_loop_thread(self) -> None:
        source = _StubSource()
        transport = ThreadedSearchTransport(source=source)

        page = await transport(QueryDescriptor("dune"))

        self.assertEqual(page.num_found, 1)
        self.assertNotEqual(source.thread_ids, [threading.get_ident()])

    async def test_source_errors_propagate(self) -> None:
        transport = ThreadedSearchTransport(source=_StubSource(should_fail=True))
        with self.assertRaisesRegex(RuntimeError, "stub failed"):
            await transport(QueryDescriptor("dune"))

    def test_close_closes_source(self) -> None:
        source = _StubSource()
        ThreadedSearchTransport(source=source).close()
        self.assertTrue(source.closed)


if __name__ == "__main__":
    unittest.main()
