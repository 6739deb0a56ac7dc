"""Tests for debounced title commits."""

import asyncio
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))
sys.path.insert(0, str(REPO_ROOT / "test"))

from BookFinder.core.debounce import Debouncer
from fakes import FakeScheduler


class TestDebouncer(unittest.TestCase):
    def setUp(self) -> None:
        self.scheduler = FakeScheduler()
        self.commits: list[str] = []
        self.debouncer = Debouncer(self.commits.append, delay=0.3, scheduler=self.scheduler)

    def test_rapid_input_commits_only_the_settled_value(self) -> None:
        for text in ("d", "du", "dun", "dune "):
            self.debouncer.notify(text)
            self.scheduler.advance(0.1)
        self.assertEqual(self.commits, [])

        self.scheduler.advance(0.3)
        self.assertEqual(self.commits, ["dune"])
        self.assertFalse(self.debouncer.pending)

    def test_quiet_period_restarts_on_every_notify(self) -> None:
        self.debouncer.notify("a")
        self.scheduler.advance(0.29)
        self.debouncer.notify("ab")
        self.scheduler.advance(0.29)
        self.assertEqual(self.commits, [])
        self.scheduler.advance(0.01)
        self.assertEqual(self.commits, ["ab"])

    def test_flush_commits_immediately_and_cancels_timer(self) -> None:
        self.debouncer.notify("dun")
        self.debouncer.flush("  dune  ")
        self.assertEqual(self.commits, ["dune"])

        self.scheduler.advance(1.0)
        self.assertEqual(self.commits, ["dune"])

    def test_close_prevents_any_later_commit(self) -> None:
        self.debouncer.notify("dune")
        self.debouncer.close()
        self.scheduler.advance(1.0)
        self.debouncer.notify("again")
        self.debouncer.flush("again")
        self.scheduler.advance(1.0)
        self.assertEqual(self.commits, [])

    def test_cancel_drops_pending_value(self) -> None:
        self.debouncer.notify("dune")
        self.debouncer.cancel()
        self.scheduler.advance(1.0)
        self.assertEqual(self.commits, [])


class TestDebouncerOnEventLoop(unittest.IsolatedAsyncioTestCase):
    async def test_defaults_to_running_loop(self) -> None:
        commits: list[str] = []
        debouncer = Debouncer(commits.append, delay=0.01)

        debouncer.notify("du")
        debouncer.notify("dune")
        await asyncio.sleep(0.05)

        self.assertEqual(commits, ["dune"])


if __name__ == "__main__":
    unittest.main()
