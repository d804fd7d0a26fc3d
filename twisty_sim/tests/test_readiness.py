# twisty_sim/tests/test_readiness.py
import unittest

from twisty_sim.core.readiness import ReadinessPoller
from twisty_sim.tests.fakes import ManualScheduler


class TestReadinessPoller(unittest.TestCase):
    def setUp(self):
        self.sched = ManualScheduler()
        self.results = []

    def test_ready_immediately(self):
        poller = ReadinessPoller(lambda: True, self.results.append, self.sched)
        poller.start()
        self.assertEqual(self.results, [True])
        self.assertEqual(self.sched.pending, [])

    def test_ready_after_some_attempts(self):
        answers = iter([False, False, True])
        poller = ReadinessPoller(lambda: next(answers), self.results.append, self.sched)
        poller.start()

        self.assertEqual(self.results, [])
        self.assertEqual(self.sched.delays(), [100])

        self.sched.run_all()
        self.assertEqual(self.results, [True])
        self.assertEqual(poller.attempts, 3)

    def test_gives_up_after_cap(self):
        poller = ReadinessPoller(lambda: False, self.results.append, self.sched)
        with self.assertLogs("twisty_sim.core.readiness", level="WARNING"):
            poller.start()
            self.sched.run_all()

        self.assertEqual(self.results, [False])
        self.assertEqual(poller.attempts, 50)

    def test_check_errors_count_as_not_ready(self):
        def broken():
            raise RuntimeError("widget gone")

        poller = ReadinessPoller(broken, self.results.append, self.sched, max_attempts=3)
        with self.assertLogs("twisty_sim.core.readiness", level="ERROR"):
            poller.start()
            self.sched.run_all()

        self.assertEqual(self.results, [False])


if __name__ == "__main__":
    unittest.main()
