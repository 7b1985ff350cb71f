import time
from contextlib import contextmanager


class ClockError(Exception):
    """Raised when a subroutine is entered twice or exited without being entered."""


def format_duration(seconds):
    """
    Human readable duration: "2 min 3.500 s", "4.250 s" or "12.000 ms".
    """
    if seconds >= 60:
        minutes, rest = divmod(seconds, 60)
        return f"{int(minutes)} min {rest:.3f} s"
    if seconds >= 1:
        return f"{seconds:.3f} s"
    return f"{seconds * 1000:.3f} ms"


class Clock:
    """
    Wall-clock budget for one search, plus per-subroutine time accounting.

    One clock is created per top-level search and handed to every component that needs
    to poll the deadline or report where the time went.
    """

    def __init__(self, deadline_seconds, timer=time.perf_counter):
        self.deadline = deadline_seconds
        self._timer = timer
        self._start = timer()
        self._stopped_at = None
        self._durations = {}
        self._open = {}
        self._interrupted = False

    def elapsed(self):
        """Seconds since creation, frozen once stop() was called."""
        end = self._stopped_at if self._stopped_at is not None else self._timer()
        return end - self._start

    def is_time_up(self):
        if self.elapsed() >= self.deadline:
            self._interrupted = True
            return True
        return False

    def interrupt(self):
        """Record that a search stopped on the deadline without polling is_time_up()."""
        self._interrupted = True

    def is_interrupted(self):
        """
        True once a deadline check failed: the search holding this clock was cut short.
        A search that completes after the deadline without hitting a check is not interrupted.
        """
        return self._interrupted

    def remaining(self):
        return max(0.0, self.deadline - self.elapsed())

    def stop(self):
        if self._stopped_at is None:
            self._stopped_at = self._timer()

    def is_stopped(self):
        return self._stopped_at is not None

    def enter(self, name):
        if name in self._open:
            raise ClockError(f"Subroutine {name!r} is already running")
        self._open[name] = self._timer()

    def exit(self, name):
        try:
            started = self._open.pop(name)
        except KeyError:
            raise ClockError(f"Subroutine {name!r} was exited without being entered") from None
        self._durations[name] = self._durations.get(name, 0.0) + self._timer() - started

    @contextmanager
    def timed(self, name):
        self.enter(name)
        try:
            yield self
        finally:
            self.exit(name)

    def get_subroutine_duration(self, name):
        return self._durations.get(name, 0.0)

    def subroutine_report(self):
        """
        Map each subroutine to (seconds, percentage of the overall elapsed time).
        """
        total = self.elapsed()
        report = {}
        for name, seconds in self._durations.items():
            share = seconds * 100.0 / total if total > 0 else 0.0
            report[name] = (seconds, share)
        return report
