"""Task time ledger: running tasks and accumulated history."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from models import AlreadyRunning, NotRunning, StartResult, StopResult, TaskStarted, TaskStopped
from utils.time_utils import now_timestamp

logger = logging.getLogger("punch.ledger")


def _unique(names: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping the first occurrence order."""
    return list(dict.fromkeys(names))


class Ledger:
    """
    Holds the state of all tasks for one user.

    State:
    - running: task name -> start instant (epoch seconds)
    - history: task name -> accumulated seconds over all completed sessions
    - sessions: task name -> number of completed sessions

    A task may be running and have history at the same time. Start and stop
    work on batches of names with all-or-nothing semantics: conflicts are
    checked for the whole batch before anything is changed, and failures are
    returned in the result rather than raised.
    """

    def __init__(self,
                 running: Optional[Dict[str, int]] = None,
                 history: Optional[Dict[str, int]] = None,
                 sessions: Optional[Dict[str, int]] = None):
        self.running: Dict[str, int] = dict(running or {})
        self.history: Dict[str, int] = dict(history or {})
        self.sessions: Dict[str, int] = dict(sessions or {})
        # Every task with history has at least one completed session
        for name in self.history:
            if self.sessions.get(name, 0) < 1:
                self.sessions[name] = 1
        for name in list(self.sessions):
            if name not in self.history:
                del self.sessions[name]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return (self.running == other.running
                and self.history == other.history
                and self.sessions == other.sessions)

    def __repr__(self) -> str:
        return f"Ledger(running={self.running!r}, history={self.history!r}, sessions={self.sessions!r})"

    def start(self, names: Iterable[str], now: Optional[int] = None) -> StartResult:
        """
        Start a batch of tasks.

        Args:
            names: Task names to start
            now: Start instant in epoch seconds, defaults to the current time

        Returns:
            StartResult listing the started tasks, or carrying AlreadyRunning
            with every requested name that is already running. On error no
            task in the batch is started.
        """
        names = _unique(names)
        conflicts = [name for name in names if name in self.running]
        if conflicts:
            logger.info("Refusing to start %s: already running %s", names, conflicts)
            return StartResult(error=AlreadyRunning(conflicts))

        now = now_timestamp() if now is None else int(now)
        started = []
        for name in names:
            self.running[name] = now
            started.append(TaskStarted(name=name, started_at=now))
            logger.info("Started task %r at %d", name, now)
        return StartResult(started=started)

    def stop(self, names: Iterable[str], now: Optional[int] = None) -> StopResult:
        """
        Stop a batch of tasks and add their elapsed time to the history.

        Elapsed time is truncated to whole seconds and clamped at zero if the
        clock went backwards since the task was started.

        Args:
            names: Task names to stop
            now: Stop instant in epoch seconds, defaults to the current time

        Returns:
            StopResult listing each stopped task with its elapsed seconds, or
            carrying NotRunning with every requested name that is not running.
            On error no task in the batch is stopped.
        """
        names = _unique(names)
        missing = [name for name in names if name not in self.running]
        if missing:
            logger.info("Refusing to stop %s: not running %s", names, missing)
            return StopResult(error=NotRunning(missing))

        now = now_timestamp() if now is None else int(now)
        stopped = []
        for name in names:
            started_at = self.running.pop(name)
            elapsed = now - started_at
            if elapsed < 0:
                logger.warning("Clock moved backwards for task %r by %ds, recording 0s", name, -elapsed)
                elapsed = 0
            self.history[name] = self.history.get(name, 0) + elapsed
            self.sessions[name] = self.sessions.get(name, 0) + 1
            stopped.append(TaskStopped(name=name, elapsed=elapsed))
            logger.info("Stopped task %r after %ds", name, elapsed)
        return StopResult(stopped=stopped)

    def is_running(self, name: str) -> bool:
        """Check if a task is currently running."""
        return name in self.running

    def session_count(self, name: str) -> int:
        """Number of completed sessions for a task (0 if it was never stopped)."""
        return self.sessions.get(name, 0)

    def running_snapshot(self) -> List[Tuple[str, int]]:
        """Running tasks as (name, start instant) pairs, in map order."""
        return list(self.running.items())

    def history_snapshot(self) -> List[Tuple[str, int]]:
        """Completed tasks as (name, accumulated seconds) pairs, in map order."""
        return list(self.history.items())

    def known_tasks(self) -> List[str]:
        """All task names the ledger knows about, sorted."""
        return sorted(set(self.running) | set(self.history))

    def startable(self) -> List[str]:
        """Known tasks that are not running, sorted."""
        return [name for name in self.known_tasks() if name not in self.running]

    def stoppable(self) -> List[str]:
        """Running tasks, sorted."""
        return sorted(self.running)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Convert to dictionary for JSON serialization."""
        return {
            'running': dict(self.running),
            'history': dict(self.history),
            'sessions': dict(self.sessions),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Ledger':
        """
        Create from dictionary (JSON deserialization).

        Accepts history values that are lists of per-session durations, as
        written by older versions of the tool: the list is summed and its
        length becomes the session count.

        Raises:
            ValueError: If the data does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("ledger data must be an object")

        running = _int_map(data.get('running', {}), 'running')
        sessions = _int_map(data.get('sessions', {}), 'sessions')

        raw_history = data.get('history', {})
        if not isinstance(raw_history, dict):
            raise ValueError("'history' must be an object")
        history = {}
        for name, value in raw_history.items():
            if isinstance(value, list):
                durations = [_as_int(item, 'history') for item in value]
                history[name] = sum(durations)
                sessions.setdefault(name, len(durations))
            else:
                history[name] = _as_int(value, 'history')

        return cls(running=running, history=history, sessions=sessions)


def _as_int(value, key: str) -> int:
    # bool is an int subclass but never a valid duration or instant
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' values must be integers, got {value!r}")
    return value


def _int_map(value, key: str) -> Dict[str, int]:
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object")
    return {str(name): _as_int(item, key) for name, item in value.items()}
