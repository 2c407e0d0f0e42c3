"""Data models for the punch clock."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class PrettyDuration:
    """A duration broken down into days, hours, minutes and seconds.

    Each unit is its own total count until it reaches the size of the next
    larger unit, at which point it wraps (see utils.time_utils.decompose).
    """
    days: int
    hours: int
    minutes: int
    seconds: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.days, self.hours, self.minutes, self.seconds)

    def __str__(self) -> str:
        return (f"{self.days} days, {self.hours} hours, "
                f"{self.minutes} minutes, {self.seconds} seconds")


class HistoryMode(Enum):
    """How accumulated history is reported."""
    SUM = "sum"
    AVERAGE = "average"


class LedgerError(Exception):
    """Base class for batch failures reported by the ledger.

    Ledger operations return these as values instead of raising them.
    """

    description = "The following tasks could not be processed"

    def __init__(self, names: List[str]):
        self.names = list(names)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.description}: {', '.join(self.names)}"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.names == other.names

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.names)))


class AlreadyRunning(LedgerError):
    """Start was requested for tasks that are already running."""
    description = "The following tasks are already running"


class NotRunning(LedgerError):
    """Stop was requested for tasks that are not running."""
    description = "The following tasks are not running"


@dataclass(frozen=True)
class TaskStarted:
    """A task that was started, with its start instant in epoch seconds."""
    name: str
    started_at: int


@dataclass(frozen=True)
class TaskStopped:
    """A task that was stopped, with the elapsed seconds of the session."""
    name: str
    elapsed: int


@dataclass
class StartResult:
    """Outcome of a start batch: either every task started or none did."""
    started: List[TaskStarted] = field(default_factory=list)
    error: Optional[AlreadyRunning] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StopResult:
    """Outcome of a stop batch: either every task stopped or none did."""
    stopped: List[TaskStopped] = field(default_factory=list)
    error: Optional[NotRunning] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ReportRow:
    """One table row: a task name and its decomposed duration."""
    task: str
    days: int
    hours: int
    minutes: int
    seconds: int

    HEADERS = ("Task", "Days", "Hours", "Minutes", "Seconds")

    @classmethod
    def from_duration(cls, task: str, duration: PrettyDuration) -> 'ReportRow':
        return cls(task, duration.days, duration.hours, duration.minutes, duration.seconds)

    def cells(self) -> Tuple[str, str, str, str, str]:
        """Row values as strings, in header order."""
        return (self.task, str(self.days), str(self.hours), str(self.minutes), str(self.seconds))


class ActionKind(Enum):
    """The actions the command line can resolve to."""
    START = "start"
    STOP = "stop"
    LIST = "list"
    HISTORY = "history"


@dataclass
class Action:
    """A resolved command: what to do and, for start/stop, which tasks."""
    kind: ActionKind
    tasks: List[str] = field(default_factory=list)
    mode: HistoryMode = HistoryMode.SUM
