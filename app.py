"""Command-line punch clock: start and stop tasks and report time spent.

Usage:
    punch in TASK [TASK ...]          Start working on tasks
    punch out TASK [TASK ...]         Stop working on tasks
    punch list                        List running tasks
    punch history [--total|--average] Print time spent on previous tasks
"""
import argparse
import sys
from typing import Callable, List, Optional

from business_logic.ledger import Ledger
from business_logic.reporter import Reporter
from config import Config
from ledger_store import LedgerStore, PersistenceUnavailable
from models import Action, ActionKind, HistoryMode
from ui.table_renderer import TableRenderer
from utils.logger import get_logger

__version__ = "0.4.0"

EXIT_OK = 0
EXIT_TASK_ERROR = 1
EXIT_STORAGE_ERROR = 2

Picker = Callable[[str, List[str]], Optional[str]]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per action."""
    parser = argparse.ArgumentParser(prog="punch", description="A simple time clock tool.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", default=None, help="Directory holding the task data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Also write log messages to stderr")
    sub = parser.add_subparsers(dest="command")

    in_p = sub.add_parser("in", aliases=["start"], help="Start working on one or more tasks.")
    in_p.add_argument("tasks", nargs="*", metavar="task", help="Start working on the specified task(s).")
    in_p.set_defaults(kind=ActionKind.START)

    out_p = sub.add_parser("out", aliases=["stop"], help="Stop working on one or more tasks.")
    out_p.add_argument("tasks", nargs="*", metavar="task", help="Stop working on the specified task(s).")
    out_p.set_defaults(kind=ActionKind.STOP)

    list_p = sub.add_parser("list", help="List all running tasks.")
    list_p.set_defaults(kind=ActionKind.LIST)

    history_p = sub.add_parser("history", help="Print history of all tasks.")
    mode = history_p.add_mutually_exclusive_group()
    mode.add_argument("--total", dest="mode", action="store_const", const=HistoryMode.SUM,
                      help="Show the total time per task (default)")
    mode.add_argument("--average", dest="mode", action="store_const", const=HistoryMode.AVERAGE,
                      help="Show the average time per session")
    history_p.set_defaults(kind=ActionKind.HISTORY, mode=HistoryMode.SUM)

    return parser


def resolve_action(args: argparse.Namespace) -> Action:
    """Turn parsed arguments into an Action."""
    return Action(
        kind=args.kind,
        tasks=list(getattr(args, "tasks", None) or []),
        mode=getattr(args, "mode", HistoryMode.SUM),
    )


def is_interactive() -> bool:
    """Check if both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def prompt_for_task(action: Action, ledger: Ledger, picker: Picker) -> Optional[str]:
    """
    Offer the tasks an action can apply to and return the chosen one.

    Start offers known tasks that are not running; stop offers running tasks.

    Args:
        action: A start or stop action without task names
        ledger: The current ledger
        picker: Function showing the choices and returning the chosen name

    Returns:
        The chosen task name, or None if there was nothing to choose or the
        user cancelled
    """
    if action.kind is ActionKind.START:
        return picker("Start which task?", ledger.startable())
    return picker("Stop which task?", ledger.stoppable())


def run_action(action: Action, ledger: Ledger, renderer: TableRenderer, now: Optional[int] = None) -> bool:
    """
    Apply an action to the ledger and print its outcome.

    Args:
        action: The resolved action
        ledger: The ledger, mutated in place by start and stop
        renderer: Where output goes
        now: Current instant in epoch seconds, defaults to the current time

    Returns:
        True if the action succeeded, False if the ledger rejected the batch
    """
    if action.kind is ActionKind.START:
        result = ledger.start(action.tasks, now=now)
        renderer.print_start(result)
        return result.ok

    if action.kind is ActionKind.STOP:
        result = ledger.stop(action.tasks, now=now)
        renderer.print_stop(result)
        return result.ok

    if action.kind is ActionKind.LIST:
        renderer.print_rows(Reporter.render_running(ledger, now), "No running tasks.")
        return True

    renderer.print_rows(Reporter.render_history(ledger, action.mode), "No history yet.")
    return True


def main(argv: Optional[List[str]] = None,
         renderer: Optional[TableRenderer] = None,
         picker: Optional[Picker] = None,
         interactive: Optional[bool] = None,
         now: Optional[int] = None) -> int:
    """
    Run the punch clock.

    The ledger is loaded once, changed by at most one action and saved once,
    even when the action fails.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return EXIT_OK
    if any(not name for name in getattr(args, "tasks", None) or []):
        parser.error("task names must not be empty")

    app_config = Config.load(args.data_dir)
    renderer = renderer or TableRenderer()
    try:
        logger = get_logger(level=app_config.log_level, log_dir=app_config.log_dir, console=args.verbose)
    except OSError as e:
        renderer.print_error(PersistenceUnavailable(f"Cannot use data directory {app_config.data_dir}: {e}"))
        return EXIT_STORAGE_ERROR
    store = LedgerStore(app_config.data_file)

    try:
        ledger = store.load()
    except PersistenceUnavailable as e:
        logger.error("%s", e)
        renderer.print_error(e)
        return EXIT_STORAGE_ERROR

    action = resolve_action(args)
    ok = True
    if action.kind in (ActionKind.START, ActionKind.STOP) and not action.tasks:
        if interactive is None:
            interactive = is_interactive()
        if picker is None:
            from ui.task_picker import pick_task
            picker = pick_task
        chosen = prompt_for_task(action, ledger, picker) if interactive else None
        if chosen is None:
            renderer.print_notice(f"No task given to {action.kind.value}.")
            action = None
        else:
            action.tasks = [chosen]

    if action is not None:
        logger.info("Running %s %s", action.kind.value, action.tasks)
        ok = run_action(action, ledger, renderer, now=now)

    try:
        store.store(ledger)
    except PersistenceUnavailable as e:
        logger.error("%s", e)
        renderer.print_error(e)
        return EXIT_STORAGE_ERROR

    return EXIT_OK if ok else EXIT_TASK_ERROR


if __name__ == "__main__":
    sys.exit(main())
