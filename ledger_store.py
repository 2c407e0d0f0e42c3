"""Read and write the ledger from/to a JSON file."""
import json
import logging
import os
from pathlib import Path
from typing import Optional

from business_logic.ledger import Ledger
from config import config

logger = logging.getLogger("punch.store")


class PersistenceUnavailable(Exception):
    """The ledger file cannot be read or written."""


class LedgerStore:
    """Load and save the ledger as pretty-printed JSON."""

    def __init__(self, data_file: Optional[str] = None):
        """
        Initialize LedgerStore.

        Args:
            data_file: Optional path of the JSON file. If None, uses config.data_file.
        """
        if data_file is None:
            self.data_file = config.data_file
        else:
            self.data_file = Path(data_file).expanduser()

    def load(self) -> Ledger:
        """Load the ledger.

        Returns:
            The stored Ledger, or an empty Ledger if no file exists yet.

        Raises:
            PersistenceUnavailable: If the file exists but cannot be read or
                does not contain a valid ledger
        """
        if not self.data_file.exists():
            logger.debug("No ledger at %s, starting empty", self.data_file)
            return Ledger()

        try:
            content = self.data_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceUnavailable(f"Failed to read {self.data_file}: {e}") from e

        try:
            ledger = Ledger.from_dict(json.loads(content))
        except (json.JSONDecodeError, ValueError) as e:
            raise PersistenceUnavailable(f"Corrupt ledger in {self.data_file}: {e}") from e

        logger.debug("Loaded %d running and %d completed tasks from %s",
                     len(ledger.running), len(ledger.history), self.data_file)
        return ledger

    def store(self, ledger: Ledger):
        """Save the ledger.

        Creates the parent directory if needed and replaces any existing file.
        The content is written to a temporary sibling first so an interrupted
        write never leaves a truncated ledger behind.

        Args:
            ledger: The Ledger to save

        Raises:
            PersistenceUnavailable: If the file cannot be written
        """
        content = json.dumps(ledger.to_dict(), indent=2, sort_keys=True) + "\n"
        tmp_file = self.data_file.with_name(self.data_file.name + ".tmp")
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            tmp_file.write_text(content, encoding="utf-8")
            os.replace(tmp_file, self.data_file)
        except OSError as e:
            raise PersistenceUnavailable(f"Failed to save ledger to {self.data_file}: {e}") from e

        logger.debug("Saved ledger to %s", self.data_file)
