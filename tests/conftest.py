"""Pytest configuration and shared fixtures."""
import pytest
from business_logic.ledger import Ledger
from ledger_store import LedgerStore

T0 = 1_700_000_000


@pytest.fixture
def empty_ledger():
    """Fixture providing a Ledger with no tasks."""
    return Ledger()


@pytest.fixture
def busy_ledger():
    """Fixture providing a Ledger with running tasks and history."""
    return Ledger(
        running={"write report": T0, "email": T0 + 60},
        history={"write report": 3600, "review": 90061, "lunch": 50},
        sessions={"write report": 2, "review": 1, "lunch": 1},
    )


@pytest.fixture
def data_file(tmp_path):
    """Fixture providing a path for the ledger JSON file."""
    return tmp_path / "punch" / "data.json"


@pytest.fixture
def store(data_file):
    """Fixture providing a LedgerStore writing to a temporary file."""
    return LedgerStore(data_file=str(data_file))
