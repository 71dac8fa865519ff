import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import aoc_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from aoc_toolkit.common.logging_utils import detach_handlers


# Common test fixtures
@pytest.fixture
def calorie_text() -> str:
    """Return a small calorie list with three groups."""
    return "3\n4\n\n5\n\n6\n7\n8\n"


@pytest.fixture
def strategy_text() -> str:
    """Return the example strategy guide."""
    return "A Y\nB X\nC Z\n"


@pytest.fixture
def input_file(tmp_path: Path):
    """Write text to a file and return its path."""
    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    """Remove toolkit log handlers left behind by run()."""
    yield
    detach_handlers()
