import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from smcalc.shell import Shell  # noqa: E402


@pytest.fixture
def shell():
    """Shell writing to in-memory consoles instead of the terminal."""
    out = Console(file=io.StringIO(), highlight=False, width=120)
    err = Console(file=io.StringIO(), highlight=False, width=120)
    return Shell(console=out, err_console=err)
