"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Isolation of the process-wide advisory message sink.
- A recording console fixture for asserting on log output.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'jsx2mp' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from jsx2mp.stylesheet.messages import clear_error_messages  # noqa: E402
from jsx2mp.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def clean_message_sink():
  """Ensure the default message sink is empty before and after each test."""
  clear_error_messages()
  yield
  clear_error_messages()


@pytest.fixture
def recorded_console():
  """Redirects console and logging output into an in-memory recording console."""
  rec = Console(record=True, width=240, file=io.StringIO())
  set_console(rec)
  yield rec
  reset_console()
