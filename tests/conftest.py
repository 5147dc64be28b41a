"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so injected capture consoles do not leak between tests.
- Shared enum definitions.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'safe_enum' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from safe_enum import create_from_map, create_from_list  # noqa: E402
from safe_enum.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Detaches the package log handler and restores a stdout console around every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def status_enum():
  """Three member map-mode enum with sequential indices."""
  return create_from_map(
    {
      "FOO": {"value": "foo", "index": 0},
      "BAR": {"value": "bar", "index": 1},
      "BAZ": {"value": "baz", "index": 2},
    },
    "TestEnum",
  )


@pytest.fixture
def http_protocol():
  """HTTP methods, declared the way call sites usually do."""
  return create_from_map(
    {
      "GET": {"value": "GET", "index": 0},
      "POST": {"value": "POST", "index": 1},
      "PUT": {"value": "PUT", "index": 2},
      "DELETE": {"value": "DELETE", "index": 3},
    },
    "HttpProtocol",
  )


@pytest.fixture
def roles():
  """List-mode enum."""
  return create_from_list(["admin", "user", "guest"], "Roles")
