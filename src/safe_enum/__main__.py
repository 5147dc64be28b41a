"""
Entry point for module execution (``python -m safe_enum``).

This module delegates execution to the CLI handler in ``safe_enum.cli.__main__``.
"""

import sys
from safe_enum.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
