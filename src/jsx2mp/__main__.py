"""
Entry point for module execution (``python -m jsx2mp``).
"""

import sys
from jsx2mp.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
