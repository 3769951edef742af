"""
CLI Command Handlers Facade.

Re-exports handlers from `jsx2mp.cli.handlers` so the dispatcher (and tests)
have a single patch target.
"""

from jsx2mp.cli.handlers.deps import handle_deps
from jsx2mp.cli.handlers.style import handle_style

__all__ = ["handle_deps", "handle_style"]
