"""
killallgit - bulk cleanup of git worktrees and branches
"""

from .__version__ import __version__
from .core import ResourceCleaner
from .cli.main import main

__all__ = ["ResourceCleaner", "main", "__version__"]
