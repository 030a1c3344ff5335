"""Core functionality for killallgit"""

from .cleaner import ResourceCleaner
from .menu import InteractiveMenu, MenuState

__all__ = ["ResourceCleaner", "InteractiveMenu", "MenuState"]
