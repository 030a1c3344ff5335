"""Command-line interface: argument grammar and the ``killallgit`` entry point."""

from .args import build_parser, parse_args
from .main import main

__all__ = ["build_parser", "main", "parse_args"]
