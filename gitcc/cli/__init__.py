"""Command Line Interface Package"""

from gitcc.cli.main import main

__all__ = ["main"]
