"""Command line interface for schema set checks."""

from .report import CheckResult
from .run_cli import main

__all__ = ['CheckResult', 'main']
