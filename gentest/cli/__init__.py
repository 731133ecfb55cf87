"""Command line interface for gentest."""

from gentest.cli.context import CLIContext
from gentest.cli.main import app, main

__all__ = ["app", "main", "CLIContext"]
