"""
CLI Context for gentest.

Provides flow loading and console output shared by all CLI commands.
"""

from dataclasses import dataclass, field
from pathlib import Path

import typer
from rich.console import Console

from gentest.common.exceptions import FlowLoadError
from gentest.flow import Flow
from gentest.loader import load_flow


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    Created once by the app callback and passed to every command through
    ``ctx.obj``.

    Attributes:
        console: Rich console for regular output
        verbose: Enable progress output
        err_console: Rich console for error output
    """

    console: Console
    verbose: bool = False
    err_console: Console = field(default_factory=lambda: Console(stderr=True))

    def print_progress(self, message: str) -> None:
        """Print a progress message (only in verbose mode)."""
        if self.verbose:
            self.console.print(f"🔄 {message}", markup=False, highlight=False)

    def show_success(self, message: str) -> None:
        self.console.print(f"✅ {message}", markup=False, highlight=False)

    def print_error(self, message: str) -> None:
        self.err_console.print(f"❌ Error: {message}", markup=False, highlight=False)

    def load_flow(self, flow_file: Path) -> Flow:
        """
        Load a flow file, reporting failures and exiting with code 1.

        Raises:
            typer.Exit: If the file cannot be loaded
        """
        self.print_progress(f"Loading flow from {flow_file}")
        try:
            flow = load_flow(flow_file)
        except FlowLoadError as e:
            self.print_error(str(e))
            for error in e.errors:
                location = ".".join(str(part) for part in error.get("loc", ()))
                self.err_console.print(
                    f"  - {location}: {error.get('msg', '')}", markup=False, highlight=False
                )
            raise typer.Exit(code=1) from e

        self.print_progress(f"Loaded {len(flow)} step(s)")
        return flow
