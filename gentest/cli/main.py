"""gentest CLI - Typer-based tools for working with flow files."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gentest.cli.context import CLIContext
from gentest.common.exceptions import NotFoundError
from gentest.data_driven import pretty
from gentest.flow import Flow

app = typer.Typer(
    name="gentest",
    help="gentest: inspect and validate generator fixture flows",
    no_args_is_help=True,
)
console = Console()

FlowFile = Annotated[
    Path,
    typer.Argument(
        exists=True, dir_okay=False, readable=True, help="Flow file (YAML or JSON)"
    ),
]


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """Set up the CLIContext shared by all commands."""
    ctx.obj = CLIContext(console=console, verbose=verbose)


def _exception_text(flow: Flow, index: int) -> str:
    exc = flow[index].default_exception
    if exc is None:
        return ""
    if isinstance(exc, type):
        return exc.__name__
    return f"{type(exc).__name__}({str(exc)!r})"


def build_flow_table(flow: Flow) -> Table:
    """Rich table listing each step with the target ``advance_to`` reaches."""
    table = Table(title=f"Flow: {flow.name}" if flow.name else "Flow")
    table.add_column("Target", justify="right")
    table.add_column("Name")
    table.add_column("Default value")
    table.add_column("Default exception")

    for index, step in enumerate(flow):
        value = "" if step.default_value is None else pretty(step.default_value)
        table.add_row(
            Text(str(index + 2)),
            Text(step.name),
            Text(value),
            Text(_exception_text(flow, index)),
        )
    return table


@app.command(name="validate")
def validate_command(ctx: typer.Context, flow_file: FlowFile):
    """
    Validate a flow file.

    Example:
        gentest validate checkout_flow.yaml
    """
    cli: CLIContext = ctx.obj
    flow = cli.load_flow(flow_file)
    duplicates = sorted({name for name in flow.names if flow.names.count(name) > 1})
    for name in duplicates:
        cli.console.print(
            f"⚠️  Step name '{name}' is used more than once; "
            "only the first occurrence can be targeted",
            markup=False,
            highlight=False,
        )
    cli.show_success(f"Flow '{flow.name}' is valid ({len(flow)} steps)")


@app.command(name="show")
def show_command(
    ctx: typer.Context,
    flow_file: FlowFile,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
):
    """Show the steps of a flow file."""
    cli: CLIContext = ctx.obj
    flow = cli.load_flow(flow_file)

    if output_format == OutputFormat.JSON:
        steps = [
            {"target": index + 2, **record}
            for index, record in enumerate(flow.to_records())
        ]
        cli.console.print_json(data={"name": flow.name, "steps": steps}, default=str)
        return

    cli.console.print(build_flow_table(flow))


@app.command(name="resolve")
def resolve_command(
    ctx: typer.Context,
    flow_file: FlowFile,
    name: Annotated[str, typer.Argument(help="Step name")],
):
    """Print the target that advance_to(NAME) forwards to."""
    cli: CLIContext = ctx.obj
    flow = cli.load_flow(flow_file)
    try:
        target = flow.resolve(name)
    except NotFoundError as e:
        cli.print_error(e.message)
        raise typer.Exit(code=1) from e
    cli.console.print(str(target), markup=False, highlight=False)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
