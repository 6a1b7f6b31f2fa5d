"""harsnip CLI - turn request files into code snippets."""

import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Literal

import typer
from rich.panel import Panel
from rich.table import Table

import harsnip
from harsnip import console as hs_console
from harsnip.cli.host import TerminalHost, TerminalPreview
from harsnip.config import get_settings
from harsnip.controller import SnippetController
from harsnip.documents import DocumentRequestParser
from harsnip.exceptions import HarsnipError
from harsnip.har.converter import convert_to_har_request
from harsnip.logging import configure_logging, get_logger
from harsnip.snippet.engine import available_targets

# Configure logging early using env vars directly; -v/-vv and --log-format
# in main_callback() may reconfigure later.
configure_logging(
    level=os.environ.get("HARSNIP_LOG_LEVEL", "WARNING"),
    json_output=os.environ.get("HARSNIP_LOG_FORMAT", "console") == "json",
)

LOG = get_logger(__name__)

app = typer.Typer(
    name="harsnip",
    help="""
    harsnip - turn HTTP request files into code snippets

    \b
    Quick start:
      harsnip generate api.yaml        Pick a language and preview the snippet
      harsnip curl api.yaml            Copy the request as a cURL command
      harsnip convert api.yaml         Print the request as HAR JSON
      harsnip targets                  List available languages and clients
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

RequestFile = Annotated[
    Path,
    typer.Argument(
        help="Request file (YAML/JSON blocks separated by ---)",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
IndexOption = Annotated[
    int | None,
    typer.Option("--index", "-i", min=0, help="Request block to use (0-based)"),
]


@contextmanager
def _cli_errors() -> Iterator[None]:
    """Turn harsnip errors into a red message and exit code 1."""
    try:
        yield
    except HarsnipError as exc:
        LOG.debug("command_failed", error=str(exc), error_type=type(exc).__name__)
        hs_console.error(str(exc))
        raise typer.Exit(1) from exc


def _build_controller(
    request_file: Path,
    index: int | None,
    *,
    copy_to: Literal["clipboard", "stdout"] = "clipboard",
) -> tuple[SnippetController, TerminalHost]:
    settings = get_settings()
    host = TerminalHost(
        request_file,
        settings.default_index if index is None else index,
        copy_to=copy_to,
        telemetry=settings.telemetry,
    )
    preview = TerminalPreview(theme=settings.preview_theme, line_numbers=settings.line_numbers)
    return SnippetController(host, DocumentRequestParser(), preview), host


@app.callback(invoke_without_command=True)
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v for info, -vv for debug)",
        ),
    ] = 0,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            help="Log output format: console (human-readable) or json (structured)",
        ),
    ] = None,
) -> None:
    """harsnip - turn HTTP request files into code snippets."""
    settings = get_settings()
    json_output = (log_format or settings.log_format) == "json"

    if verbose >= 2:
        configure_logging(level="DEBUG", json_output=json_output)
    elif verbose >= 1:
        configure_logging(level="INFO", json_output=json_output)
    elif log_format is not None:
        configure_logging(level=settings.log_level, json_output=json_output)


@app.command("version")
def version() -> None:
    """Show harsnip version."""
    hs_console.out_console.print(
        Panel(
            f"[bold cyan]harsnip[/bold cyan] v{harsnip.__version__}",
            title="HTTP requests to code snippets",
            border_style="cyan",
        )
    )


@app.command("targets")
def targets() -> None:
    """List snippet targets and their clients."""
    catalog = available_targets()
    if not catalog:
        hs_console.info("No available code snippet convert targets")
        return

    table = Table(
        title="Snippet Targets",
        title_style="bold",
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Target", style="cyan")
    table.add_column("Client", style="white")
    table.add_column("Description", style="dim")

    for target in catalog:
        for client in target.clients:
            table.add_row(
                f"{target.title} ({target.key})",
                f"{client.title} ({client.key})",
                client.description,
            )

    hs_console.out_console.print(table)


@app.command("generate")
def generate(
    request_file: RequestFile,
    index: IndexOption = None,
    copy: Annotated[
        bool,
        typer.Option("--copy", "-c", help="Copy the generated snippet to the clipboard"),
    ] = False,
) -> None:
    """Pick a target and client, then preview the generated snippet.

    \b
    Examples:
        harsnip generate api.yaml
        harsnip generate api.yaml --index 2 --copy
    """
    controller, _ = _build_controller(request_file, index)
    try:
        with _cli_errors():
            controller.generate_snippet()
            if copy and controller.last_snippet:
                controller.copy_last_snippet()
                hs_console.success("Snippet copied to clipboard")
    finally:
        controller.dispose()


@app.command("curl")
def curl(
    request_file: RequestFile,
    index: IndexOption = None,
    print_only: Annotated[
        bool,
        typer.Option("--print", "-p", help="Print the command instead of copying it"),
    ] = False,
) -> None:
    """Copy a request as a cURL command.

    \b
    Examples:
        harsnip curl api.yaml
        harsnip curl api.yaml -i 1 --print
    """
    controller, host = _build_controller(
        request_file, index, copy_to="stdout" if print_only else "clipboard"
    )
    try:
        with _cli_errors():
            controller.copy_as_curl()
    finally:
        controller.dispose()
    if host.last_written is not None and not print_only:
        hs_console.success("cURL command copied to clipboard")


@app.command("convert")
def convert(
    request_file: RequestFile,
    index: IndexOption = None,
) -> None:
    """Print a request as a HAR request object (JSON)."""
    settings = get_settings()
    host = TerminalHost(request_file, settings.default_index if index is None else index)
    request_text = host.get_request_text()
    if request_text is None:
        raise typer.Exit(1)

    with _cli_errors():
        http_request = DocumentRequestParser().parse(request_text.text, request_text.context_id)
    har_request = convert_to_har_request(http_request)
    hs_console.out_console.print_json(json.dumps(har_request.to_dict()))


if __name__ == "__main__":
    app()
