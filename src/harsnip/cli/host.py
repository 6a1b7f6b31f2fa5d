"""Terminal implementations of the snippet host and preview surface."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Literal

import pyperclip
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.syntax import Syntax
from rich.table import Table

from harsnip import console as hs_console
from harsnip.documents import split_request_blocks
from harsnip.exceptions import ClipboardError, PreviewError
from harsnip.host import RequestText
from harsnip.logging import get_logger
from harsnip.selector import TargetClientSelector

LOG = get_logger(__name__)

BACK_CHOICE = "b"
QUIT_CHOICE = "q"

# Target key to Pygments lexer name
TARGET_LEXERS: dict[str, str] = {
    "c": "c",
    "clojure": "clojure",
    "csharp": "csharp",
    "go": "go",
    "http": "http",
    "java": "java",
    "javascript": "javascript",
    "kotlin": "kotlin",
    "node": "javascript",
    "objc": "objective-c",
    "ocaml": "ocaml",
    "php": "php",
    "powershell": "powershell",
    "python": "python",
    "r": "r",
    "ruby": "ruby",
    "rust": "rust",
    "shell": "bash",
    "swift": "swift",
}

PromptFunc = Callable[..., str]


class TerminalHost:
    """Snippet host backed by a request file and the terminal.

    Args:
        path: Request file to read.
        index: Zero-based request block to use.
        console: Console for prompts and status messages (stderr by default).
        out: Console used when ``copy_to`` is "stdout".
        copy_to: Where "clipboard" writes go: the system clipboard or stdout.
        telemetry: When False, usage events are dropped.
        prompt: Prompt function, ``rich.prompt.Prompt.ask`` by default.
    """

    def __init__(
        self,
        path: Path,
        index: int = 0,
        *,
        console: Console | None = None,
        out: Console | None = None,
        copy_to: Literal["clipboard", "stdout"] = "clipboard",
        telemetry: bool = True,
        prompt: PromptFunc = Prompt.ask,
    ) -> None:
        self.path = path
        self.index = index
        self.console = console or hs_console.err_console
        self.out = out or hs_console.out_console
        self.copy_to = copy_to
        self.telemetry = telemetry
        self._prompt = prompt
        self.last_written: str | None = None

    def get_request_text(self) -> RequestText | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            LOG.warning("request_file_unreadable", path=str(self.path), error=str(exc))
            hs_console.warn(f"Cannot read {self.path}: {exc}", console=self.console)
            return None

        blocks = split_request_blocks(text)
        if self.index >= len(blocks):
            hs_console.warn(
                f"No request #{self.index} in {self.path} ({len(blocks)} found)",
                console=self.console,
            )
            return None
        return RequestText(text=blocks[self.index], context_id=str(self.path))

    def _render_items(self, selector: TargetClientSelector) -> None:
        self.console.print(
            f"\n[bold]{escape(selector.title)}[/bold] "
            f"[dim]({selector.step}/{selector.total_steps})[/dim]"
        )
        table = Table(
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Name", style="white")
        if selector.selected_target is not None:
            table.add_column("Description", style="dim")
            table.add_column("Link", style="dim")
        for number, item in enumerate(selector.items, start=1):
            if selector.selected_target is not None:
                table.add_row(str(number), item.label, item.description, item.detail)
            else:
                table.add_row(str(number), item.label)
        self.console.print(table)

    def show_selector(self, selector: TargetClientSelector) -> None:
        """Drive the selector from terminal input until it finishes.

        Numbers pick an item, ``b`` goes back, ``q`` (or Ctrl-C / Ctrl-D)
        dismisses.
        """
        while not selector.is_done:
            self._render_items(selector)
            choices = [str(n) for n in range(1, len(selector.items) + 1)]
            hint = "number"
            if selector.can_go_back:
                choices.append(BACK_CHOICE)
                hint += f", {BACK_CHOICE} to go back"
            choices.append(QUIT_CHOICE)
            hint += f", {QUIT_CHOICE} to quit"

            try:
                answer = self._prompt(
                    f"Select ({hint})",
                    console=self.console,
                    choices=choices,
                    show_choices=False,
                )
            except (KeyboardInterrupt, EOFError):
                selector.dismiss()
                break

            if answer == QUIT_CHOICE:
                selector.dismiss()
            elif answer == BACK_CHOICE:
                selector.back()
            else:
                selector.accept(selector.items[int(answer) - 1])

    def write_clipboard(self, text: str) -> None:
        if self.copy_to == "stdout":
            self.out.print(text, markup=False, highlight=False, soft_wrap=True)
        else:
            try:
                pyperclip.copy(text)
            except pyperclip.PyperclipException as exc:
                raise ClipboardError(f"Clipboard unavailable: {exc}") from exc
        self.last_written = text

    def show_error(self, message: str) -> None:
        hs_console.error(message, console=self.console)

    def show_info(self, message: str) -> None:
        hs_console.info(message, console=self.console)

    def record_event(self, name: str, properties: Mapping[str, str]) -> None:
        if self.telemetry:
            LOG.info("usage_event", event_name=name, **properties)


class TerminalPreview:
    """Prints snippets as syntax-highlighted panels."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        theme: str = "monokai",
        line_numbers: bool = False,
    ) -> None:
        self.console = console or hs_console.out_console
        self.theme = theme
        self.line_numbers = line_numbers
        self._disposed = False

    def render(self, snippet: str, title: str, target_key: str) -> None:
        if self._disposed:
            raise PreviewError("Preview has been disposed")
        syntax = Syntax(
            snippet,
            TARGET_LEXERS.get(target_key, "text"),
            theme=self.theme,
            line_numbers=self.line_numbers,
            word_wrap=True,
        )
        self.console.print(Panel(syntax, title=title, border_style="cyan"))

    def dispose(self) -> None:
        self._disposed = True
