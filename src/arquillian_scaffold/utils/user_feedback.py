"""User feedback utilities for the scaffolding CLI."""

import logging
from contextlib import contextmanager
from typing import Optional, Iterator, Any, Dict, List, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Confirm, Prompt
from rich.align import Align
from rich.syntax import Syntax
import rich.box

logger = logging.getLogger(__name__)


class StatusIcon:
    """Status icons for CLI display."""

    SUCCESS = "[bold green]✓[/bold green]"
    ERROR = "[bold red]✗[/bold red]"
    WARNING = "[bold yellow]⚠[/bold yellow]"
    INFO = "[bold blue]●[/bold blue]"
    PROGRESS = "[bold cyan]▶[/bold cyan]"
    DEBUG = "[dim]◦[/dim]"

    LOADING = "[bold cyan]◐[/bold cyan]"
    GENERATING = "[bold green]◈[/bold green]"


class UserFeedback:
    """User feedback through rich consoles."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet
        self.console = Console(stderr=False, force_terminal=True)
        self.error_console = Console(stderr=True, force_terminal=True)

    def success(self, message: str, details: Optional[str] = None):
        """Display success message with checkmark icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.SUCCESS} {message}")
            if details and self.verbose:
                self._print_details(details, "green")

    def error(self, message: str, suggestion: Optional[str] = None, details: Optional[str] = None):
        """Display error message with error icon and optional suggestion."""
        # Always show errors, even in quiet mode
        self.error_console.print(f"{StatusIcon.ERROR} [bold red]Error:[/bold red] {message}")

        if suggestion:
            self.error_console.print(f"  [yellow]💡 Suggestion:[/yellow] {suggestion}")

        if details and self.verbose:
            self._print_details(details, "red", console=self.error_console)

    def warning(self, message: str, suggestion: Optional[str] = None):
        """Display warning message with warning icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.WARNING} [bold yellow]Warning:[/bold yellow] {message}")

            if suggestion:
                self.console.print(f"  [yellow]💡 {suggestion}[/yellow]")

    def info(self, message: str, details: Optional[str] = None):
        """Display info message with info icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.INFO} {message}")

            if details and self.verbose:
                self._print_details(details, "blue")

    def debug(self, message: str, details: Optional[str] = None):
        """Display debug message (only in verbose mode)."""
        if self.verbose and not self.quiet:
            self.console.print(f"{StatusIcon.DEBUG} [dim]{message}[/dim]")
            if details:
                self._print_details(details, "dim")

    def section_header(self, title: str):
        """Display a section header with borders."""
        if not self.quiet:
            panel = Panel(
                Align.center(Text(title, style="bold white")),
                border_style="bright_blue",
                padding=(0, 1),
            )
            self.console.print()
            self.console.print(panel)

    def brand_header(self, subtitle: str = ""):
        """Display a concise header."""
        if not self.quiet:
            title_text = Text()
            title_text.append("Arquillian Scaffold", style="bold bright_blue")
            if subtitle:
                title_text.append(f" • {subtitle}", style="dim cyan")

            header_panel = Panel(
                Align.center(title_text),
                border_style="bright_blue",
                box=rich.box.DOUBLE,
                padding=(0, 2),
            )
            self.console.print(header_panel)

    def status_table(self, title: str, items: List[Tuple[str, str, str]]):
        """Display a status table with icons.

        Args:
            title: Table title
            items: List of (status, name, description) tuples
        """
        if not self.quiet:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            table.add_column("Status", style="bold", width=8, justify="center")
            table.add_column("Item", style="cyan", min_width=20)
            table.add_column("Description", style="white")

            for status, name, description in items:
                table.add_row(self._get_status_icon(status), name, description)

            self.console.print(table)

    def summary_panel(self, title: str, items: Dict[str, Any], style: str = "green"):
        """Display a summary panel with key-value pairs."""
        if not self.quiet:
            content = [f"[bold]{key}:[/bold] {value}" for key, value in items.items()]
            panel = Panel(
                "\n".join(content),
                title=title,
                border_style=style,
                padding=(1, 2)
            )
            self.console.print(panel)

    def show_source(self, title: str, source: str):
        """Print generated Java source with syntax highlighting."""
        self.console.print(Panel(Syntax(source, "java", line_numbers=False), title=title, border_style="cyan"))

    @contextmanager
    def status_spinner(self, message: str, spinner_style: str = "dots") -> Iterator[Any]:
        """Display a status spinner for long operations."""
        if not self.quiet:
            with self.console.status(f"{StatusIcon.LOADING} {message}", spinner=spinner_style) as status:
                yield status
        else:
            yield None

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask user for confirmation with rich prompt."""
        # Always show confirmation prompts, even in quiet mode
        return Confirm.ask(message, default=default, console=self.console)

    def prompt_choice(self, message: str, choices: Sequence[Any], default_index: int = 0) -> Any:
        """Let the operator pick one of ``choices``, shown as a numbered list."""
        if not choices:
            raise ValueError("No choices to prompt for")

        for number, choice in enumerate(choices, 1):
            self.console.print(f"  [bold cyan]{number:>3}[/bold cyan] {choice}")

        answer = Prompt.ask(
            message,
            console=self.console,
            choices=[str(n) for n in range(1, len(choices) + 1)],
            default=str(default_index + 1),
            show_choices=False,
        )
        return choices[int(answer) - 1]

    def divider(self, text: str = ""):
        """Print a divider line."""
        if not self.quiet:
            if text:
                self.console.print(f"\n[dim]{'─' * 20} {text} {'─' * 20}[/dim]")
            else:
                self.console.print(f"[dim]{'─' * 56}[/dim]")

    def result(self, message: str, details: Optional[str] = None):
        """Display important results - always shown even in quiet mode."""
        self.console.print(f"{StatusIcon.SUCCESS} [bold green]{message}[/bold green]")
        if details and (self.verbose or not self.quiet):
            self._print_details(details, "green")

    def _print_details(self, details: str, style: str, console: Optional[Console] = None):
        """Print details with indentation and styling."""
        target_console = console or self.console
        for line in details.split('\n'):
            if line.strip():
                target_console.print(f"  [dim]│[/dim] [{style}]{line}[/{style}]")

    def _get_status_icon(self, status: str) -> str:
        """Get appropriate icon for status."""
        status_lower = status.lower()
        if status_lower in ['success', 'added', 'present', 'done', 'ok']:
            return StatusIcon.SUCCESS
        elif status_lower in ['error', 'failed', 'fail']:
            return StatusIcon.ERROR
        elif status_lower in ['warning', 'warn', 'missing']:
            return StatusIcon.WARNING
        elif status_lower in ['running', 'progress']:
            return StatusIcon.PROGRESS
        elif status_lower in ['generating', 'generated']:
            return StatusIcon.GENERATING
        else:
            return StatusIcon.INFO
