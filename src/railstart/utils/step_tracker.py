"""Step tracker for displaying progress during the scaffolding pipeline."""

from railstart.utils.console import get_console


class StepTracker:
    """Track and display progress through multiple steps.

    Example:
        >>> tracker = StepTracker(3)
        >>> tracker.start_step("Updating .gitignore")
        >>> # ... do work ...
        >>> tracker.complete_step("Updated .gitignore")
        >>> tracker.start_step("Adding gems")
        >>> tracker.warn_step("Added gems", "checkpoint: `bundle install` exited 1")
    """

    def __init__(self, total_steps: int):
        """Initialize step tracker.

        Args:
            total_steps: Total number of steps to track
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.console = get_console()
        self._current_message: str | None = None

    @property
    def _prefix(self) -> str:
        return f"[{self.current_step}/{self.total_steps}]"

    def start_step(self, message: str) -> None:
        """Start a new step.

        Args:
            message: Description of the step being started
        """
        self.current_step += 1
        self._current_message = message
        self.console.print(f"[cyan bold]{self._prefix}[/cyan bold] {message}...", end="")

    def complete_step(self, message: str | None = None) -> None:
        """Mark current step as complete.

        Args:
            message: Optional completion message (uses start message if not provided)
        """
        if message is None:
            message = self._current_message or "Done"

        # Move to beginning of line and clear
        self.console.print("\r", end="")
        self.console.print(f"[green]✓[/green] [cyan bold]{self._prefix}[/cyan bold] {message}")

    def warn_step(self, message: str | None = None, warning: str | None = None) -> None:
        """Mark current step as complete with warnings.

        Args:
            message: Optional completion message
            warning: Warning details shown under the step
        """
        if message is None:
            message = self._current_message or "Done with warnings"

        self.console.print("\r", end="")
        self.console.print(f"[yellow]![/yellow] [cyan bold]{self._prefix}[/cyan bold] {message}")

        if warning:
            self.console.print(f"  [yellow]{warning}[/yellow]")

    def fail_step(self, message: str | None = None, error: str | None = None) -> None:
        """Mark current step as failed.

        Args:
            message: Optional failure message
            error: Optional error details
        """
        if message is None:
            message = self._current_message or "Failed"

        self.console.print("\r", end="")
        self.console.print(f"[red]✗[/red] [cyan bold]{self._prefix}[/cyan bold] {message}")

        if error:
            self.console.print(f"  [red]{error}[/red]")

    def finish(self, message: str = "All steps completed!") -> None:
        """Mark all steps as finished.

        Args:
            message: Final completion message
        """
        self.console.print(f"\n[green bold]✓ {message}[/green bold]")
