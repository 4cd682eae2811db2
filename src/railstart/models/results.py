"""Result types for commands and services."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external process invocation.

    Consumed immediately by the caller; never persisted.
    """

    command: str
    exit_code: int
    output: str = ""

    @property
    def succeeded(self) -> bool:
        """Whether the process exited with status 0."""
        return self.exit_code == 0

    @property
    def output_tail(self) -> str:
        """Last few lines of output, for compact error reporting."""
        lines = self.output.strip().splitlines()
        return "\n".join(lines[-5:])


@dataclass
class CheckpointResult:
    """Outcome of one stage-and-commit checkpoint."""

    message: str
    results: list[CommandResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Whether every sub-command succeeded."""
        return all(r.succeeded for r in self.results)

    @property
    def failed_commands(self) -> list[CommandResult]:
        """Sub-commands that exited non-zero."""
        return [r for r in self.results if not r.succeeded]
