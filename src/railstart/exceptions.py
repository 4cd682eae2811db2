"""Custom exceptions for railstart.

All exceptions inherit from RailstartError, allowing callers to catch
every railstart failure with a single except clause if desired.

Exception hierarchy:
    RailstartError (base)
    ├── MutationError
    │   ├── PathConflictError
    │   ├── PathNotFoundError
    │   └── AnchorNotFoundError
    ├── ProcessFailureError
    ├── RemoteCreationError
    └── WorkspaceError

Mutation errors mean the skeleton does not look like the templates expect;
they abort the step that raised them. ProcessFailureError is only raised for
command call sites tagged with the abort policy. RemoteCreationError is
handled by the hosting stages, which skip the dependent push.
"""

from pathlib import Path
from typing import Any


class RailstartError(Exception):
    """Base exception for all railstart errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# File Mutation Errors
# =============================================================================


class MutationError(RailstartError):
    """Raised when a file mutation primitive cannot be applied."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message, {"path": str(path)})
        self.path = Path(path)


class PathConflictError(MutationError):
    """Raised when creating a file at a path that already exists."""

    def __init__(self, path: Path | str):
        super().__init__("File already exists", path)


class PathNotFoundError(MutationError):
    """Raised when mutating a file that does not exist."""

    def __init__(self, path: Path | str):
        super().__init__("File not found", path)


class AnchorNotFoundError(MutationError):
    """Raised when the anchor text for an insertion is absent from the file."""

    def __init__(self, path: Path | str, anchor: str):
        super().__init__("Anchor text not found", path)
        # Keep the anchor short in the details; some anchors span lines
        self.details["anchor"] = anchor.strip()[:80]
        self.anchor = anchor


# =============================================================================
# Process and Remote Errors
# =============================================================================


class ProcessFailureError(RailstartError):
    """Raised when an external command tagged abort-on-failure exits non-zero.

    Attributes:
        command: The command line that failed.
        exit_code: Process exit status.
        output: Captured combined output.
    """

    def __init__(self, command: str, exit_code: int, output: str = ""):
        super().__init__("Command failed", {"command": command, "exit_code": exit_code})
        self.command = command
        self.exit_code = exit_code
        self.output = output


class RemoteCreationError(RailstartError):
    """Raised when a hosting provider could not provision a remote repository."""

    def __init__(self, message: str, provider: str, cause: Exception | None = None):
        details: dict[str, Any] = {"provider": provider}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message, details)
        self.provider = provider
        self.cause = cause


class WorkspaceError(RailstartError):
    """Raised when a path resolves outside the workspace root."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message, {"path": str(path)})
        self.path = Path(path)
