"""Workspace handle shared by the mutator, runner, and checkpoint manager."""

from dataclasses import dataclass
from pathlib import Path

from railstart.config.paths import GIT_DIR
from railstart.exceptions import WorkspaceError


@dataclass(frozen=True)
class WorkspaceHandle:
    """Capability for one working tree and its version-control repository.

    Every component that touches the filesystem or runs commands receives a
    handle explicitly instead of relying on the process working directory,
    which lets tests point the whole pipeline at a temporary directory.

    Example:
        >>> workspace = WorkspaceHandle(Path("/tmp/blog-app"))
        >>> workspace.resolve("config/database.yml")
        PosixPath('/tmp/blog-app/config/database.yml')
    """

    root: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root).resolve())

    def resolve(self, path: Path | str) -> Path:
        """Resolve a project-relative path to an absolute path inside the root.

        Args:
            path: Path relative to the workspace root

        Returns:
            Absolute path

        Raises:
            WorkspaceError: If the path escapes the workspace root
        """
        candidate = (self.root / path).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise WorkspaceError("Path escapes workspace root", path)
        return candidate

    @property
    def is_git_repo(self) -> bool:
        """Whether the workspace root already holds a git repository."""
        return (self.root / GIT_DIR).exists()
