"""File mutation primitives used by every pipeline step.

Each operation transforms exactly one file inside the workspace:

    create              write a new file (PathConflictError if it exists)
    append              add content after existing bytes (PathNotFoundError if missing)
    insert_after_anchor insert after the first occurrence of literal text
                        (AnchorNotFoundError if absent, file left untouched)
    substitute_pattern  replace every regex match; zero matches is a no-op
    remove              delete a file or directory; absent paths are ignored

Content is always built in memory before the single write, and nothing is
timestamped, so the same input file and arguments always produce the same
output.
"""

import logging
import re
from pathlib import Path

from railstart.exceptions import AnchorNotFoundError, PathConflictError, PathNotFoundError
from railstart.models.enums import MutationKind
from railstart.models.mutation import MutationPrimitive
from railstart.models.workspace import WorkspaceHandle
from railstart.utils.file_utils import (
    append_file,
    delete_dir,
    delete_file,
    file_exists,
    read_file,
    write_file,
)

logger = logging.getLogger(__name__)


class FileMutator:
    """Apply mutation primitives to files in one workspace."""

    def __init__(self, workspace: WorkspaceHandle):
        """Initialize file mutator.

        Args:
            workspace: Workspace whose files are mutated
        """
        self.workspace = workspace

    def create(self, path: Path | str, content: str) -> Path:
        """Write a new file, creating parent directories.

        Args:
            path: Workspace-relative path
            content: Exact file content

        Returns:
            Absolute path written

        Raises:
            PathConflictError: If something already exists at path
        """
        target = self.workspace.resolve(path)
        if target.exists():
            raise PathConflictError(path)

        write_file(target, content)
        logger.debug(f"Created {path}")
        return target

    def append(self, path: Path | str, content: str) -> Path:
        """Append content to an existing file.

        Raises:
            PathNotFoundError: If the file doesn't exist
        """
        target = self._existing_file(path)
        append_file(target, content)
        logger.debug(f"Appended {len(content)} chars to {path}")
        return target

    def insert_after_anchor(self, path: Path | str, anchor: str, content: str) -> Path:
        """Insert content right after the first occurrence of anchor.

        Only the first occurrence is used even when the anchor appears
        several times in the file.

        Raises:
            PathNotFoundError: If the file doesn't exist
            AnchorNotFoundError: If anchor does not occur verbatim in the file
        """
        target = self._existing_file(path)
        original = read_file(target)

        index = original.find(anchor)
        if index == -1:
            raise AnchorNotFoundError(path, anchor)

        split_at = index + len(anchor)
        write_file(target, original[:split_at] + content + original[split_at:])
        logger.debug(f"Inserted {len(content)} chars into {path} at offset {split_at}")
        return target

    def substitute_pattern(self, path: Path | str, pattern: str, replacement: str) -> int:
        """Replace all non-overlapping regex matches in a file.

        The replacement is inserted literally (no backreference expansion).
        A pattern that matches nothing leaves the file untouched.

        Returns:
            Number of replacements made

        Raises:
            PathNotFoundError: If the file doesn't exist
        """
        target = self._existing_file(path)
        original = read_file(target)

        updated, count = re.subn(pattern, lambda _match: replacement, original)
        if count:
            write_file(target, updated)
            logger.debug(f"Replaced {count} match(es) of /{pattern}/ in {path}")
        else:
            logger.debug(f"No matches for /{pattern}/ in {path}")
        return count

    def remove(self, path: Path | str) -> bool:
        """Delete a file or directory tree if present.

        Returns:
            True if something was deleted, False if path was already absent
        """
        target = self.workspace.resolve(path)
        if target.is_dir() and not target.is_symlink():
            removed = delete_dir(target)
        else:
            removed = delete_file(target)

        if removed:
            logger.debug(f"Removed {path}")
        return removed

    def apply(self, primitive: MutationPrimitive) -> None:
        """Apply one MutationPrimitive.

        Args:
            primitive: The mutation to apply
        """
        if primitive.kind == MutationKind.CREATE:
            self.create(primitive.path, primitive.content or "")
        elif primitive.kind == MutationKind.APPEND:
            self.append(primitive.path, primitive.content or "")
        elif primitive.kind == MutationKind.INSERT_AFTER_ANCHOR:
            self.insert_after_anchor(primitive.path, primitive.anchor or "", primitive.content or "")
        elif primitive.kind == MutationKind.SUBSTITUTE_PATTERN:
            self.substitute_pattern(primitive.path, primitive.pattern or "", primitive.replacement or "")
        elif primitive.kind == MutationKind.REMOVE:
            self.remove(primitive.path)
        else:
            raise ValueError(f"Unsupported mutation kind: {primitive.kind}")

    def _existing_file(self, path: Path | str) -> Path:
        target = self.workspace.resolve(path)
        if not file_exists(target):
            raise PathNotFoundError(path)
        return target
