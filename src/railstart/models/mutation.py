"""Value types describing the work a pipeline step performs.

A step is declared as an ordered list of actions. Each action is either a
MutationPrimitive (one file operation on one path) or a CommandInvocation
(one external process with an explicit failure policy). Both are immutable
values, so a step table can be built, inspected, and printed without
touching the filesystem.
"""

from dataclasses import dataclass

from railstart.models.enums import FailurePolicy, MutationKind


@dataclass(frozen=True)
class MutationPrimitive:
    """One file operation on exactly one path.

    Use the classmethod constructors rather than building instances by hand;
    they make sure each kind carries the payload it needs.

    Example:
        >>> MutationPrimitive.append(".gitignore", ".idea\\n")
        >>> MutationPrimitive.substitute("Gemfile", r"gem 'sqlite3'[\\r\\n]", "")
    """

    kind: MutationKind
    path: str
    content: str | None = None
    anchor: str | None = None
    pattern: str | None = None
    replacement: str | None = None

    @classmethod
    def create(cls, path: str, content: str) -> "MutationPrimitive":
        return cls(MutationKind.CREATE, path, content=content)

    @classmethod
    def append(cls, path: str, content: str) -> "MutationPrimitive":
        return cls(MutationKind.APPEND, path, content=content)

    @classmethod
    def insert_after(cls, path: str, anchor: str, content: str) -> "MutationPrimitive":
        return cls(MutationKind.INSERT_AFTER_ANCHOR, path, content=content, anchor=anchor)

    @classmethod
    def substitute(cls, path: str, pattern: str, replacement: str) -> "MutationPrimitive":
        return cls(
            MutationKind.SUBSTITUTE_PATTERN, path, pattern=pattern, replacement=replacement
        )

    @classmethod
    def remove(cls, path: str) -> "MutationPrimitive":
        return cls(MutationKind.REMOVE, path)

    def describe(self) -> str:
        """Short human-readable description for dry runs and logs."""
        if self.kind == MutationKind.INSERT_AFTER_ANCHOR:
            anchor = (self.anchor or "").strip()
            return f"insert into {self.path} after '{anchor}'"
        if self.kind == MutationKind.SUBSTITUTE_PATTERN:
            return f"substitute /{self.pattern}/ in {self.path}"
        return f"{self.kind.value} {self.path}"


@dataclass(frozen=True)
class CommandInvocation:
    """One external command and what to do if it fails."""

    command: str
    args: tuple[str, ...] = ()
    policy: FailurePolicy = FailurePolicy.WARN_AND_CONTINUE

    @property
    def command_line(self) -> str:
        """The command as a single display string."""
        return " ".join([self.command, *self.args])

    def describe(self) -> str:
        """Short human-readable description for dry runs and logs."""
        return f"run `{self.command_line}` [{self.policy.value}]"


StepAction = MutationPrimitive | CommandInvocation
