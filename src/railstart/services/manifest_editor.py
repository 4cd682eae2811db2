"""Gemfile editing expressed as mutation primitives.

ManifestEditor never touches the filesystem itself: each method returns the
MutationPrimitive that performs the edit, so Gemfile changes sit in the step
table next to every other file change and are applied by the FileMutator.
Generated gem lines follow the format of Rails' own `gem` and `gem_group`
generator actions.
"""

import re
from collections.abc import Iterable, Sequence

from railstart.config.paths import GEMFILE
from railstart.constants import (
    GEMFILE_BLANK_LINES_PATTERN,
    GEMFILE_COMMENT_PATTERN,
    GEMFILE_SOURCE_LINE,
)
from railstart.models.mutation import MutationPrimitive


def format_gem_line(name: str, require: bool | None = None, group: str | None = None) -> str:
    """Render a single `gem` declaration.

    Example:
        >>> format_gem_line("rails_12factor", group="production")
        "gem 'rails_12factor', group: :production"
        >>> format_gem_line("guard-rspec", require=False)
        "gem 'guard-rspec', require: false"
    """
    parts = [f"gem '{name}'"]
    if group:
        parts.append(f"group: :{group}")
    if require is not None:
        parts.append(f"require: {'true' if require else 'false'}")
    return ", ".join(parts)


class ManifestEditor:
    """Build Gemfile mutations."""

    def __init__(self, path: str = GEMFILE):
        self.path = path

    def remove_matching(self, pattern: str) -> MutationPrimitive:
        """Remove every entry matching a regex pattern."""
        return MutationPrimitive.substitute(self.path, pattern, "")

    def remove_gem(self, name: str) -> MutationPrimitive:
        """Remove a plain `gem '<name>'` line."""
        return self.remove_matching(rf"gem '{re.escape(name)}'[\r\n]")

    def strip_comments(self) -> MutationPrimitive:
        """Remove `# ...` comments (and the newline that ends them)."""
        return self.remove_matching(GEMFILE_COMMENT_PATTERN)

    def collapse_blank_lines(self) -> MutationPrimitive:
        """Collapse runs of blank lines into single newlines."""
        return MutationPrimitive.substitute(self.path, GEMFILE_BLANK_LINES_PATTERN, "\n")

    def add_gem(
        self,
        name: str,
        group: str | None = None,
        require: bool | None = None,
    ) -> MutationPrimitive:
        """Append a gem declaration to the end of the Gemfile."""
        return MutationPrimitive.append(
            self.path, f"\n{format_gem_line(name, require=require, group=group)}\n"
        )

    def add_gem_group(
        self,
        groups: Sequence[str],
        gems: Iterable[tuple[str, bool | None]],
    ) -> MutationPrimitive:
        """Append a `group ... do ... end` block.

        Args:
            groups: Group names (e.g. ["development", "test"])
            gems: (name, require) pairs; require None omits the option
        """
        header = "group " + ", ".join(f":{g}" for g in groups) + " do"
        body = "".join(f"  {format_gem_line(name, require=require)}\n" for name, require in gems)
        return MutationPrimitive.append(self.path, f"\n{header}\n{body}end\n")

    def pin_ruby_version(self, version: str) -> MutationPrimitive:
        """Declare the Ruby version right after the rubygems source line."""
        return MutationPrimitive.insert_after(
            self.path, GEMFILE_SOURCE_LINE, f"ruby '{version}'\n"
        )
