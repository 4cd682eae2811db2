"""CLI commands for railstart."""

from railstart.commands.apply_cmd import apply_command
from railstart.commands.steps_cmd import build_step_table, steps_command

__all__ = [
    "apply_command",
    "build_step_table",
    "steps_command",
]
