"""Command runner for external processes.

Every external invocation the pipeline makes (bundler, rails generators,
git, hosting CLIs) goes through CommandRunner.run, which always returns a
CommandResult. A non-zero exit never raises here; call sites decide what a
failure means by tagging the invocation with a FailurePolicy and passing the
result to enforce_policy.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from railstart.config.settings import runner_settings
from railstart.exceptions import ProcessFailureError
from railstart.models.enums import FailurePolicy
from railstart.models.mutation import CommandInvocation
from railstart.models.results import CommandResult
from railstart.models.workspace import WorkspaceHandle

logger = logging.getLogger(__name__)

# Conventional shell exit codes used when the process never produced one
EXIT_COMMAND_NOT_FOUND = 127
EXIT_TIMED_OUT = 124
EXIT_NOT_EXECUTABLE = 126


class CommandRunner:
    """Run external commands inside a workspace.

    Example:
        >>> runner = CommandRunner(WorkspaceHandle(Path.cwd()))
        >>> result = runner.run("git", ["status", "--short"])
        >>> result.succeeded
        True
    """

    def __init__(self, workspace: WorkspaceHandle, timeout: float | None = None):
        """Initialize command runner.

        Args:
            workspace: Workspace commands run in
            timeout: Optional timeout in seconds (defaults to runner settings,
                     which impose no timeout unless configured)
        """
        self.workspace = workspace
        self.timeout = timeout if timeout is not None else runner_settings.command_timeout_seconds

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | str | None = None,
    ) -> CommandResult:
        """Run one command to completion.

        Args:
            command: Executable name
            args: Arguments (passed without a shell)
            cwd: Optional workspace-relative working directory

        Returns:
            CommandResult with exit status and combined stdout/stderr
        """
        argv = [command, *args]
        command_line = " ".join(argv)
        workdir = self.workspace.resolve(cwd) if cwd else self.workspace.root

        logger.debug(f"Running `{command_line}` in {workdir}")
        try:
            completed = subprocess.run(
                argv,
                cwd=workdir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
                timeout=self.timeout,
            )
            result = CommandResult(command_line, completed.returncode, completed.stdout or "")
        except FileNotFoundError:
            result = CommandResult(
                command_line, EXIT_COMMAND_NOT_FOUND, f"{command}: command not found"
            )
        except PermissionError as e:
            result = CommandResult(command_line, EXIT_NOT_EXECUTABLE, str(e))
        except subprocess.TimeoutExpired as e:
            output = e.output if isinstance(e.output, str) else ""
            result = CommandResult(
                command_line,
                EXIT_TIMED_OUT,
                f"{output}\nTimed out after {self.timeout} seconds".lstrip(),
            )

        if result.succeeded:
            logger.debug(f"`{command_line}` succeeded")
        else:
            logger.debug(f"`{command_line}` exited with status {result.exit_code}")
            if result.output_tail:
                logger.debug(result.output_tail)
        return result

    def invoke(self, invocation: CommandInvocation) -> CommandResult:
        """Run a CommandInvocation and apply its failure policy.

        Raises:
            ProcessFailureError: If the command failed and the policy is abort
        """
        result = self.run(invocation.command, invocation.args)
        enforce_policy(result, invocation.policy)
        return result


def enforce_policy(result: CommandResult, policy: FailurePolicy) -> CommandResult:
    """Raise for a failed result when the call site asked to abort.

    Args:
        result: Outcome of a command
        policy: Policy chosen by the call site

    Returns:
        The same result (for chaining)

    Raises:
        ProcessFailureError: If the command failed and policy is ABORT_ON_FAILURE
    """
    if not result.succeeded and policy == FailurePolicy.ABORT_ON_FAILURE:
        raise ProcessFailureError(result.command, result.exit_code, result.output)
    return result
