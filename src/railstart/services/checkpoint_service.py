"""Checkpoint manager: stage and commit the changes of one pipeline step."""

import logging

from railstart.config.messages import WARNING_MESSAGES
from railstart.models.enums import FailurePolicy
from railstart.models.results import CheckpointResult
from railstart.services.command_runner import CommandRunner, enforce_policy

logger = logging.getLogger(__name__)


class CheckpointManager:
    """Make one step's cumulative changes durable in git.

    A checkpoint runs, in order, `bundle install`, `git add --all .`, and
    `git commit -m <message>`. With the default warn policy a failing
    sub-command is logged and recorded but the remaining sub-commands still
    run and the caller carries on; with the abort policy the first failure
    raises ProcessFailureError. Nothing is rolled back or retried.
    """

    def __init__(self, runner: CommandRunner):
        """Initialize checkpoint manager.

        Args:
            runner: Runner bound to the workspace being committed
        """
        self.runner = runner

    def checkpoint(
        self,
        message: str,
        policy: FailurePolicy = FailurePolicy.WARN_AND_CONTINUE,
    ) -> CheckpointResult:
        """Install dependencies, stage everything, and commit.

        Args:
            message: Commit message describing the step just completed
            policy: What to do when a sub-command fails

        Returns:
            CheckpointResult with every sub-command result

        Raises:
            ProcessFailureError: If a sub-command fails under the abort policy
        """
        checkpoint = CheckpointResult(message)
        commands: list[tuple[str, list[str]]] = [
            ("bundle", ["install"]),
            ("git", ["add", "--all", "."]),
            ("git", ["commit", "-m", message]),
        ]

        for command, args in commands:
            result = self.runner.run(command, args)
            checkpoint.results.append(result)
            if not result.succeeded:
                logger.warning(
                    WARNING_MESSAGES["checkpoint_failed"].format(
                        message=message, command=result.command, exit_code=result.exit_code
                    )
                )
            enforce_policy(result, policy)

        return checkpoint
