"""Pipeline context for the scaffolding flow."""

from dataclasses import dataclass, field
from typing import Any

from railstart.config.messages import WARNING_MESSAGES
from railstart.models.config import ScaffoldConfig
from railstart.models.enums import FailurePolicy
from railstart.models.mutation import CommandInvocation
from railstart.models.results import CheckpointResult, CommandResult
from railstart.models.workspace import WorkspaceHandle
from railstart.services.checkpoint_service import CheckpointManager
from railstart.services.command_runner import CommandRunner
from railstart.services.file_mutator import FileMutator
from railstart.services.remote_service import RemoteService
from railstart.services.template_service import TemplateService


@dataclass
class PipelineContext:
    """Context shared across all pipeline stages.

    This is the primary data structure that flows through the pipeline.
    It carries the immutable run configuration, the workspace capability and
    the services bound to it, and collects results, warnings, and errors as
    stages execute.

    Example:
        >>> workspace = WorkspaceHandle(Path.cwd())
        >>> ctx = PipelineContext(
        ...     workspace=workspace,
        ...     config=ScaffoldConfig(app_name="blog-app"),
        ... )
        >>> ctx.mutator.create("notes.txt", "hello\\n")
    """

    # Immutable configuration
    workspace: WorkspaceHandle
    config: ScaffoldConfig

    # Runtime options
    checkpoint_policy: FailurePolicy = FailurePolicy.WARN_AND_CONTINUE

    # Services (built from the workspace unless injected)
    runner: CommandRunner | None = None
    templates: TemplateService = field(default_factory=TemplateService)
    environment: dict[str, str] | None = None

    # Stage results (populated during execution)
    stage_results: dict[str, Any] = field(default_factory=dict)
    checkpoints: list[CheckpointResult] = field(default_factory=list)
    command_results: list[CommandResult] = field(default_factory=list)

    # Errors and warnings collected during execution
    errors: list[tuple[str, str]] = field(default_factory=list)  # (stage_name, error_msg)
    warnings: list[tuple[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.runner is None:
            self.runner = CommandRunner(self.workspace)
        self._mutator = FileMutator(self.workspace)
        self._checkpoint_manager = CheckpointManager(self.command_runner)

    @property
    def command_runner(self) -> CommandRunner:
        """Runner bound to the workspace (never None after init)."""
        assert self.runner is not None
        return self.runner

    @property
    def mutator(self) -> FileMutator:
        """File mutator bound to the workspace."""
        return self._mutator

    @property
    def checkpoint_manager(self) -> CheckpointManager:
        """Checkpoint manager using the context's runner."""
        return self._checkpoint_manager

    def remote_service(self) -> RemoteService:
        """Hosting provider factory for this run."""
        return RemoteService(self.config, self.command_runner, self.environment)

    # -------------------------------------------------------------------------
    # Command helpers
    # -------------------------------------------------------------------------

    def run_command(self, stage_name: str, invocation: CommandInvocation) -> CommandResult:
        """Run a command on behalf of a stage, honouring its policy tag.

        Failed warn-and-continue commands are recorded as warnings.

        Raises:
            ProcessFailureError: If the command failed and is tagged abort
        """
        result = self.command_runner.invoke(invocation)
        self.command_results.append(result)
        if not result.succeeded:
            self.add_warning(
                stage_name,
                WARNING_MESSAGES["command_failed"].format(
                    command=result.command, exit_code=result.exit_code
                ),
            )
        return result

    def checkpoint(self, stage_name: str, message: str) -> CheckpointResult:
        """Run a checkpoint with the configured policy and record it.

        Raises:
            ProcessFailureError: If a sub-command fails under the abort policy
        """
        checkpoint = self.checkpoint_manager.checkpoint(message, self.checkpoint_policy)
        self.checkpoints.append(checkpoint)
        for failed in checkpoint.failed_commands:
            self.add_warning(
                stage_name,
                WARNING_MESSAGES["checkpoint_failed"].format(
                    message=message, command=failed.command, exit_code=failed.exit_code
                ),
            )
        return checkpoint

    # -------------------------------------------------------------------------
    # Results, errors, and warnings
    # -------------------------------------------------------------------------

    def add_error(self, stage_name: str, message: str) -> None:
        """Record an error from a stage."""
        self.errors.append((stage_name, message))

    def add_warning(self, stage_name: str, message: str) -> None:
        """Record a warning from a stage."""
        self.warnings.append((stage_name, message))

    def set_result(self, stage_name: str, result: Any) -> None:
        """Store result from a stage for later stages to use."""
        self.stage_results[stage_name] = result

    def get_result(self, stage_name: str, default: Any = None) -> Any:
        """Get result from a previous stage."""
        return self.stage_results.get(stage_name, default)

    @property
    def failed_checkpoints(self) -> list[CheckpointResult]:
        """Checkpoints with at least one failed sub-command."""
        return [c for c in self.checkpoints if not c.succeeded]
