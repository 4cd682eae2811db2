"""Setup stages for the scaffolding pipeline."""

from railstart.models.enums import FailurePolicy
from railstart.models.mutation import CommandInvocation
from railstart.pipeline.context import PipelineContext
from railstart.pipeline.ordering import StageOrder
from railstart.pipeline.stage import BaseStage, StageOutcome


class InitRepositoryStage(BaseStage):
    """Initialize the git repository every checkpoint commits into.

    Nothing after this can be recorded without a repository, so a failing
    `git init` aborts the run.
    """

    name = "init_repository"
    display_name = "Initializing git repository"
    order = StageOrder.INIT_REPOSITORY

    def _execute(self, context: PipelineContext) -> StageOutcome:
        existing = context.workspace.is_git_repo
        context.run_command(
            self.name,
            CommandInvocation("git", ("init",), policy=FailurePolicy.ABORT_ON_FAILURE),
        )
        if existing:
            return StageOutcome.success("Reinitialized existing git repository")
        return StageOutcome.success("Initialized git repository")


def get_setup_stages() -> list[BaseStage]:
    """Get all setup stages."""
    return [InitRepositoryStage()]
