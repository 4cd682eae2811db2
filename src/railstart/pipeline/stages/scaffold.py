"""Scaffold stages: one stage per entry in the step table."""

import logging

from railstart.models.mutation import CommandInvocation, MutationPrimitive
from railstart.pipeline.context import PipelineContext
from railstart.pipeline.ordering import SCAFFOLD_STEP_SPACING, StageOrder
from railstart.pipeline.stage import BaseStage, StageOutcome
from railstart.pipeline.steps import SCAFFOLD_STEPS, StepDefinition

logger = logging.getLogger(__name__)


class ScaffoldStepStage(BaseStage):
    """Apply one step's actions in order, then checkpoint if the step has one.

    File mutations go through the context's FileMutator and commands through
    its CommandRunner. A mutation error stops the step immediately (and with
    it the pipeline); command failures are handled by each invocation's
    failure policy.
    """

    def __init__(self, step: StepDefinition, order: int):
        self.step = step
        self.name = step.name
        self.display_name = step.display_name
        self.order = order

    def _should_run(self, context: PipelineContext) -> bool:
        return self.step.applies_to(context.config)

    def _execute(self, context: PipelineContext) -> StageOutcome:
        actions = self.step.actions(context.config, context.templates)

        for action in actions:
            if isinstance(action, MutationPrimitive):
                context.mutator.apply(action)
            elif isinstance(action, CommandInvocation):
                context.run_command(self.name, action)
            else:
                raise TypeError(f"Unsupported step action: {action!r}")

        data = {"actions": len(actions), "checkpoint": self.step.checkpoint}
        if self.step.checkpoint:
            checkpoint = context.checkpoint(self.name, self.step.checkpoint)
            data["checkpoint_succeeded"] = checkpoint.succeeded

        context.set_result(self.name, data)
        return StageOutcome.success(self.display_name, data=data)


def get_scaffold_stages() -> list[BaseStage]:
    """Get one stage per scaffold step, in step table order."""
    return [
        ScaffoldStepStage(step, StageOrder.SCAFFOLD_STEPS + index * SCAFFOLD_STEP_SPACING)
        for index, step in enumerate(SCAFFOLD_STEPS)
    ]
