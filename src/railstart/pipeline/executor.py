"""Pipeline executor: runs stages in order and collects outcomes."""

import logging
from dataclasses import dataclass, field

from railstart.pipeline.context import PipelineContext
from railstart.pipeline.stage import BaseStage, StageOutcome, StageResult
from railstart.utils.step_tracker import StepTracker

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of a full pipeline run.

    Attributes:
        success: False if a critical stage failed
        stages_completed: Names of stages that succeeded
        stages_failed: (stage name, error) for every failed stage
        stages_skipped: Names of stages whose should_run returned False
        outcomes: Outcome of every executed stage, by name
    """

    success: bool = True
    stages_completed: list[str] = field(default_factory=list)
    stages_failed: list[tuple[str, str]] = field(default_factory=list)
    stages_skipped: list[str] = field(default_factory=list)
    outcomes: dict[str, StageOutcome] = field(default_factory=dict)

    @property
    def aborted(self) -> bool:
        """Whether the run stopped early on a critical failure."""
        return not self.success


class Pipeline:
    """Ordered collection of stages.

    Stages run strictly in `order`. A failed critical stage stops the run;
    non-critical failures are recorded and the run continues.
    """

    def __init__(self, stages: list[BaseStage]):
        self.stages = sorted(stages, key=lambda s: s.order)

    def get_stage_count(self, context: PipelineContext) -> int:
        """Number of stages that will run for this context."""
        return sum(1 for stage in self.stages if stage.should_run(context))

    def execute(self, context: PipelineContext, tracker: StepTracker | None = None) -> PipelineResult:
        """Run every applicable stage.

        Args:
            context: Shared pipeline context
            tracker: Optional progress display

        Returns:
            PipelineResult describing what ran
        """
        result = PipelineResult()

        for stage in self.stages:
            if not stage.should_run(context):
                logger.debug(f"Skipping stage {stage.name}")
                result.stages_skipped.append(stage.name)
                continue

            if tracker:
                tracker.start_step(stage.display_name)

            warnings_before = len(context.warnings)
            outcome = stage.execute(context)
            result.outcomes[stage.name] = outcome
            new_warnings = [msg for _, msg in context.warnings[warnings_before:]]

            if outcome.result == StageResult.FAILED:
                error = outcome.error or outcome.message
                result.stages_failed.append((stage.name, error))
                logger.debug(f"Stage {stage.name} failed: {error}")
                if tracker:
                    tracker.fail_step(outcome.message, error)
                if stage.is_critical:
                    result.success = False
                    break
                continue

            if outcome.result == StageResult.SKIPPED:
                result.stages_skipped.append(stage.name)
            else:
                result.stages_completed.append(stage.name)

            if tracker:
                if new_warnings:
                    tracker.warn_step(outcome.message, "\n  ".join(new_warnings))
                else:
                    tracker.complete_step(outcome.message)

        return result


class PipelineBuilder:
    """Fluent builder for pipelines.

    Example:
        >>> pipeline = (
        ...     PipelineBuilder()
        ...     .add_stages(get_setup_stages())
        ...     .add_stage(MyStage())
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._stages: list[BaseStage] = []

    def add_stage(self, stage: BaseStage) -> "PipelineBuilder":
        """Add a single stage."""
        self._stages.append(stage)
        return self

    def add_stages(self, stages: list[BaseStage]) -> "PipelineBuilder":
        """Add several stages."""
        self._stages.extend(stages)
        return self

    def build(self) -> Pipeline:
        """Build the pipeline.

        Raises:
            ValueError: If two stages share a name
        """
        names = [stage.name for stage in self._stages]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate stage names: {', '.join(duplicates)}")
        return Pipeline(list(self._stages))


def build_scaffold_pipeline() -> PipelineBuilder:
    """Builder preloaded with every stage of the scaffolding flow.

    Order: git init, the scaffold step table, then hosting providers.
    """
    from railstart.pipeline.stages import (
        get_hosting_stages,
        get_scaffold_stages,
        get_setup_stages,
    )

    return (
        PipelineBuilder()
        .add_stages(get_setup_stages())
        .add_stages(get_scaffold_stages())
        .add_stages(get_hosting_stages())
    )
