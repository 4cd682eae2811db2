"""Stage-based pipeline for the scaffolding flow.

Example:
    >>> from railstart.pipeline import PipelineContext, build_scaffold_pipeline
    >>>
    >>> context = PipelineContext(
    ...     workspace=WorkspaceHandle(Path.cwd()),
    ...     config=ScaffoldConfig(app_name="blog-app"),
    ... )
    >>> pipeline = build_scaffold_pipeline().build()
    >>> result = pipeline.execute(context)
    >>> if result.success:
    ...     print("Setup complete!")
"""

from railstart.pipeline.context import PipelineContext
from railstart.pipeline.executor import (
    Pipeline,
    PipelineBuilder,
    PipelineResult,
    build_scaffold_pipeline,
)
from railstart.pipeline.ordering import StageOrder
from railstart.pipeline.stage import BaseStage, Stage, StageOutcome, StageResult
from railstart.pipeline.steps import SCAFFOLD_STEPS, StepDefinition

__all__ = [
    # Context
    "PipelineContext",
    # Executor
    "Pipeline",
    "PipelineBuilder",
    "PipelineResult",
    "build_scaffold_pipeline",
    # Stage
    "BaseStage",
    "Stage",
    "StageOutcome",
    "StageResult",
    # Ordering
    "StageOrder",
    # Steps
    "SCAFFOLD_STEPS",
    "StepDefinition",
]
