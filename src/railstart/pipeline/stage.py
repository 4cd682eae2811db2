"""Stage abstraction for pipeline execution."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from railstart.exceptions import MutationError, ProcessFailureError, RailstartError
from railstart.pipeline.context import PipelineContext

logger = logging.getLogger(__name__)


class StageResult(str, Enum):
    """Result of stage execution."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class StageOutcome:
    """Outcome of a stage execution.

    Captures the result of executing a single pipeline stage: status, a
    user-facing message, technical error details, and optional data passed
    to later stages through `context.set_result`.

    Attributes:
        result: Whether stage succeeded, was skipped, or failed
        message: Human-readable message for UI display
        error: Error message if failed (for logging/debugging)
        data: Optional dict of result data keyed by stage name in context.stage_results

    Example:
        >>> outcome = StageOutcome.success(
        ...     "Added gems",
        ...     data={"actions": 7, "checkpoint": "add gems"},
        ... )
    """

    result: StageResult
    message: str
    error: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def success(cls, message: str, data: dict[str, Any] | None = None) -> "StageOutcome":
        """Create a successful outcome.

        Args:
            message: Human-readable success message for UI display
            data: Optional dict of result data

        Returns:
            StageOutcome with SUCCESS result status
        """
        return cls(StageResult.SUCCESS, message, data=data)

    @classmethod
    def skipped(cls, message: str) -> "StageOutcome":
        """Create a skipped outcome.

        Args:
            message: Reason why stage was skipped

        Returns:
            StageOutcome with SKIPPED result status
        """
        return cls(StageResult.SKIPPED, message)

    @classmethod
    def failed(cls, message: str, error: str | None = None) -> "StageOutcome":
        """Create a failed outcome.

        Args:
            message: User-facing failure message
            error: Optional technical error details for logging

        Returns:
            StageOutcome with FAILED result status
        """
        return cls(StageResult.FAILED, message, error=error)


@runtime_checkable
class Stage(Protocol):
    """Protocol defining the stage interface.

    Stages are the building blocks of the pipeline. Each stage handles one
    step of the setup (e.g., updating .gitignore, creating a remote).
    """

    @property
    def name(self) -> str:
        """Unique identifier for this stage."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable name for progress display."""
        ...

    @property
    def order(self) -> int:
        """Execution order (lower runs first)."""
        ...

    def should_run(self, context: PipelineContext) -> bool:
        """Determine if this stage should execute."""
        ...

    def execute(self, context: PipelineContext) -> StageOutcome:
        """Execute the stage.

        Args:
            context: Pipeline context to read from and write to

        Returns:
            StageOutcome indicating success, skip, or failure
        """
        ...


class BaseStage(ABC):
    """Base class for pipeline stages with common functionality.

    Provides:
    - A `should_run` hook for conditional stages
    - Error handling wrapper that turns exceptions into failed outcomes

    Example:
        >>> class MyStage(BaseStage):
        ...     name = "my_stage"
        ...     display_name = "My Stage"
        ...     order = 100
        ...
        ...     def _should_run(self, context: PipelineContext) -> bool:
        ...         return context.config.enable_github
        ...
        ...     def _execute(self, context: PipelineContext) -> StageOutcome:
        ...         # Do work
        ...         return StageOutcome.success("Completed my stage")
    """

    # Subclasses must define these
    name: str
    display_name: str
    order: int

    # Whether this stage is critical (pipeline stops on failure)
    is_critical: bool = True

    def should_run(self, context: PipelineContext) -> bool:
        """Check if stage should run (delegates to _should_run)."""
        return self._should_run(context)

    def _should_run(self, context: PipelineContext) -> bool:
        """Custom logic to determine if stage should run.

        Stages run unconditionally unless they override this.
        """
        return True

    def execute(self, context: PipelineContext) -> StageOutcome:
        """Execute with error handling wrapper.

        Catches exceptions and converts to StageOutcome.failed.
        """
        try:
            return self._execute(context)
        except MutationError as e:
            error_msg = f"{type(e).__name__}: {e}"
            context.add_error(self.name, error_msg)
            return StageOutcome.failed(
                f"File change failed: {self.display_name}",
                error=error_msg,
            )
        except ProcessFailureError as e:
            error_msg = str(e)
            context.add_error(self.name, error_msg)
            return StageOutcome.failed(
                f"Command failed: {self.display_name}",
                error=error_msg,
            )
        except RailstartError as e:
            error_msg = str(e)
            context.add_error(self.name, error_msg)
            return StageOutcome.failed(
                f"Failed: {self.display_name}",
                error=error_msg,
            )
        except Exception as e:
            logger.debug(f"Unexpected error in stage {self.name}", exc_info=True)
            error_msg = f"{type(e).__name__}: {e}"
            context.add_error(self.name, error_msg)
            return StageOutcome.failed(
                f"Failed: {self.display_name}",
                error=error_msg,
            )

    @abstractmethod
    def _execute(self, context: PipelineContext) -> StageOutcome:
        """Perform the actual stage work.

        Override this in subclasses with stage-specific logic.
        """
        ...
