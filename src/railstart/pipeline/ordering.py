"""Stage ordering for the scaffolding pipeline.

Scaffold steps are numbered from SCAFFOLD_STEPS in increments of
SCAFFOLD_STEP_SPACING, in step table order.
"""

from enum import IntEnum

SCAFFOLD_STEP_SPACING = 10


class StageOrder(IntEnum):
    """Execution order of pipeline stages (lower runs first)."""

    # Setup
    INIT_REPOSITORY = 100

    # Scaffold steps (base; one slot per step table entry)
    SCAFFOLD_STEPS = 200

    # Hosting
    HEROKU = 1000
    BITBUCKET = 1100
    GITHUB = 1200
