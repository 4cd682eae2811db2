"""Pipeline stages for the scaffolding flow.

Each module in this package provides stages for a specific concern:
- setup: Repository initialization
- scaffold: One stage per step table entry
- hosting: Remote creation and push, per provider
"""

from railstart.pipeline.stages.hosting import CreateRemoteStage, get_hosting_stages
from railstart.pipeline.stages.scaffold import ScaffoldStepStage, get_scaffold_stages
from railstart.pipeline.stages.setup import InitRepositoryStage, get_setup_stages

__all__ = [
    "CreateRemoteStage",
    "InitRepositoryStage",
    "ScaffoldStepStage",
    "get_setup_stages",
    "get_scaffold_stages",
    "get_hosting_stages",
]
