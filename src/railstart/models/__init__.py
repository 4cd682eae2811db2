"""Data models for railstart"""

from .config import (
    BitbucketConfig,
    GitHubConfig,
    HerokuConfig,
    HostingConfig,
    RailstartConfig,
    ScaffoldConfig,
)
from .enums import FailurePolicy, HostingProvider, MutationKind
from .mutation import CommandInvocation, MutationPrimitive, StepAction
from .results import CheckpointResult, CommandResult
from .workspace import WorkspaceHandle

__all__ = [
    "BitbucketConfig",
    "GitHubConfig",
    "HerokuConfig",
    "HostingConfig",
    "RailstartConfig",
    "ScaffoldConfig",
    "FailurePolicy",
    "HostingProvider",
    "MutationKind",
    "CommandInvocation",
    "MutationPrimitive",
    "StepAction",
    "CheckpointResult",
    "CommandResult",
    "WorkspaceHandle",
]
