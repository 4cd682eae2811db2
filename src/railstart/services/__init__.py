"""Service layer for railstart"""

from railstart.services.checkpoint_service import CheckpointManager
from railstart.services.command_runner import CommandRunner, enforce_policy
from railstart.services.file_mutator import FileMutator
from railstart.services.manifest_editor import ManifestEditor
from railstart.services.remote_service import RemoteService
from railstart.services.template_service import TemplateService

__all__ = [
    "CheckpointManager",
    "CommandRunner",
    "enforce_policy",
    "FileMutator",
    "ManifestEditor",
    "RemoteService",
    "TemplateService",
]
