"""Base classes for hosting providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from railstart.config.messages import ERROR_MESSAGES
from railstart.exceptions import RemoteCreationError
from railstart.services.command_runner import CommandRunner


class RemoteProvider(ABC):
    """Abstract base class for remote repository hosting providers.

    Subclasses provision a hosted repository and report where to push.

    Attributes:
        key: Provider identifier (matches HostingProvider values)
        label: Human-readable provider name
        remote_name: Git remote the created repository is reachable under
        attaches_remote: True if create_remote wires the git remote itself;
            otherwise the pipeline adds `remote_name` pointing at the URL
        push_refspecs: What the pipeline pushes once the remote exists
    """

    key: str
    label: str
    remote_name: str = "origin"
    attaches_remote: bool = False
    push_refspecs: tuple[str, ...] = ("--all",)

    def __init__(
        self,
        settings: Any,
        environment: Mapping[str, str],
        runner: CommandRunner,
    ):
        """Initialize provider.

        Args:
            settings: Provider-specific configuration model
            environment: Environment variables (read-only)
            runner: Command runner bound to the project workspace
        """
        self.settings = settings
        self.environment = environment
        self.runner = runner

    @abstractmethod
    def validate(self) -> list[str]:
        """Validate provider configuration.

        Returns:
            List of validation issues (empty list if valid)
        """

    @abstractmethod
    def _create(self, name: str, organization: str | None) -> str | None:
        """Provision the remote repository.

        Returns:
            Clone/push URL, or None if the provider doesn't expose one
        """

    def create_remote(self, name: str, organization: str | None = None) -> str | None:
        """Validate configuration and create the hosted repository.

        Args:
            name: Repository name (already cleaned by the caller)
            organization: Optional owning organization/workspace/team

        Returns:
            URL of the created repository, or None when none is available

        Raises:
            RemoteCreationError: If configuration is invalid or creation failed
        """
        issues = self.validate()
        if issues:
            raise RemoteCreationError(
                ERROR_MESSAGES["provider_not_configured"].format(
                    provider=self.label, issues="; ".join(issues)
                ),
                provider=self.key,
            )
        return self._create(name, organization)

    def claim_remote_name(self) -> str:
        """Pick the git remote this provider's URL is attached under.

        Keeps `remote_name` unless the repository already has a remote of that
        name (another provider attached `origin` earlier in the run), in which
        case the provider key is used instead, e.g. `github`.
        """
        result = self.runner.run("git", ["remote"])
        existing = set(result.output.split()) if result.succeeded else set()
        if self.remote_name in existing:
            self.remote_name = self.key
        return self.remote_name

    def push_args(self) -> list[str]:
        """Arguments for `git` that push everything to this provider."""
        return ["push", "-u", self.remote_name, *self.push_refspecs]

    def _env(self, name: str) -> str | None:
        value = self.environment.get(name)
        return value.strip() if value and value.strip() else None
