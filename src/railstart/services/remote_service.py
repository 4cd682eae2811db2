"""Service layer for hosting providers.

Maps the configuration flags onto RemoteProvider implementations so the
pipeline never contains provider-specific branches.

Architecture:
    Hosting stage → RemoteService → RemoteProvider → Hosting API / CLI
                                                  → Git remote wiring
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from railstart.models.config import ScaffoldConfig
from railstart.models.enums import HostingProvider
from railstart.services.command_runner import CommandRunner
from railstart.services.remote_providers import (
    BitbucketProvider,
    GitHubProvider,
    HerokuProvider,
)
from railstart.services.remote_providers.base import RemoteProvider

PROVIDER_REGISTRY: dict[HostingProvider, type[RemoteProvider]] = {
    HostingProvider.HEROKU: HerokuProvider,
    HostingProvider.BITBUCKET: BitbucketProvider,
    HostingProvider.GITHUB: GitHubProvider,
}


class RemoteService:
    """Instantiate hosting providers for a pipeline run."""

    def __init__(
        self,
        config: ScaffoldConfig,
        runner: CommandRunner,
        environment: Mapping[str, str] | None = None,
    ):
        self.config = config
        self.runner = runner
        self.environment = environment if environment is not None else os.environ

    def get_provider(self, provider: HostingProvider) -> RemoteProvider:
        """Instantiate the provider implementation with its settings."""
        provider_cls = PROVIDER_REGISTRY[provider]
        settings = self.config.hosting.for_provider(provider)
        return provider_cls(settings=settings, environment=self.environment, runner=self.runner)

    def get_enabled_providers(self) -> list[RemoteProvider]:
        """Providers whose flags are set, in pipeline order."""
        return [self.get_provider(p) for p in self.config.enabled_providers]

    def validate_enabled(self) -> dict[str, list[str]]:
        """Validation issues for every enabled provider that has any."""
        issues: dict[str, list[str]] = {}
        for provider in self.get_enabled_providers():
            provider_issues = provider.validate()
            if provider_issues:
                issues[provider.label] = provider_issues
        return issues
