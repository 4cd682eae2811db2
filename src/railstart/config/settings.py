"""Runtime configuration settings for railstart.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables. This provides:
- Type validation
- Environment variable support (RAILSTART_ prefix)
- Default values
- Easy testing via dependency injection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from railstart.models.enums import FailurePolicy


class RunnerSettings(BaseSettings):
    """External command settings.

    Can be overridden via environment variables with RAILSTART_RUNNER_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="RAILSTART_RUNNER_")

    command_timeout_seconds: float | None = Field(
        default=None,
        description="Optional per-command timeout in seconds (no timeout when unset)",
    )


class ScaffoldSettings(BaseSettings):
    """Scaffolding defaults.

    Can be overridden via environment variables with RAILSTART_ prefix.
    Values from railstart.yaml and CLI options take precedence.
    """

    model_config = SettingsConfigDict(env_prefix="RAILSTART_")

    ruby_version: str = Field(
        default="2.2.2",
        description="Ruby version pinned in .ruby-version and the Gemfile",
    )
    develop_branch: str = Field(
        default="develop",
        description="Long-lived development branch created at the end of the run",
    )
    checkpoint_policy: FailurePolicy = Field(
        default=FailurePolicy.WARN_AND_CONTINUE,
        description="What to do when a checkpoint sub-command fails",
    )


class HostingSettings(BaseSettings):
    """Hosting provider HTTP settings.

    Can be overridden via environment variables with RAILSTART_HOSTING_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="RAILSTART_HOSTING_")

    request_timeout_seconds: float = Field(
        default=30.0,
        description="HTTP timeout for hosting provider API calls",
    )


# Singleton instances for easy import
runner_settings = RunnerSettings()
scaffold_settings = ScaffoldSettings()
hosting_settings = HostingSettings()
