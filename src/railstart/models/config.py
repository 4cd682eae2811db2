"""Configuration models for railstart."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from railstart.models.enums import FailurePolicy, HostingProvider
from railstart.utils.naming import app_name_to_database_name, clean_app_name

# =============================================================================
# Hosting Provider Settings
# =============================================================================


class HerokuConfig(BaseModel):
    """Heroku provider configuration."""

    executable: str = Field(default="heroku", description="Heroku CLI executable")
    push_branch: str = Field(default="master", description="Branch pushed to the heroku remote")


class BitbucketConfig(BaseModel):
    """Bitbucket Cloud provider configuration."""

    api_url: str = Field(default="https://api.bitbucket.org/2.0", description="API base URL")
    username_env: str = Field(
        default="BITBUCKET_USERNAME",
        description="Environment variable holding the Bitbucket username",
    )
    app_password_env: str = Field(
        default="BITBUCKET_APP_PASSWORD",
        description="Environment variable holding a Bitbucket app password",
    )
    is_private: bool = Field(default=True, description="Create private repositories")


class GitHubConfig(BaseModel):
    """GitHub provider configuration."""

    api_url: str = Field(default="https://api.github.com", description="API base URL")
    token_env: str = Field(
        default="GITHUB_TOKEN",
        description="Environment variable holding a GitHub token",
    )
    private: bool = Field(default=True, description="Create private repositories")


class HostingConfig(BaseModel):
    """Settings for every hosting provider."""

    heroku: HerokuConfig = Field(default_factory=HerokuConfig)
    bitbucket: BitbucketConfig = Field(default_factory=BitbucketConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    def for_provider(self, provider: HostingProvider) -> BaseModel:
        """Return the settings model for a provider."""
        return getattr(self, provider.value)


# =============================================================================
# Config File
# =============================================================================


class RailstartConfig(BaseModel):
    """Defaults read from railstart.yaml.

    Every value can be overridden on the command line.
    """

    organization: str | None = Field(default=None, description="Default organization")
    ruby_version: str | None = Field(default=None, description="Ruby version to pin")
    develop_branch: str | None = Field(default=None, description="Development branch name")
    checkpoint_policy: FailurePolicy | None = Field(
        default=None, description="Checkpoint failure policy (warn or abort)"
    )
    hosting: HostingConfig = Field(default_factory=HostingConfig)

    @classmethod
    def load(cls, config_path: Path) -> "RailstartConfig":
        """Load configuration from file, returning defaults if it doesn't exist."""
        if not config_path.exists():
            return cls()

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if not data:
                return cls()

        return cls(**data)

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )


# =============================================================================
# Run Configuration
# =============================================================================


class ScaffoldConfig(BaseModel):
    """Immutable configuration for one pipeline run.

    Built once at startup from CLI options, railstart.yaml, and settings.
    No step may change it; assignment raises a validation error.

    Example:
        >>> config = ScaffoldConfig(app_name="blog-app", enable_github=True)
        >>> config.database_name
        'blog_app'
        >>> config.enabled_providers
        [<HostingProvider.GITHUB: 'github'>]
    """

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(description="Rails application name")
    organization: str | None = Field(default=None, description="Hosting organization/team")
    database_username: str | None = Field(default=None, description="Local database user")
    database_password: str | None = Field(default=None, description="Local database password")
    enable_heroku: bool = Field(default=False, description="Create a Heroku app and push")
    enable_bitbucket: bool = Field(default=False, description="Create a Bitbucket repo and push")
    enable_github: bool = Field(default=False, description="Create a GitHub repo and push")
    ruby_version: str = Field(default="2.2.2", description="Pinned Ruby version")
    develop_branch: str = Field(default="develop", description="Development branch name")
    hosting: HostingConfig = Field(default_factory=HostingConfig)

    @field_validator("app_name")
    @classmethod
    def _app_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("app_name must not be blank")
        return value

    @property
    def clean_app_name(self) -> str:
        """App name with hyphens and spaces replaced, for remote repositories."""
        return clean_app_name(self.app_name)

    @property
    def database_name(self) -> str:
        """Base database name (environment suffixes are added by the template)."""
        return app_name_to_database_name(self.app_name)

    @property
    def has_database_credentials(self) -> bool:
        """Whether a database username was supplied."""
        return bool(self.database_username)

    def is_enabled(self, provider: HostingProvider) -> bool:
        """Whether the flag for a hosting provider is set."""
        return {
            HostingProvider.HEROKU: self.enable_heroku,
            HostingProvider.BITBUCKET: self.enable_bitbucket,
            HostingProvider.GITHUB: self.enable_github,
        }[provider]

    @property
    def enabled_providers(self) -> list[HostingProvider]:
        """Enabled hosting providers in pipeline order."""
        return [p for p in HostingProvider if self.is_enabled(p)]

    def template_context(self) -> dict[str, Any]:
        """Variables exposed to template assets."""
        return {
            "app_name": self.app_name,
            "database_name": self.database_name,
            "ruby_version": self.ruby_version,
        }
