"""Hosting provider implementations."""

from railstart.services.remote_providers.base import RemoteProvider
from railstart.services.remote_providers.bitbucket import BitbucketProvider
from railstart.services.remote_providers.github import GitHubProvider
from railstart.services.remote_providers.heroku import HerokuProvider

__all__ = ["RemoteProvider", "BitbucketProvider", "GitHubProvider", "HerokuProvider"]
