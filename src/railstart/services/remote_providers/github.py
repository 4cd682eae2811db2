"""GitHub hosting provider."""

import logging

import httpx

from railstart.config.settings import hosting_settings
from railstart.exceptions import RemoteCreationError
from railstart.models.config import GitHubConfig
from railstart.services.remote_providers.base import RemoteProvider

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class GitHubProvider(RemoteProvider):
    """Create a repository through the GitHub REST API and wire its remote.

    Unlike Bitbucket, this provider adds the git remote itself after the
    repository exists; the pipeline only pushes. The remote is `origin`, or
    `github` when `origin` is already taken.
    """

    key = "github"
    label = "GitHub"
    attaches_remote = True

    settings: GitHubConfig

    def validate(self) -> list[str]:
        issues: list[str] = []
        if not self._env(self.settings.token_env):
            issues.append(f"GitHub token missing (set {self.settings.token_env})")
        return issues

    def _create(self, name: str, organization: str | None) -> str | None:
        token = self._env(self.settings.token_env)
        base = self.settings.api_url.rstrip("/")
        url = f"{base}/orgs/{organization}/repos" if organization else f"{base}/user/repos"
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

        try:
            response = httpx.post(
                url,
                json={"name": name, "private": self.settings.private},
                headers=headers,
                timeout=hosting_settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RemoteCreationError(
                f"Could not create repository {name}", provider=self.key, cause=exc
            ) from exc

        try:
            data = response.json()
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        except (ValueError, TypeError) as exc:
            raise RemoteCreationError(
                f"Unexpected response creating repository {name}", provider=self.key, cause=exc
            ) from exc

        remote_url = data.get("ssh_url") or data.get("clone_url")
        if not remote_url:
            logger.warning("GitHub response did not include a clone URL")
            return None

        remote_name = self.claim_remote_name()
        result = self.runner.run("git", ["remote", "add", remote_name, remote_url])
        if not result.succeeded:
            raise RemoteCreationError(
                f"Created {remote_url} but `{result.command}` exited with status "
                f"{result.exit_code}",
                provider=self.key,
            )
        return remote_url
