"""Bitbucket Cloud hosting provider."""

import logging
from typing import Any

import httpx

from railstart.config.settings import hosting_settings
from railstart.exceptions import RemoteCreationError
from railstart.models.config import BitbucketConfig
from railstart.services.remote_providers.base import RemoteProvider

logger = logging.getLogger(__name__)


class BitbucketProvider(RemoteProvider):
    """Create a private git repository through the Bitbucket 2.0 REST API.

    The repository is created in the organization's workspace when one is
    given, otherwise in the authenticated user's workspace. The pipeline
    attaches the returned clone URL as `origin`.
    """

    key = "bitbucket"
    label = "Bitbucket"

    settings: BitbucketConfig

    def validate(self) -> list[str]:
        issues: list[str] = []
        if not self._env(self.settings.username_env):
            issues.append(f"Bitbucket username missing (set {self.settings.username_env})")
        if not self._env(self.settings.app_password_env):
            issues.append(
                f"Bitbucket app password missing (set {self.settings.app_password_env})"
            )
        return issues

    def _create(self, name: str, organization: str | None) -> str | None:
        username = self._env(self.settings.username_env) or ""
        password = self._env(self.settings.app_password_env) or ""
        workspace = organization or username
        slug = name.lower()

        url = f"{self.settings.api_url.rstrip('/')}/repositories/{workspace}/{slug}"
        payload = {"scm": "git", "is_private": self.settings.is_private, "name": name}

        try:
            response = httpx.post(
                url,
                json=payload,
                auth=(username, password),
                timeout=hosting_settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RemoteCreationError(
                f"Could not create repository {workspace}/{slug}", provider=self.key, cause=exc
            ) from exc

        try:
            return _clone_url(response.json())
        except (ValueError, TypeError) as exc:
            raise RemoteCreationError(
                f"Unexpected response creating repository {workspace}/{slug}",
                provider=self.key,
                cause=exc,
            ) from exc


def _clone_url(data: Any) -> str | None:
    """Pick the SSH clone link, falling back to HTTPS."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    links = data.get("links") or {}
    clone_links = links.get("clone") or []
    by_name = {link.get("name"): link.get("href") for link in clone_links}
    url = by_name.get("ssh") or by_name.get("https")
    if url is None:
        logger.warning("Bitbucket response did not include a clone URL")
    return url
