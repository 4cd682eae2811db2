"""Heroku hosting provider (drives the Heroku CLI)."""

import logging
import re

from railstart.exceptions import RemoteCreationError
from railstart.models.config import HerokuConfig
from railstart.services.remote_providers.base import RemoteProvider
from railstart.utils.naming import app_name_to_heroku_slug

logger = logging.getLogger(__name__)

HEROKU_GIT_URL_PATTERN = re.compile(r"https://git\.heroku\.com/[\w.-]+\.git")


class HerokuProvider(RemoteProvider):
    """Create a Heroku app with `heroku create`.

    The Heroku CLI adds a `heroku` git remote for the new app itself, so the
    pipeline only has to push.
    """

    key = "heroku"
    label = "Heroku"
    remote_name = "heroku"
    attaches_remote = True

    settings: HerokuConfig

    def validate(self) -> list[str]:
        issues: list[str] = []
        if not self.settings.executable:
            issues.append("Heroku CLI executable is not configured")
        return issues

    def push_args(self) -> list[str]:
        return ["push", "-u", self.remote_name, self.settings.push_branch]

    def _create(self, name: str, organization: str | None) -> str | None:
        # Heroku app names only allow lowercase letters, digits, and dashes
        slug = app_name_to_heroku_slug(name)
        args = ["create", slug]
        if organization:
            args.extend(["--team", organization])

        result = self.runner.run(self.settings.executable, args)
        if not result.succeeded:
            raise RemoteCreationError(
                f"`{result.command}` exited with status {result.exit_code}",
                provider=self.key,
            )

        match = HEROKU_GIT_URL_PATTERN.search(result.output)
        if match is None:
            logger.warning(f"Created Heroku app {slug} but found no git URL in CLI output")
            return None
        return match.group(0)
