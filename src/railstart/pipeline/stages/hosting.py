"""Hosting stages: create a remote repository and push to it.

Hosting is best-effort. A provider that cannot create its repository, or
returns no URL, degrades to a recorded warning and the push is skipped; it
never fails the run.
"""

import logging

from railstart.config.messages import SUCCESS_MESSAGES, WARNING_MESSAGES
from railstart.exceptions import RemoteCreationError
from railstart.models.enums import HostingProvider
from railstart.models.mutation import CommandInvocation
from railstart.pipeline.context import PipelineContext
from railstart.pipeline.ordering import StageOrder
from railstart.pipeline.stage import BaseStage, StageOutcome

logger = logging.getLogger(__name__)

HOSTING_STAGE_ORDER: dict[HostingProvider, StageOrder] = {
    HostingProvider.HEROKU: StageOrder.HEROKU,
    HostingProvider.BITBUCKET: StageOrder.BITBUCKET,
    HostingProvider.GITHUB: StageOrder.GITHUB,
}


class CreateRemoteStage(BaseStage):
    """Create the hosted repository for one provider and push everything."""

    is_critical = False

    def __init__(self, provider: HostingProvider):
        self.provider = provider
        self.name = f"create_{provider.value}_remote"
        self.display_name = f"Creating {provider.display_name} remote"
        self.order = HOSTING_STAGE_ORDER[provider]

    def _should_run(self, context: PipelineContext) -> bool:
        return context.config.is_enabled(self.provider)

    def _execute(self, context: PipelineContext) -> StageOutcome:
        config = context.config
        remote = context.remote_service().get_provider(self.provider)

        try:
            url = remote.create_remote(config.clean_app_name, config.organization)
        except RemoteCreationError as e:
            return self._degrade(context, str(e))

        if url is None:
            return self._degrade(context, "no URL returned")

        if not remote.attaches_remote:
            remote_name = remote.claim_remote_name()
            context.run_command(
                self.name,
                CommandInvocation("git", ("remote", "add", remote_name, url)),
            )

        push = context.run_command(self.name, CommandInvocation("git", tuple(remote.push_args())))

        data = {
            "provider": self.provider.value,
            "url": url,
            "remote": remote.remote_name,
            "pushed": push.succeeded,
        }
        context.set_result(self.name, data)

        message = SUCCESS_MESSAGES["remote_created"].format(
            provider=self.provider.display_name, url=url
        )
        if push.succeeded:
            message = f"{message}; " + SUCCESS_MESSAGES["pushed"].format(
                provider=self.provider.display_name
            )
        return StageOutcome.success(message, data=data)

    def _degrade(self, context: PipelineContext, reason: str) -> StageOutcome:
        warning = WARNING_MESSAGES["remote_skipped"].format(
            provider=self.provider.display_name, reason=reason
        )
        logger.warning(warning)
        context.add_warning(self.name, warning)

        data = {"provider": self.provider.value, "url": None, "pushed": False, "reason": reason}
        context.set_result(self.name, data)
        return StageOutcome.success(warning, data=data)


def get_hosting_stages() -> list[BaseStage]:
    """Get one hosting stage per provider, in pipeline order."""
    return [CreateRemoteStage(provider) for provider in HostingProvider]
