"""Steps command: show the ordered step table."""

from rich.table import Table

from railstart.models.config import ScaffoldConfig
from railstart.models.enums import HostingProvider
from railstart.pipeline.steps import SCAFFOLD_STEPS, checkpoint_messages
from railstart.services.template_service import TemplateService
from railstart.utils import get_console


def build_step_table(config: ScaffoldConfig | None = None, show_actions: bool = False) -> Table:
    """Build a Rich table describing the pipeline.

    Args:
        config: Run configuration; required to list actions and to mark
            conditional steps and hosting providers as skipped
        show_actions: Include every action each step performs

    Returns:
        Table ready to print
    """
    table = Table(title="Setup Steps")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step", style="cyan")
    if show_actions:
        table.add_column("Actions")
    table.add_column("Checkpoint", style="green")

    templates = TemplateService()

    def add_row(number: str, name: str, actions: list[str], checkpoint: str, skipped: bool) -> None:
        label = f"[dim]{name} (skipped)[/dim]" if skipped else name
        row = [number, label]
        if show_actions:
            row.append("\n".join(actions))
        row.append(checkpoint)
        table.add_row(*row)

    add_row("0", "Initializing git repository", ["run `git init` [abort]"], "-", False)

    for index, step in enumerate(SCAFFOLD_STEPS, start=1):
        skipped = config is not None and not step.applies_to(config)
        actions: list[str] = []
        if show_actions and config is not None and not skipped:
            actions = [action.describe() for action in step.actions(config, templates)]
        add_row(str(index), step.display_name, actions, step.checkpoint or "-", skipped)

    offset = len(SCAFFOLD_STEPS) + 1
    for index, provider in enumerate(HostingProvider, start=offset):
        skipped = config is not None and not config.is_enabled(provider)
        actions = [] if skipped else ["create remote", "push"]
        add_row(str(index), f"{provider.display_name} remote", actions, "-", skipped)

    return table


def steps_command() -> None:
    """Show the ordered setup steps and their checkpoint commit messages."""
    get_console().print(build_step_table())
    get_console().print(f"\n[dim]{len(checkpoint_messages())} checkpoints per run[/dim]")
