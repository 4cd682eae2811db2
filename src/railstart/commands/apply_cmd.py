"""Apply command: run the setup pipeline inside a generated Rails app."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.table import Table
from rich.text import Text

from railstart.commands.steps_cmd import build_step_table
from railstart.config.messages import (
    ERROR_MESSAGES,
    INFO_MESSAGES,
    NEXT_STEPS,
    SUCCESS_MESSAGES,
)
from railstart.config.paths import CONFIG_FILE, GEMFILE
from railstart.config.settings import scaffold_settings
from railstart.models.config import RailstartConfig, ScaffoldConfig
from railstart.models.enums import FailurePolicy
from railstart.models.workspace import WorkspaceHandle
from railstart.pipeline.context import PipelineContext
from railstart.pipeline.executor import PipelineResult, build_scaffold_pipeline
from railstart.utils import (
    StepTracker,
    dir_exists,
    file_exists,
    get_console,
    print_error,
    print_header,
    print_info,
    print_panel,
    print_warning,
)
from railstart.utils.logging_config import configure_logging


def apply_command(
    app_name: str,
    project_root: Path | None = None,
    organization: str | None = None,
    database_username: str | None = None,
    database_password: str | None = None,
    heroku: bool = False,
    bitbucket: bool = False,
    github: bool = False,
    checkpoint_policy: str | None = None,
    config_file: Path | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    """Run every setup step against the Rails app in project_root.

    Exits with code 1 when the app can't be found, the configuration is
    invalid, or a critical step fails.
    """
    configure_logging(verbose)

    root = (project_root or Path.cwd()).resolve()
    if not dir_exists(root):
        print_error(ERROR_MESSAGES["project_root_missing"].format(path=root))
        raise typer.Exit(code=1)
    if not file_exists(root / GEMFILE):
        print_error(ERROR_MESSAGES["not_a_rails_app"].format(path=root))
        raise typer.Exit(code=1)

    file_config = _load_file_config(root, config_file)
    policy = _resolve_policy(checkpoint_policy, file_config)

    try:
        config = ScaffoldConfig(
            app_name=app_name,
            organization=organization or file_config.organization,
            database_username=database_username,
            database_password=database_password,
            enable_heroku=heroku,
            enable_bitbucket=bitbucket,
            enable_github=github,
            ruby_version=file_config.ruby_version or scaffold_settings.ruby_version,
            develop_branch=file_config.develop_branch or scaffold_settings.develop_branch,
            hosting=file_config.hosting,
        )
    except ValidationError as e:
        print_error(ERROR_MESSAGES["config_invalid"].format(path="command line", error=e))
        raise typer.Exit(code=1) from e

    print_header(f"railstart: {config.app_name}")

    if dry_run:
        print_info(INFO_MESSAGES["dry_run"])
        get_console().print(build_step_table(config, show_actions=True))
        return

    print_info(INFO_MESSAGES["applying"].format(app_name=config.app_name, path=root) + "\n")

    context = PipelineContext(
        workspace=WorkspaceHandle(root),
        config=config,
        checkpoint_policy=policy,
    )

    pipeline = build_scaffold_pipeline().build()
    tracker = StepTracker(pipeline.get_stage_count(context))
    result = pipeline.execute(context, tracker)

    if not config.has_database_credentials:
        print_info(INFO_MESSAGES["no_database"])

    _display_summary(context, result)

    if not result.success:
        stage_name, error = result.stages_failed[-1]
        print_error(ERROR_MESSAGES["step_failed"].format(step=stage_name, error=error))
        raise typer.Exit(code=1)

    if context.warnings or result.stages_failed:
        tracker.finish(
            SUCCESS_MESSAGES["pipeline_complete_with_warnings"].format(app_name=config.app_name)
        )
    else:
        tracker.finish(SUCCESS_MESSAGES["pipeline_complete"].format(app_name=config.app_name))
    print_panel(NEXT_STEPS, title="Getting Started", style="green")


def _load_file_config(root: Path, config_file: Path | None) -> RailstartConfig:
    """Load railstart.yaml (explicit path, or the project default if present)."""
    path = config_file or root / CONFIG_FILE
    if config_file is not None and not file_exists(config_file):
        print_error(
            ERROR_MESSAGES["config_invalid"].format(path=config_file, error="file not found")
        )
        raise typer.Exit(code=1)

    try:
        return RailstartConfig.load(path)
    except (ValidationError, yaml.YAMLError, TypeError) as e:
        print_error(ERROR_MESSAGES["config_invalid"].format(path=path, error=e))
        raise typer.Exit(code=1) from e


def _resolve_policy(option: str | None, file_config: RailstartConfig) -> FailurePolicy:
    """CLI option, then railstart.yaml, then RAILSTART_CHECKPOINT_POLICY."""
    if option is None:
        return file_config.checkpoint_policy or scaffold_settings.checkpoint_policy
    try:
        return FailurePolicy.from_string(option)
    except ValueError as e:
        print_error(ERROR_MESSAGES["invalid_policy"].format(error=e))
        raise typer.Exit(code=1) from e


def _display_summary(context: PipelineContext, result: PipelineResult) -> None:
    """List everything that needs attention after the run.

    Covers warnings (failed commands, failed checkpoint sub-commands, degraded
    remotes) and stages that failed without stopping the run.
    """
    critical = result.stages_failed[-1][0] if not result.success else None
    failed = [(name, error) for name, error in result.stages_failed if name != critical]
    if not context.warnings and not failed:
        return

    table = Table(title=INFO_MESSAGES["summary_header"])
    table.add_column("Step", style="cyan")
    table.add_column("Warning", style="yellow")
    for stage_name, message in context.warnings:
        table.add_row(stage_name, message)
    for stage_name, error in failed:
        message = ERROR_MESSAGES["stage_failed"].format(error=error)
        table.add_row(stage_name, Text(message, style="red"))

    console = get_console()
    console.print()
    console.print(table)

    failed_checkpoints = context.failed_checkpoints
    if failed_checkpoints:
        print_warning(
            f"{len(failed_checkpoints)} of {len(context.checkpoints)} "
            "checkpoints had failing commands"
        )
