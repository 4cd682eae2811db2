"""Main CLI entry point for railstart."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from railstart.commands.apply_cmd import apply_command
from railstart.commands.steps_cmd import steps_command
from railstart.config.messages import HELP_TEXT, PROJECT_TAGLINE
from railstart.config.paths import ENV_FILE
from railstart.constants import VERSION
from railstart.utils import print_banner, print_error, print_panel

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ENV_FILE, verbose=False)

# Create main Typer app
app = typer.Typer(
    name="railstart",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Create console for output
console = Console()


@app.command("apply")
def apply(
    app_name: str = typer.Argument(..., help="Name of the Rails application"),
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        help="Rails application directory (defaults to the current directory)",
    ),
    organization: str | None = typer.Option(
        None,
        "--organization",
        "-o",
        help="Organization, team, or workspace that owns the hosted repositories",
    ),
    database_username: str | None = typer.Option(
        None,
        "--database-username",
        help="Local database user (also creates the local database)",
    ),
    database_password: str | None = typer.Option(
        None,
        "--database-password",
        help="Local database password",
    ),
    heroku: bool = typer.Option(False, "--heroku", help="Create a Heroku app and push to it"),
    bitbucket: bool = typer.Option(
        False, "--bitbucket", help="Create a Bitbucket repository and push to it"
    ),
    github: bool = typer.Option(False, "--github", help="Create a GitHub repository and push to it"),
    checkpoint_policy: str | None = typer.Option(
        None,
        "--checkpoint-policy",
        help="What to do when a checkpoint command fails: warn or abort",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        help="Path to a railstart.yaml file (defaults to <project-root>/railstart.yaml)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show every step and action without changing anything",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log every command and file change",
    ),
) -> None:
    """Set up a freshly generated Rails application.

    Cleans up the Gemfile, adds test tooling, configuration samples, a README
    and a homepage, committing after each step. Optionally creates hosted
    repositories and pushes to them.
    """
    apply_command(
        app_name=app_name,
        project_root=project_root,
        organization=organization,
        database_username=database_username,
        database_password=database_password,
        heroku=heroku,
        bitbucket=bitbucket,
        github=github,
        checkpoint_policy=checkpoint_policy,
        config_file=config_file,
        dry_run=dry_run,
        verbose=verbose,
    )


@app.command("steps")
def steps() -> None:
    """Show the ordered setup steps and their checkpoint commit messages."""
    steps_command()


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]railstart[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
    help_flag: bool | None = typer.Option(
        None,
        "--help",
        "-h",
        help="Show this help message",
        is_eager=True,
    ),
) -> None:
    """railstart - finish setting up a new Rails application.

    Get started:
        rails new blog-app && cd blog-app
        railstart apply blog-app            # Run every setup step
        railstart steps                     # Show what will happen
    """
    # Handle version flag
    if version_flag:
        version()
        raise typer.Exit()

    # Handle help flag or no command
    if help_flag or ctx.invoked_subcommand is None:
        # Show banner and help
        print_banner()
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'railstart' command.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        # Check if it's a typer.Exit with code
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        # Handle other exceptions
        from railstart.config.messages import ERROR_MESSAGES

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        # Show traceback in verbose mode
        if "--verbose" in sys.argv:
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    cli_main()
