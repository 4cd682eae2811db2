"""UI messages and strings for railstart.

This module consolidates all user-facing messages including:
- Banner and help text
- Success/error/info/warning messages
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Turn a fresh `rails new` skeleton into a ready-to-work project"

# =============================================================================
# Banner and Help
# =============================================================================

BANNER = r"""
  _ __ __ _(_) |___| |_ __ _ _ __| |_
 | '__/ _` | | / __| __/ _` | '__| __|
 | | | (_| | | \__ \ || (_| | |  | |_
 |_|  \__,_|_|_|___/\__\__,_|_|   \__|
"""

HELP_TEXT = f"""
[bold cyan]railstart[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]apply[/cyan]     Run the setup pipeline inside a freshly generated Rails app
  [cyan]steps[/cyan]     Show the ordered step table
  [cyan]version[/cyan]   Show version information

[bold]Examples:[/bold]
  [dim]# Set up the app in the current directory[/dim]
  [dim]$ railstart apply blog-app[/dim]

  [dim]# Create a local database and push to GitHub[/dim]
  [dim]$ railstart apply blog-app --database-username postgres --github -o acme[/dim]

  [dim]# Preview every action without changing anything[/dim]
  [dim]$ railstart apply blog-app --dry-run[/dim]

"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "pipeline_complete": "Project setup complete for {app_name}!",
    "pipeline_complete_with_warnings": "Project setup finished for {app_name} with warnings",
    "remote_created": "Created {provider} remote: {url}",
    "pushed": "Pushed to {provider}",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "project_root_missing": "Project root does not exist: {path}",
    "not_a_rails_app": "No Gemfile found in {path}. Run railstart inside a generated Rails app.",
    "step_failed": "Step '{step}' failed: {error}",
    "stage_failed": "Failed: {error}",
    "invalid_policy": "Invalid checkpoint policy: {error}",
    "config_invalid": "Invalid configuration in {path}: {error}",
    "command_failed": "`{command}` exited with status {exit_code}",
    "provider_not_configured": "{provider} is not configured: {issues}",
}

# =============================================================================
# Warning Messages
# =============================================================================

WARNING_MESSAGES = {
    "checkpoint_failed": "Checkpoint '{message}': `{command}` exited with status {exit_code}",
    "command_failed": "`{command}` exited with status {exit_code}",
    "remote_skipped": "{provider}: skipping push ({reason})",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "applying": "Applying railstart to [bold]{app_name}[/bold] in {path}",
    "dry_run": "Dry run: no files will be changed and no commands will run",
    "no_database": "No database username given; skipping local database creation",
    "summary_header": "Attention needed",
}

# =============================================================================
# Next Steps
# =============================================================================

NEXT_STEPS = """[bold green]What's Next?[/bold green]

  1. Review [cyan]config/database.yml[/cyan] and [cyan]config/app_environment_variables.rb[/cyan]
  2. Run the test suite: [cyan]bundle exec rspec[/cyan]
  3. Start guard while you work: [cyan]bundle exec guard[/cyan]
  4. Start the server: [cyan]rails s[/cyan]
"""
