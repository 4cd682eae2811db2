"""Pytest configuration and fixtures for railstart tests."""

import os
import shutil
import tempfile
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest

from railstart.models.config import ScaffoldConfig
from railstart.models.enums import FailurePolicy
from railstart.models.results import CommandResult
from railstart.models.workspace import WorkspaceHandle
from railstart.pipeline.context import PipelineContext
from railstart.services.command_runner import CommandRunner

# =============================================================================
# Rails skeleton (the files `rails new` leaves behind that the steps edit)
# =============================================================================

GEMFILE = """source 'https://rubygems.org'


# Bundle edge Rails instead: gem 'rails', github: 'rails/rails'
gem 'rails', '4.2.0'
# Use sqlite3 as the database for Active Record
gem 'sqlite3'
# Use SCSS for stylesheets
gem 'sass-rails', '~> 5.0'
# Turbolinks makes following links in your web application faster.
gem 'turbolinks'

group :development, :test do
  gem 'byebug'
end
"""

ROUTES = """Rails.application.routes.draw do
  # The priority is based upon order of creation: first created -> highest priority.
end
"""

ENVIRONMENT = """# Load the Rails application.
require File.expand_path('../application', __FILE__)

# Initialize the Rails application.
Rails.application.initialize!
"""

DATABASE_YML = """default: &default
  adapter: sqlite3
  pool: 5
  timeout: 5000

development:
  <<: *default
  database: db/development.sqlite3
"""

LAYOUT = """<!DOCTYPE html>
<html>
<head>
  <title>BlogApp</title>
  <%= stylesheet_link_tag    'application', media: 'all', 'data-turbolinks-track' => true %>
  <%= javascript_include_tag 'application', 'data-turbolinks-track' => true %>
  <%= csrf_meta_tags %>
</head>
<body>

<%= yield %>

</body>
</html>
"""

APPLICATION_JS = """//= require jquery
//= require jquery_ujs
//= require turbolinks
//= require_tree .
"""

GITIGNORE = """/.bundle
/log/*
!/log/.keep
/tmp
"""

# What `rails generate rspec:install` writes
RAILS_HELPER = """# This file is copied to spec/ when you run 'rails generate rspec:install'
ENV['RAILS_ENV'] ||= 'test'
require File.expand_path('../../config/environment', __FILE__)
require 'spec_helper'
require 'rspec/rails'
# Add additional requires below this line. Rails is not loaded until this point!

# Requires supporting ruby files with custom matchers and macros, etc, in
# spec/support/ and its subdirectories.
#
# Dir[Rails.root.join("spec/support/**/*.rb")].each { |f| require f }

# Checks for pending migrations before tests are run.
ActiveRecord::Migration.maintain_test_schema!

RSpec.configure do |config|
  config.fixture_path = "#{::Rails.root}/spec/fixtures"
  config.use_transactional_fixtures = true
  config.infer_spec_type_from_file_location!
end
"""

SKELETON: dict[str, str] = {
    "Gemfile": GEMFILE,
    ".gitignore": GITIGNORE,
    "README.rdoc": "== README\n\nThis README would normally document whatever steps are necessary.\n",
    "config/routes.rb": ROUTES,
    "config/environment.rb": ENVIRONMENT,
    "config/database.yml": DATABASE_YML,
    "app/views/layouts/application.html.erb": LAYOUT,
    "app/assets/javascripts/application.js": APPLICATION_JS,
    "test/test_helper.rb": "ENV['RAILS_ENV'] ||= 'test'\n",
    "test/models/.keep": "",
}


def write_skeleton(root: Path) -> Path:
    """Write a minimal freshly generated Rails app under root."""
    for relative, content in SKELETON.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


# =============================================================================
# Command recording
# =============================================================================


class RecordingRunner(CommandRunner):
    """CommandRunner that records invocations instead of spawning processes.

    Commands listed in `failures` (full command lines, or a bare command name
    to fail every invocation of it) exit with status 1. Git remotes are
    tracked like git does: `git remote add` fails with status 3 for a name
    that already exists. `rails generate rspec:install` writes
    spec/rails_helper.rb like the real generator, and `heroku create` prints
    a git URL like the Heroku CLI.
    """

    def __init__(self, workspace: WorkspaceHandle, failures: Sequence[str] = ()):
        super().__init__(workspace)
        self.failures = set(failures)
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.remotes: dict[str, str] = {}

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | str | None = None,
    ) -> CommandResult:
        args = tuple(args)
        self.calls.append((command, args))
        command_line = " ".join([command, *args])

        if command_line in self.failures or command in self.failures:
            return CommandResult(command_line, 1, f"{command}: simulated failure")

        output = ""
        if command == "git" and args == ("remote",):
            output = "".join(f"{name}\n" for name in self.remotes)
        elif command == "git" and args[:2] == ("remote", "add"):
            name, url = args[2], args[3]
            if name in self.remotes:
                return CommandResult(command_line, 3, f"error: remote {name} already exists.")
            self.remotes[name] = url
        elif command == "rails" and args[:2] == ("generate", "rspec:install"):
            helper = self.workspace.root / "spec" / "rails_helper.rb"
            helper.parent.mkdir(parents=True, exist_ok=True)
            helper.write_text(RAILS_HELPER, encoding="utf-8")
            (self.workspace.root / "spec" / "spec_helper.rb").write_text(
                "RSpec.configure do |config|\nend\n", encoding="utf-8"
            )
        elif command == "heroku" and args[:1] == ("create",):
            url = f"https://git.heroku.com/{args[1]}.git"
            self.remotes["heroku"] = url
            output = f"Creating {args[1]}... done\nhttps://{args[1]}.herokuapp.com/ | {url}\n"

        return CommandResult(command_line, 0, output)

    def command_lines(self) -> list[str]:
        """Every recorded invocation as a single string."""
        return [" ".join([command, *args]) for command, args in self.calls]

    def commits(self) -> list[str]:
        """Commit messages of every `git commit -m` invocation."""
        return [args[2] for command, args in self.calls if args[:2] == ("commit", "-m")]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def temp_project_dir() -> Iterator[Path]:
    """Create a temporary project directory for testing.

    Yields:
        Path to temporary directory
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="railstart-test-"))
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def rails_app(tmp_path: Path) -> Path:
    """A freshly generated Rails skeleton named blog-app."""
    return write_skeleton(tmp_path / "blog-app")


@pytest.fixture
def workspace(rails_app: Path) -> WorkspaceHandle:
    """Workspace handle for the Rails skeleton."""
    return WorkspaceHandle(rails_app)


@pytest.fixture
def recording_runner(workspace: WorkspaceHandle) -> RecordingRunner:
    """Runner that records commands and always succeeds."""
    return RecordingRunner(workspace)


@pytest.fixture
def make_context(workspace: WorkspaceHandle) -> Callable[..., PipelineContext]:
    """Factory for pipeline contexts over the Rails skeleton.

    Keyword arguments go to ScaffoldConfig, except `runner`, `failures`,
    `environment`, and `checkpoint_policy`.
    """

    def _make(
        runner: RecordingRunner | None = None,
        failures: Sequence[str] = (),
        environment: dict[str, str] | None = None,
        checkpoint_policy: FailurePolicy = FailurePolicy.WARN_AND_CONTINUE,
        **config: Any,
    ) -> PipelineContext:
        config.setdefault("app_name", "blog-app")
        return PipelineContext(
            workspace=workspace,
            config=ScaffoldConfig(**config),
            checkpoint_policy=checkpoint_policy,
            runner=runner or RecordingRunner(workspace, failures),
            environment=environment if environment is not None else {},
        )

    return _make
