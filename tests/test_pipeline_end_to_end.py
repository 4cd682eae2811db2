"""End-to-end tests: the whole pipeline against a Rails skeleton."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from railstart.models.enums import FailurePolicy
from railstart.pipeline.context import PipelineContext
from railstart.pipeline.executor import PipelineResult, build_scaffold_pipeline
from railstart.pipeline.steps import checkpoint_messages

from conftest import RecordingRunner

ContextFactory = Callable[..., PipelineContext]


def run_pipeline(context: PipelineContext) -> PipelineResult:
    return build_scaffold_pipeline().build().execute(context)


def runner_of(context: PipelineContext) -> RecordingRunner:
    assert isinstance(context.runner, RecordingRunner)
    return context.runner


@pytest.fixture(autouse=True)
def no_http(monkeypatch: Any) -> None:
    """Fail loudly if a test reaches a hosting API it did not stub."""

    def _refuse(*args: Any, **kwargs: Any) -> None:
        raise AssertionError("unexpected HTTP call")

    monkeypatch.setattr("railstart.services.remote_providers.bitbucket.httpx.post", _refuse)
    monkeypatch.setattr("railstart.services.remote_providers.github.httpx.post", _refuse)


class TestGeneratedFiles:
    """Files produced by a full run with default options."""

    @pytest.fixture
    def app(self, make_context: ContextFactory, rails_app: Path) -> Path:
        result = run_pipeline(make_context())
        assert result.success
        return rails_app

    def test_gitignore_entries_appended(self, app: Path) -> None:
        content = (app / ".gitignore").read_text()
        assert content.startswith("/.bundle\n")
        for entry in ("/config/database.yml", "/config/app_environment_variables.rb", ".DS_Store", ".idea"):
            assert f"\n{entry}\n" in content

    def test_gemfile(self, app: Path) -> None:
        gemfile = (app / "Gemfile").read_text()

        assert gemfile.startswith("source 'https://rubygems.org'\nruby '2.2.2'\n")
        assert "#" not in gemfile
        assert "\n\n\n" not in gemfile
        assert "gem 'sqlite3'" not in gemfile
        assert "turbolinks" not in gemfile
        assert "\ngem 'pg'\n" in gemfile
        assert "\ngem 'rails_12factor', group: :production\n" in gemfile
        assert "group :development, :test do\n  gem 'awesome_print'\n" in gemfile
        assert "  gem 'rb-fsevent', require: false\n" in gemfile
        assert (app / ".ruby-version").read_text() == "2.2.2\n"

    def test_turbolinks_removed_from_assets(self, app: Path) -> None:
        layout = (app / "app/views/layouts/application.html.erb").read_text()
        javascript = (app / "app/assets/javascripts/application.js").read_text()

        assert "turbolinks" not in layout
        assert "<%= javascript_include_tag 'application' %>" in layout
        assert javascript == "//= require jquery\n//= require jquery_ujs\n//= require_tree .\n"

    def test_database_names(self, app: Path) -> None:
        for name in ("config/database.yml", "config/database.sample.yml"):
            content = (app / name).read_text()
            assert "database: blog_app_dev\n" in content
            assert "database: blog_app_test\n" in content
            assert "database: blog_app_prod\n" in content
            assert "sqlite3" not in content

    def test_sample_database_config_has_placeholders(self, app: Path) -> None:
        sample = (app / "config/database.sample.yml").read_text()
        assert "  username: username\n" in sample
        assert "  password: pass\n" in sample

    def test_readme_replaced(self, app: Path) -> None:
        assert not (app / "README.rdoc").exists()
        assert (app / "README.md").read_text().startswith("# blog-app\n")

    def test_app_environment_variables(self, app: Path) -> None:
        sample = (app / "config/app_environment_variables.sample.rb").read_text()
        local = (app / "config/app_environment_variables.rb").read_text()
        environment = (app / "config/environment.rb").read_text()

        assert sample == local
        assert environment.startswith(
            "# Load the Rails application.\n"
            "require File.expand_path('../application', __FILE__)\n"
            "\n"
            "# Load the app's custom environment variables here"
        )
        assert environment.endswith("Rails.application.initialize!\n")

    def test_rspec_setup(self, app: Path) -> None:
        assert not (app / "test").exists()
        for folder in ("support", "models", "features", "factories"):
            assert (app / "spec" / folder / ".keep").is_file()

        helper = (app / "spec/rails_helper.rb").read_text()
        assert (
            "# Add additional requires below this line. Rails is not loaded until this point!\n"
            "require 'rspec/collection_matchers'\n"
        ) in helper
        assert '\nDir[Rails.root.join("spec/support/**/*.rb")].each { |f| require f }\n' in helper
        assert "config.use_transactional_fixtures = false\n" in helper
        assert "config.use_transactional_fixtures = true" not in helper
        assert (
            "config.infer_spec_type_from_file_location!\n\n\n"
            "  # Configure standard database cleaner."
        ) in helper

    def test_homepage(self, app: Path) -> None:
        routes = (app / "config/routes.rb").read_text()

        assert routes.startswith("Rails.application.routes.draw do\n  root to: 'home#index'\n")
        assert (app / "app/controllers/home_controller.rb").read_text().startswith(
            "class HomeController < ApplicationController\n"
        )
        assert (app / "app/views/home/index.html.erb").is_file()


class TestSequencing:
    """Command order, checkpoint count, and failure handling."""

    def test_commands_in_order(self, make_context: ContextFactory) -> None:
        context = make_context()
        run_pipeline(context)

        lines = runner_of(context).command_lines()

        assert lines[0] == "git init"
        assert lines[1:4] == [
            "bundle install",
            "git add --all .",
            "git commit -m Initial commit with updated .gitignore",
        ]
        assert lines[-1] == "git checkout -b develop"
        assert lines.index("rails generate rspec:install") < lines.index(
            "git commit -m install rspec"
        )
        assert lines.index("bundle exec spring binstub --all") < lines.index(
            "bundle exec guard init guard-bundler guard-rspec"
        )

    def test_ten_checkpoints(self, make_context: ContextFactory) -> None:
        context = make_context()
        run_pipeline(context)

        assert runner_of(context).commits() == checkpoint_messages()
        assert len(context.checkpoints) == 10

    @pytest.mark.parametrize(
        "failures",
        [
            ["bundle"],
            ["git commit -m add gems"],
            ["git add --all ."],
            ["bundle", "git add --all .", "git checkout -b develop"],
        ],
        ids=["bundle", "one-commit", "every-add", "many"],
    )
    def test_checkpoint_count_ignores_sub_command_failures(
        self, make_context: ContextFactory, failures: list[str]
    ) -> None:
        context = make_context(failures=failures)

        result = run_pipeline(context)

        assert result.success
        assert runner_of(context).commits() == checkpoint_messages()
        assert context.warnings

    def test_failed_checkpoint_is_reported(self, make_context: ContextFactory) -> None:
        context = make_context(failures=["git commit -m add readme"])

        run_pipeline(context)

        assert [c.message for c in context.failed_checkpoints] == ["add readme"]
        assert context.warnings == [
            (
                "create_readme",
                "Checkpoint 'add readme': `git commit -m add readme` exited with status 1",
            )
        ]

    def test_abort_policy_stops_at_first_failed_checkpoint(
        self, make_context: ContextFactory, rails_app: Path
    ) -> None:
        context = make_context(
            failures=["git commit -m add gems"],
            checkpoint_policy=FailurePolicy.ABORT_ON_FAILURE,
        )

        result = run_pipeline(context)

        assert not result.success
        assert result.stages_failed[0][0] == "add_gems"
        assert runner_of(context).commits() == ["Initial commit with updated .gitignore", "add gems"]
        assert (rails_app / "README.rdoc").exists()

    def test_git_init_failure_aborts(self, make_context: ContextFactory, rails_app: Path) -> None:
        context = make_context(failures=["git init"])

        result = run_pipeline(context)

        assert not result.success
        assert result.stages_failed[0][0] == "init_repository"
        assert runner_of(context).command_lines() == ["git init"]
        assert "/config/database.yml" not in (rails_app / ".gitignore").read_text()

    def test_mutation_error_aborts_pipeline(
        self, make_context: ContextFactory, rails_app: Path
    ) -> None:
        (rails_app / "config/environment.rb").write_text("Rails.application.initialize!\n")
        context = make_context()

        result = run_pipeline(context)

        assert not result.success
        assert result.stages_failed[0][0] == "create_app_env_vars"
        assert "AnchorNotFoundError" in result.stages_failed[0][1]
        assert runner_of(context).commits() == checkpoint_messages()[:5]
        assert (rails_app / "config/environment.rb").read_text() == "Rails.application.initialize!\n"

    def test_local_database_created_only_with_username(self, make_context: ContextFactory) -> None:
        without = make_context()
        run_pipeline(without)
        assert "rake db:create db:migrate" not in runner_of(without).command_lines()

    def test_local_database_with_credentials(
        self, make_context: ContextFactory, rails_app: Path
    ) -> None:
        context = make_context(database_username="postgres")

        result = run_pipeline(context)

        lines = runner_of(context).command_lines()
        assert "create_local_database" in result.stages_completed
        assert lines.index("rake db:create db:migrate") < lines.index("git checkout -b develop")
        database = (rails_app / "config/database.yml").read_text()
        assert "  username: postgres\n" in database
        assert "  password: \n" in database


class TestHosting:
    """Remote creation and push."""

    def test_no_flags_means_no_remote_calls(self, make_context: ContextFactory) -> None:
        context = make_context()

        result = run_pipeline(context)

        lines = runner_of(context).command_lines()
        assert not [line for line in lines if line.startswith("heroku")]
        assert not [line for line in lines if line.startswith("git push")]
        assert not [line for line in lines if line.startswith("git remote")]
        assert set(result.stages_skipped) == {
            "create_local_database",
            "create_heroku_remote",
            "create_bitbucket_remote",
            "create_github_remote",
        }

    def test_heroku_create_and_push(self, make_context: ContextFactory) -> None:
        context = make_context(enable_heroku=True)

        result = run_pipeline(context)

        lines = runner_of(context).command_lines()
        assert result.success
        assert lines[-2:] == ["heroku create blog-app", "git push -u heroku master"]
        assert context.get_result("create_heroku_remote")["url"] == "https://git.heroku.com/blog-app.git"

    def test_bitbucket_attaches_origin_and_pushes(
        self, make_context: ContextFactory, monkeypatch: Any
    ) -> None:
        class Response:
            def raise_for_status(self) -> None:
                return None

            def json(self) -> dict:
                return {"links": {"clone": [{"name": "ssh", "href": "git@bitbucket.org:acme/my_app.git"}]}}

        calls: list[str] = []

        def fake_post(url: str, **kwargs: Any) -> Response:
            calls.append(url)
            return Response()

        monkeypatch.setattr("railstart.services.remote_providers.bitbucket.httpx.post", fake_post)
        context = make_context(
            app_name="My App",
            organization="acme",
            enable_bitbucket=True,
            environment={"BITBUCKET_USERNAME": "alice", "BITBUCKET_APP_PASSWORD": "secret"},
        )

        run_pipeline(context)

        assert calls == ["https://api.bitbucket.org/2.0/repositories/acme/my_app"]
        assert runner_of(context).command_lines()[-2:] == [
            "git remote add origin git@bitbucket.org:acme/my_app.git",
            "git push -u origin --all",
        ]

    def test_remote_name_is_cleaned(self, make_context: ContextFactory, monkeypatch: Any) -> None:
        names: list[str] = []

        class Response:
            def raise_for_status(self) -> None:
                return None

            def json(self) -> dict:
                return {"ssh_url": "git@github.com:alice/My_App.git"}

        def fake_post(url: str, **kwargs: Any) -> Response:
            names.append(kwargs["json"]["name"])
            return Response()

        monkeypatch.setattr("railstart.services.remote_providers.github.httpx.post", fake_post)
        context = make_context(
            app_name="My App", enable_github=True, environment={"GITHUB_TOKEN": "token"}
        )

        run_pipeline(context)

        assert names == ["My_App"]
        # GitHub wires origin itself; the pipeline only pushes
        assert runner_of(context).command_lines()[-2:] == [
            "git remote add origin git@github.com:alice/My_App.git",
            "git push -u origin --all",
        ]

    def test_bitbucket_and_github_both_pushed(
        self, make_context: ContextFactory, monkeypatch: Any
    ) -> None:
        class Response:
            def __init__(self, data: dict):
                self.data = data

            def raise_for_status(self) -> None:
                return None

            def json(self) -> dict:
                return self.data

        bitbucket_url = "git@bitbucket.org:acme/blog_app.git"
        github_url = "git@github.com:acme/blog_app.git"
        monkeypatch.setattr(
            "railstart.services.remote_providers.bitbucket.httpx.post",
            lambda *args, **kwargs: Response(
                {"links": {"clone": [{"name": "ssh", "href": bitbucket_url}]}}
            ),
        )
        monkeypatch.setattr(
            "railstart.services.remote_providers.github.httpx.post",
            lambda *args, **kwargs: Response({"ssh_url": github_url}),
        )
        context = make_context(
            organization="acme",
            enable_bitbucket=True,
            enable_github=True,
            environment={
                "BITBUCKET_USERNAME": "alice",
                "BITBUCKET_APP_PASSWORD": "secret",
                "GITHUB_TOKEN": "token",
            },
        )

        result = run_pipeline(context)

        lines = runner_of(context).command_lines()
        assert result.success
        assert [line for line in lines if line.startswith(("git remote add", "git push"))] == [
            f"git remote add origin {bitbucket_url}",
            "git push -u origin --all",
            f"git remote add github {github_url}",
            "git push -u github --all",
        ]
        assert runner_of(context).remotes == {"origin": bitbucket_url, "github": github_url}
        assert context.get_result("create_bitbucket_remote")["remote"] == "origin"
        github = context.get_result("create_github_remote")
        assert github["remote"] == "github"
        assert github["pushed"] is True
        assert not [stage for stage, _ in context.warnings if stage.startswith("create_")]

    def test_missing_credentials_skip_push_with_warning(self, make_context: ContextFactory) -> None:
        context = make_context(enable_github=True, environment={})

        result = run_pipeline(context)

        assert result.success
        assert not [line for line in runner_of(context).command_lines() if "push" in line]
        assert context.warnings[-1][0] == "create_github_remote"
        assert "skipping push" in context.warnings[-1][1]
        assert context.get_result("create_github_remote")["pushed"] is False

    def test_no_url_skips_push(self, make_context: ContextFactory, monkeypatch: Any) -> None:
        class Response:
            def raise_for_status(self) -> None:
                return None

            def json(self) -> dict:
                return {"links": {"clone": []}}

        monkeypatch.setattr(
            "railstart.services.remote_providers.bitbucket.httpx.post",
            lambda *args, **kwargs: Response(),
        )
        context = make_context(
            enable_bitbucket=True,
            environment={"BITBUCKET_USERNAME": "alice", "BITBUCKET_APP_PASSWORD": "secret"},
        )

        result = run_pipeline(context)

        assert result.success
        lines = runner_of(context).command_lines()
        assert not [line for line in lines if line.startswith(("git push", "git remote"))]
        assert "no URL returned" in context.warnings[-1][1]

    def test_providers_run_in_order_after_develop_branch(
        self, make_context: ContextFactory
    ) -> None:
        context = make_context(enable_heroku=True, enable_github=True, environment={})

        result = run_pipeline(context)

        completed = result.stages_completed
        assert completed.index("checkout_develop_branch") < completed.index("create_heroku_remote")
        assert completed.index("create_heroku_remote") < completed.index("create_github_remote")
