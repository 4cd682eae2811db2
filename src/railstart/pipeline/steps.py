"""Declarative step table for the scaffolding pipeline.

Each StepDefinition describes one logical step: the ordered actions it
performs (file mutations and commands) and the checkpoint commit message
recorded after it, if any. The table is plain data, so it can be printed
(`railstart steps`, `--dry-run`) and tested without touching a workspace.

Order matters and is fixed: steps never reorder themselves, and later steps
rely on files produced by earlier ones (step 8 edits the rails_helper.rb that
`rails generate rspec:install` creates in step 7).
"""

from collections.abc import Callable
from dataclasses import dataclass

from railstart.config.messages import INFO_MESSAGES
from railstart.config.paths import (
    APP_ENV_VARS_FILE,
    APP_ENV_VARS_SAMPLE_FILE,
    APP_ENV_VARS_TEMPLATE,
    APPLICATION_JS_FILE,
    APPLICATION_LAYOUT_FILE,
    DATABASE_CONFIG_FILE,
    DATABASE_CONFIG_TEMPLATE,
    DATABASE_SAMPLE_CONFIG_FILE,
    DEFAULT_TEST_DIR,
    ENVIRONMENT_FILE,
    ENVIRONMENT_LOADER_TEMPLATE,
    GITIGNORE_FILE,
    GITIGNORE_TEMPLATE,
    HOME_CONTROLLER_FILE,
    HOME_CONTROLLER_TEMPLATE,
    HOME_INDEX_TEMPLATE,
    HOME_INDEX_VIEW_FILE,
    LEGACY_README_FILE,
    PLACEHOLDER_FILENAME,
    RAILS_HELPER_CLEANER_TEMPLATE,
    RAILS_HELPER_FILE,
    RAILS_HELPER_REQUIRES_TEMPLATE,
    README_FILE,
    README_TEMPLATE,
    ROUTES_FILE,
    RUBY_VERSION_FILE,
    SPEC_DIR,
    SPEC_SUPPORT_DIRS,
)
from railstart.constants import (
    BUNDLE_INSTALL,
    COMMIT_APP_ENV_VARS,
    COMMIT_DATABASE,
    COMMIT_GEMS,
    COMMIT_GITIGNORE,
    COMMIT_HOMEPAGE,
    COMMIT_README,
    COMMIT_RSPEC,
    COMMIT_RSPEC_CUSTOMIZE,
    COMMIT_SPRING_GUARD,
    COMMIT_TURBOLINKS,
    DATABASE_SETUP,
    DEVELOPMENT_TEST_GEMS,
    DEVELOPMENT_TEST_GROUPS,
    EMBEDDED_DATABASE_GEM,
    ENVIRONMENT_ANCHOR,
    GUARD_INIT,
    HOMEPAGE_ROUTE,
    LEGACY_ASSET_GEM,
    PRODUCTION_GEMS,
    RAILS_HELPER_CONFIG_ANCHOR,
    RAILS_HELPER_REQUIRES_ANCHOR,
    RAILS_HELPER_SUPPORT_AUTOLOAD,
    RAILS_HELPER_TRANSACTIONAL_FIXTURES,
    ROUTES_ANCHOR,
    RSPEC_INSTALL,
    SAMPLE_DATABASE_PASSWORD,
    SAMPLE_DATABASE_USERNAME,
    SERVER_DATABASE_GEM,
    SPRING_BINSTUBS,
    TURBOLINKS_JS_PATTERN,
    TURBOLINKS_LAYOUT_PATTERN,
)
from railstart.models.config import ScaffoldConfig
from railstart.models.mutation import CommandInvocation, MutationPrimitive, StepAction
from railstart.services.manifest_editor import ManifestEditor
from railstart.services.template_service import TemplateService

ActionBuilder = Callable[[ScaffoldConfig, TemplateService], list[StepAction]]


@dataclass(frozen=True)
class StepDefinition:
    """One logical step of the scaffolding pipeline.

    Attributes:
        name: Unique identifier (also used as the stage name)
        display_name: Progress line shown while the step runs
        build: Produces the ordered actions for a configuration
        checkpoint: Commit message recorded after the step, or None
        condition: Optional predicate; the step is skipped when it returns False
        skip_message: Shown when the condition skips the step
    """

    name: str
    display_name: str
    build: ActionBuilder
    checkpoint: str | None = None
    condition: Callable[[ScaffoldConfig], bool] | None = None
    skip_message: str = "Skipped"

    def applies_to(self, config: ScaffoldConfig) -> bool:
        """Whether the step runs for this configuration."""
        return self.condition is None or self.condition(config)

    def actions(self, config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
        """Ordered actions for this configuration."""
        return self.build(config, templates)


def _command(spec: tuple[str, tuple[str, ...]]) -> CommandInvocation:
    command, args = spec
    return CommandInvocation(command, args)


# =============================================================================
# Action Builders
# =============================================================================


def _update_gitignore(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [MutationPrimitive.append(GITIGNORE_FILE, templates.read_asset(GITIGNORE_TEMPLATE))]


def _add_gems(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    gemfile = ManifestEditor()
    actions: list[StepAction] = [
        MutationPrimitive.create(RUBY_VERSION_FILE, f"{config.ruby_version}\n"),
        gemfile.strip_comments(),
        gemfile.collapse_blank_lines(),
        gemfile.remove_gem(EMBEDDED_DATABASE_GEM),
        gemfile.add_gem(SERVER_DATABASE_GEM),
    ]
    actions.extend(gemfile.add_gem(name, group="production") for name in PRODUCTION_GEMS)
    actions.append(gemfile.add_gem_group(DEVELOPMENT_TEST_GROUPS, DEVELOPMENT_TEST_GEMS))
    actions.append(gemfile.pin_ruby_version(config.ruby_version))
    return actions


def _remove_turbolinks(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [
        ManifestEditor().remove_gem(LEGACY_ASSET_GEM),
        MutationPrimitive.substitute(APPLICATION_LAYOUT_FILE, TURBOLINKS_LAYOUT_PATTERN, ""),
        MutationPrimitive.substitute(APPLICATION_JS_FILE, TURBOLINKS_JS_PATTERN, ""),
    ]


def _database_config(
    templates: TemplateService, config: ScaffoldConfig, username: str, password: str
) -> str:
    return templates.render_template(
        DATABASE_CONFIG_TEMPLATE,
        {**config.template_context(), "username": username, "password": password},
    )


def _create_database_files(
    config: ScaffoldConfig, templates: TemplateService
) -> list[StepAction]:
    sample = _database_config(
        templates, config, SAMPLE_DATABASE_USERNAME, SAMPLE_DATABASE_PASSWORD
    )
    # Absent credentials render as empty values, never as "None"
    local = _database_config(
        templates, config, config.database_username or "", config.database_password or ""
    )
    return [
        MutationPrimitive.remove(DATABASE_CONFIG_FILE),
        MutationPrimitive.create(DATABASE_SAMPLE_CONFIG_FILE, sample),
        MutationPrimitive.create(DATABASE_CONFIG_FILE, local),
    ]


def _create_readme(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [
        MutationPrimitive.remove(LEGACY_README_FILE),
        MutationPrimitive.create(
            README_FILE, templates.render_template(README_TEMPLATE, config.template_context())
        ),
    ]


def _create_app_env_vars(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    content = templates.read_asset(APP_ENV_VARS_TEMPLATE)
    return [
        MutationPrimitive.create(APP_ENV_VARS_SAMPLE_FILE, content),
        MutationPrimitive.create(APP_ENV_VARS_FILE, content),
        MutationPrimitive.insert_after(
            ENVIRONMENT_FILE, ENVIRONMENT_ANCHOR, templates.read_asset(ENVIRONMENT_LOADER_TEMPLATE)
        ),
    ]


def _install_rspec(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [
        _command(BUNDLE_INSTALL),
        _command(RSPEC_INSTALL),
        MutationPrimitive.remove(DEFAULT_TEST_DIR),
    ]


def _customize_rspec(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    actions: list[StepAction] = [
        MutationPrimitive.create(f"{SPEC_DIR}/{folder}/{PLACEHOLDER_FILENAME}", "")
        for folder in SPEC_SUPPORT_DIRS
    ]
    actions.extend(
        [
            MutationPrimitive.insert_after(
                RAILS_HELPER_FILE,
                RAILS_HELPER_REQUIRES_ANCHOR,
                templates.read_asset(RAILS_HELPER_REQUIRES_TEMPLATE),
            ),
            MutationPrimitive.substitute(RAILS_HELPER_FILE, *RAILS_HELPER_SUPPORT_AUTOLOAD),
            MutationPrimitive.substitute(RAILS_HELPER_FILE, *RAILS_HELPER_TRANSACTIONAL_FIXTURES),
            MutationPrimitive.insert_after(
                RAILS_HELPER_FILE,
                RAILS_HELPER_CONFIG_ANCHOR,
                templates.read_asset(RAILS_HELPER_CLEANER_TEMPLATE),
            ),
        ]
    )
    return actions


def _add_homepage(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [
        MutationPrimitive.insert_after(ROUTES_FILE, ROUTES_ANCHOR, HOMEPAGE_ROUTE),
        MutationPrimitive.create(
            HOME_CONTROLLER_FILE, templates.read_asset(HOME_CONTROLLER_TEMPLATE)
        ),
        MutationPrimitive.create(HOME_INDEX_VIEW_FILE, templates.read_asset(HOME_INDEX_TEMPLATE)),
    ]


def _springify(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [_command(BUNDLE_INSTALL), _command(SPRING_BINSTUBS)]


def _setup_guard(config: ScaffoldConfig, templates: TemplateService) -> list[StepAction]:
    return [_command(GUARD_INIT)]


def _create_local_database(
    config: ScaffoldConfig, templates: TemplateService
) -> list[StepAction]:
    return [_command(DATABASE_SETUP)]


def _checkout_develop_branch(
    config: ScaffoldConfig, templates: TemplateService
) -> list[StepAction]:
    return [CommandInvocation("git", ("checkout", "-b", config.develop_branch))]


# =============================================================================
# Step Table
# =============================================================================

SCAFFOLD_STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(
        name="update_gitignore",
        display_name="Updating .gitignore",
        build=_update_gitignore,
        checkpoint=COMMIT_GITIGNORE,
    ),
    StepDefinition(
        name="add_gems",
        display_name="Cleaning Gemfile and adding gems",
        build=_add_gems,
        checkpoint=COMMIT_GEMS,
    ),
    StepDefinition(
        name="remove_turbolinks",
        display_name="Removing turbolinks",
        build=_remove_turbolinks,
        checkpoint=COMMIT_TURBOLINKS,
    ),
    StepDefinition(
        name="create_database_files",
        display_name="Creating database configuration",
        build=_create_database_files,
        checkpoint=COMMIT_DATABASE,
    ),
    StepDefinition(
        name="create_readme",
        display_name="Creating README.md",
        build=_create_readme,
        checkpoint=COMMIT_README,
    ),
    StepDefinition(
        name="create_app_env_vars",
        display_name="Adding app environment variables",
        build=_create_app_env_vars,
        checkpoint=COMMIT_APP_ENV_VARS,
    ),
    StepDefinition(
        name="install_rspec",
        display_name="Installing rspec",
        build=_install_rspec,
        checkpoint=COMMIT_RSPEC,
    ),
    StepDefinition(
        name="customize_rspec",
        display_name="Customizing rspec",
        build=_customize_rspec,
        checkpoint=COMMIT_RSPEC_CUSTOMIZE,
    ),
    StepDefinition(
        name="add_homepage",
        display_name="Adding homepage",
        build=_add_homepage,
        checkpoint=COMMIT_HOMEPAGE,
    ),
    # Committed together with the guard files
    StepDefinition(
        name="springify",
        display_name="Adding spring binstubs",
        build=_springify,
    ),
    StepDefinition(
        name="setup_guard",
        display_name="Setting up guard",
        build=_setup_guard,
        checkpoint=COMMIT_SPRING_GUARD,
    ),
    StepDefinition(
        name="create_local_database",
        display_name="Creating local database",
        build=_create_local_database,
        condition=lambda config: config.has_database_credentials,
        skip_message=INFO_MESSAGES["no_database"],
    ),
    StepDefinition(
        name="checkout_develop_branch",
        display_name="Checking out development branch",
        build=_checkout_develop_branch,
    ),
)


def get_step(name: str) -> StepDefinition:
    """Look up a step by name.

    Raises:
        KeyError: If no step has that name
    """
    for step in SCAFFOLD_STEPS:
        if step.name == name:
            return step
    raise KeyError(name)


def checkpoint_messages() -> list[str]:
    """Checkpoint commit messages in the order they are recorded."""
    return [step.checkpoint for step in SCAFFOLD_STEPS if step.checkpoint]
