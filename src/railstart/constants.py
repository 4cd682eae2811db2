"""Constants for railstart.

This module contains:
- VERSION: Package version
- Gem selections added to the application's Gemfile
- Anchor text and patterns the steps look for in a Rails skeleton
- Checkpoint commit messages

For paths, messages, and runtime settings, import from:
- railstart.config.paths
- railstart.config.messages
- railstart.config.settings
"""

from railstart import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Gemfile
# =============================================================================

GEMFILE_SOURCE_LINE = "source 'https://rubygems.org'\n"

# Patterns removed when cleaning the Gemfile
GEMFILE_COMMENT_PATTERN = r"# .*[\r\n]?"
GEMFILE_BLANK_LINES_PATTERN = r"\n{2,}"

SERVER_DATABASE_GEM = "pg"
EMBEDDED_DATABASE_GEM = "sqlite3"
PRODUCTION_GEMS: tuple[str, ...] = ("rails_12factor",)
LEGACY_ASSET_GEM = "turbolinks"

# (gem name, require option) for the development/test group
DEVELOPMENT_TEST_GEMS: tuple[tuple[str, bool | None], ...] = (
    ("awesome_print", None),
    ("capybara", None),
    ("database_cleaner", None),
    ("factory_girl_rails", None),
    ("faker", None),
    ("guard", None),
    ("guard-bundler", False),
    ("guard-rspec", False),
    ("poltergeist", None),
    ("pry", None),
    ("rb-inotify", False),
    ("rb-fsevent", False),
    ("rb-fchange", False),
    ("rspec-rails", None),
    ("rspec-collection_matchers", None),
    ("shoulda-matchers", None),
)
DEVELOPMENT_TEST_GROUPS: tuple[str, ...] = ("development", "test")

# =============================================================================
# Asset Pipeline (turbolinks removal)
# =============================================================================

TURBOLINKS_LAYOUT_PATTERN = r""", ('|")data-turbolinks-track('|") => true"""
TURBOLINKS_JS_PATTERN = r"//= require turbolinks[\r\n]"

# =============================================================================
# Anchors
# =============================================================================

ENVIRONMENT_ANCHOR = "require File.expand_path('../application', __FILE__)\n"
RAILS_HELPER_REQUIRES_ANCHOR = (
    "# Add additional requires below this line. Rails is not loaded until this point!\n"
)
RAILS_HELPER_CONFIG_ANCHOR = "config.infer_spec_type_from_file_location!\n"
ROUTES_ANCHOR = "routes.draw do\n"
HOMEPAGE_ROUTE = "  root to: 'home#index'\n"

# Literal rails_helper edits (pattern, replacement)
RAILS_HELPER_SUPPORT_AUTOLOAD = (
    r'# Dir\[Rails\.root\.join\("spec/support/\*\*/\*\.rb"\)\]\.each \{ \|f\| require f \}',
    'Dir[Rails.root.join("spec/support/**/*.rb")].each { |f| require f }',
)
RAILS_HELPER_TRANSACTIONAL_FIXTURES = (
    r"config\.use_transactional_fixtures = true",
    "config.use_transactional_fixtures = false",
)

# =============================================================================
# Database
# =============================================================================

SAMPLE_DATABASE_USERNAME = "username"
SAMPLE_DATABASE_PASSWORD = "pass"

# =============================================================================
# Commands
# =============================================================================

BUNDLE_INSTALL = ("bundle", ("install",))
RSPEC_INSTALL = ("rails", ("generate", "rspec:install"))
SPRING_BINSTUBS = ("bundle", ("exec", "spring", "binstub", "--all"))
GUARD_INIT = ("bundle", ("exec", "guard", "init", "guard-bundler", "guard-rspec"))
DATABASE_SETUP = ("rake", ("db:create", "db:migrate"))

# =============================================================================
# Checkpoint Commit Messages
# =============================================================================

COMMIT_GITIGNORE = "Initial commit with updated .gitignore"
COMMIT_GEMS = "add gems"
COMMIT_TURBOLINKS = "remove turbolinks"
COMMIT_DATABASE = "add database.sample.yml and database.yml files"
COMMIT_README = "add readme"
COMMIT_APP_ENV_VARS = "add app environment variable sample file"
COMMIT_RSPEC = "install rspec"
COMMIT_RSPEC_CUSTOMIZE = "customize rspec for basic usage"
COMMIT_HOMEPAGE = "add homepage"
COMMIT_SPRING_GUARD = "springify app and add guard files"
