"""Path constants for railstart.

This module defines every path the scaffolding pipeline reads or writes,
relative to the root of the Rails application being set up.
"""

# =============================================================================
# railstart Files
# =============================================================================

CONFIG_FILE = "railstart.yaml"
ENV_FILE = ".env"

# =============================================================================
# Version Control
# =============================================================================

GIT_DIR = ".git"
GITIGNORE_FILE = ".gitignore"

# =============================================================================
# Runtime and Dependency Manifest
# =============================================================================

RUBY_VERSION_FILE = ".ruby-version"
GEMFILE = "Gemfile"

# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_CONFIG_FILE = "config/database.yml"
DATABASE_SAMPLE_CONFIG_FILE = "config/database.sample.yml"

# =============================================================================
# Documentation
# =============================================================================

README_FILE = "README.md"
LEGACY_README_FILE = "README.rdoc"

# =============================================================================
# Application Secrets
# =============================================================================

APP_ENV_VARS_SAMPLE_FILE = "config/app_environment_variables.sample.rb"
APP_ENV_VARS_FILE = "config/app_environment_variables.rb"
ENVIRONMENT_FILE = "config/environment.rb"

# =============================================================================
# Asset Pipeline
# =============================================================================

APPLICATION_LAYOUT_FILE = "app/views/layouts/application.html.erb"
APPLICATION_JS_FILE = "app/assets/javascripts/application.js"

# =============================================================================
# Test Framework
# =============================================================================

DEFAULT_TEST_DIR = "test"
SPEC_DIR = "spec"
RAILS_HELPER_FILE = "spec/rails_helper.rb"
SPEC_SUPPORT_DIRS = ("support", "models", "features", "factories")
PLACEHOLDER_FILENAME = ".keep"

# =============================================================================
# Homepage
# =============================================================================

ROUTES_FILE = "config/routes.rb"
HOME_CONTROLLER_FILE = "app/controllers/home_controller.rb"
HOME_INDEX_VIEW_FILE = "app/views/home/index.html.erb"

# =============================================================================
# Template Assets (relative to the package templates directory)
# =============================================================================

GITIGNORE_TEMPLATE = "gitignore_entries"
DATABASE_CONFIG_TEMPLATE = "database.yml.j2"
README_TEMPLATE = "README.md.j2"
APP_ENV_VARS_TEMPLATE = "app_environment_variables.sample.rb"
ENVIRONMENT_LOADER_TEMPLATE = "environment_loader.rb"
RAILS_HELPER_REQUIRES_TEMPLATE = "rails_helper_requires.rb"
RAILS_HELPER_CLEANER_TEMPLATE = "rails_helper_database_cleaner.rb"
HOME_CONTROLLER_TEMPLATE = "home_controller.rb"
HOME_INDEX_TEMPLATE = "home_index.html.erb"
