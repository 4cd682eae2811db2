"""Utility helpers for railstart."""

from railstart.utils.console import (
    get_console,
    print_banner,
    print_error,
    print_header,
    print_info,
    print_panel,
    print_warning,
)
from railstart.utils.file_utils import (
    append_file,
    delete_dir,
    delete_file,
    dir_exists,
    ensure_dir,
    file_exists,
    read_file,
    write_file,
)
from railstart.utils.naming import (
    app_name_to_database_name,
    app_name_to_heroku_slug,
    clean_app_name,
)
from railstart.utils.step_tracker import StepTracker

__all__ = [
    # Console
    "get_console",
    "print_banner",
    "print_error",
    "print_header",
    "print_info",
    "print_panel",
    "print_warning",
    # Files
    "append_file",
    "delete_dir",
    "delete_file",
    "dir_exists",
    "ensure_dir",
    "file_exists",
    "read_file",
    "write_file",
    # Naming
    "app_name_to_database_name",
    "app_name_to_heroku_slug",
    "clean_app_name",
    # Progress
    "StepTracker",
]
