"""Naming utilities for application, database, and remote names.

Centralises the app-name conversions so every step and hosting provider
derives names the same way.
"""

import re

_REMOTE_SEPARATORS = re.compile(r"[- ]")
_HEROKU_INVALID = re.compile(r"[^a-z0-9-]+")


def clean_app_name(app_name: str) -> str:
    """Convert an app name for use as a remote repository name.

    Every hyphen and every space becomes an underscore.

    Args:
        app_name: Application name as given on the command line

    Returns:
        Cleaned name (e.g. "My App" -> "My_App")
    """
    return _REMOTE_SEPARATORS.sub("_", app_name)


def app_name_to_database_name(app_name: str) -> str:
    """Convert an app name to the base database name (hyphens to underscores).

    Args:
        app_name: Application name

    Returns:
        Database name prefix (e.g. "blog-app" -> "blog_app")
    """
    return app_name.replace("-", "_")


def app_name_to_heroku_slug(app_name: str) -> str:
    """Convert an app name to a Heroku app name.

    Heroku only accepts lowercase letters, digits, and dashes.

    Args:
        app_name: Application name

    Returns:
        Heroku-safe slug (e.g. "My_App" -> "my-app")
    """
    slug = _HEROKU_INVALID.sub("-", app_name.lower())
    return re.sub(r"-+", "-", slug).strip("-")
