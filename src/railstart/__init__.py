"""railstart: opinionated post-generation setup for Rails applications."""

import tomllib
from pathlib import Path

try:
    # First, try to read from pyproject.toml (for development mode)
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    __version__ = data["project"]["version"]
except Exception:
    # Fallback: Get version from installed package metadata
    try:
        from importlib.metadata import version

        __version__ = version("railstart")
    except Exception:
        __version__ = "0.0.0-dev"
