"""Logging setup for the railstart CLI."""

import logging

from rich.logging import RichHandler

from railstart.utils.console import get_console


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for a CLI run.

    Warnings (failed commands, degraded remotes) are always shown;
    --verbose adds every command invocation and file mutation.

    Args:
        verbose: Enable DEBUG level output
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_console(), show_path=False, markup=False)],
    )

    # Reduce known chatty loggers unless explicitly requested
    if not verbose:
        for noisy in ("httpx", "httpcore"):
            logging.getLogger(noisy).setLevel(logging.WARNING)
