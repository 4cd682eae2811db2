"""File system utilities for railstart.

All text helpers open files with newline="" so line endings are read and
written exactly as they are on disk.
"""

import shutil
from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    path.mkdir(parents=True, exist_ok=True)


def read_file(path: Path) -> str:
    """Read text file contents.

    Args:
        path: Path to file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: Path, content: str) -> None:
    """Write content to text file.

    Args:
        path: Path to file to write
        content: Content to write

    Creates parent directories if they don't exist.
    """
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def append_file(path: Path, content: str) -> None:
    """Append content to an existing text file.

    Args:
        path: Path to file to append to
        content: Content to append

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(content)


def delete_file(path: Path) -> bool:
    """Delete a file if it exists.

    Args:
        path: Path to file to delete

    Returns:
        True if file was deleted, False if it didn't exist
    """
    if path.exists():
        path.unlink()
        return True
    return False


def delete_dir(path: Path) -> bool:
    """Delete a directory and all its contents.

    Args:
        path: Path to directory to delete

    Returns:
        True if directory was deleted, False if it didn't exist
    """
    if path.exists():
        shutil.rmtree(path)
        return True
    return False


def file_exists(path: Path) -> bool:
    """Check if file exists.

    Args:
        path: Path to check

    Returns:
        True if file exists, False otherwise
    """
    return path.exists() and path.is_file()


def dir_exists(path: Path) -> bool:
    """Check if directory exists.

    Args:
        path: Path to check

    Returns:
        True if directory exists, False otherwise
    """
    return path.exists() and path.is_dir()
