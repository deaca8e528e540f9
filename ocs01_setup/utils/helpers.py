import os
from shutil import rmtree


def remove_directory(directory: str) -> None:
    """
    Remove a directory and all its contents.

    Args:
        directory: Path to the directory to remove
    """
    if os.path.isdir(directory):
        rmtree(directory)


def create_dirs(path: str) -> None:
    """
    Create all parent directories for a given path.

    Args:
        path: File path for which to create parent directories
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def is_project_root(directory: str, build_descriptor: str, source_dir: str) -> bool:
    return os.path.isfile(os.path.join(directory, build_descriptor)) and os.path.isdir(
        os.path.join(directory, source_dir)
    )
