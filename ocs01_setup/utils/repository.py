import os

from .commands import VcsClient
from .constants import BUILD_DESCRIPTOR, INTERFACE_SOURCE_DIR
from .custom_exceptions import ExternalCommandError, RepositoryStructureError
from .custom_types import Settings
from .helpers import is_project_root, remove_directory
from .logger import logger
from .prompt import Prompter


def fetch_repository(
    settings: Settings,
    prompter: Prompter,
    vcs: VcsClient,
    base_dir: str | None = None,
) -> str:
    """
    Clone the project into ``base_dir`` or reuse an existing checkout.

    Returns:
        Absolute path of the project directory used by the following steps

    Raises:
        ExternalCommandError: If the clone fails
    """
    base_dir = base_dir or os.getcwd()
    project_dir = os.path.abspath(os.path.join(base_dir, settings.project_dir_name))

    logger.step("Cloning OCS01 Test repository...")

    if os.path.isdir(project_dir):
        logger.warn(f"Directory '{settings.project_dir_name}' already exists")
        if prompter.confirm("Remove existing directory and clone fresh?", default=False):
            remove_directory(project_dir)
            logger.info("Removed existing directory")
        else:
            logger.info("Using existing directory")
            # The checkout is reused as-is; a mismatch only gets a warning here.
            if not is_project_root(project_dir, BUILD_DESCRIPTOR, INTERFACE_SOURCE_DIR):
                logger.warn(
                    f"Existing directory has no {BUILD_DESCRIPTOR} or "
                    f"{INTERFACE_SOURCE_DIR}/ folder, later steps may fail"
                )
            return project_dir

    result = vcs.clone(settings.repo_url, project_dir)
    if not result.success:
        raise ExternalCommandError(
            f"Failed to clone repository: {result.diagnostic}",
            ["Please check your internet connection and try again"],
        )

    logger.okay("Repository cloned successfully")
    return project_dir


def require_project_root(directory: str | None = None) -> str:
    project_dir = os.path.abspath(directory or os.getcwd())

    if not is_project_root(project_dir, BUILD_DESCRIPTOR, INTERFACE_SOURCE_DIR):
        raise RepositoryStructureError(
            "Please run this script from the OCS01 test project root directory",
            [
                f"The directory should contain {BUILD_DESCRIPTOR} and {INTERFACE_SOURCE_DIR}/ folder",
                "Or run without --skip-clone to clone the repository",
            ],
        )
    return project_dir
