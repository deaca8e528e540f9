import shutil

from .constants import TOOLCHAIN_TOOL, VCS_TOOL
from .custom_exceptions import MissingPrerequisiteError
from .logger import logger

GIT_INSTALL_HINTS = [
    "Ubuntu/Debian: sudo apt install git",
    "CentOS/RHEL: sudo yum install git",
    "macOS: brew install git",
]


def has_tool(name: str) -> bool:
    return shutil.which(name) is not None


def check_git() -> bool:
    if has_tool(VCS_TOOL):
        logger.okay("Git is available")
        return True
    logger.error("Git is not installed")
    return False


def check_rust() -> bool:
    if has_tool(TOOLCHAIN_TOOL):
        logger.okay("Rust is already installed")
        return True
    logger.warn("Rust is not installed")
    return False


def require_git() -> None:
    if not check_git():
        raise MissingPrerequisiteError(
            "Git is required to clone the repository, please install it first",
            GIT_INSTALL_HINTS,
        )
