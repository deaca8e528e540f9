import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .common import fetch_secure
from .constants import INSTALLER_TIMEOUT_SEC, RUSTUP_INSTALLER_URL, TOOLCHAIN_TOOL, VCS_TOOL
from .custom_exceptions import ExternalCommandError
from .logger import logger


@dataclass(frozen=True)
class CommandResult:
    success: bool
    returncode: int | None = None
    diagnostic: str = ""


def run_command(command, cwd=None, input_data=None) -> CommandResult:
    """
    Run an external command with the terminal attached to its output.

    Args:
        command: Argument list, the first item is the executable
        cwd: Working directory for the command
        input_data: Bytes fed to the command's stdin

    Returns:
        CommandResult describing how the command ended
    """
    logger.log(f"Run: {' '.join(command)}")
    try:
        process = subprocess.run(command, cwd=cwd, input=input_data, check=False)
    except OSError as e:
        return CommandResult(False, None, f"Failed to run {command[0]}: {e}")

    if process.returncode != 0:
        return CommandResult(
            False,
            process.returncode,
            f"{command[0]} exited with code {process.returncode}",
        )
    return CommandResult(True, 0)


class VcsClient(ABC):
    @abstractmethod
    def clone(self, url: str, destination: str) -> CommandResult:
        pass


class ToolchainInstaller(ABC):
    @abstractmethod
    def install(self) -> CommandResult:
        pass


class BuildSystem(ABC):
    @abstractmethod
    def build(self, project_dir: str) -> CommandResult:
        pass


class GitClient(VcsClient):
    def clone(self, url, destination):
        return run_command([VCS_TOOL, "clone", url, destination])


class RustupInstaller(ToolchainInstaller):
    """Downloads the rustup bootstrap script and runs it non-interactively."""

    def __init__(self, installer_url=RUSTUP_INSTALLER_URL, shell="sh"):
        self.installer_url = installer_url
        self.shell = shell

    def install(self):
        try:
            response = fetch_secure(self.installer_url, timeout=INSTALLER_TIMEOUT_SEC)
        except ExternalCommandError as e:
            return CommandResult(False, None, e.message)

        return run_command([self.shell, "-s", "--", "-y"], input_data=response.content)


class CargoBuildSystem(BuildSystem):
    def build(self, project_dir):
        return run_command([TOOLCHAIN_TOOL, "build", "--release"], cwd=project_dir)
