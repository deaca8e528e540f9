import os

from .commands import ToolchainInstaller
from .constants import RUSTUP_MANUAL_URL
from .custom_exceptions import ExternalCommandError, MissingPrerequisiteError
from .logger import logger
from .prober import check_rust
from .prompt import Prompter


def cargo_bin_dir(environ=os.environ) -> str:
    cargo_home = environ.get("CARGO_HOME") or os.path.join(
        os.path.expanduser("~"), ".cargo"
    )
    return os.path.join(cargo_home, "bin")


def refresh_path(environ=os.environ) -> None:
    """Put the cargo bin directory first on PATH for this process and its children."""
    bin_dir = cargo_bin_dir(environ)
    entries = [entry for entry in environ.get("PATH", "").split(os.pathsep) if entry]
    if bin_dir not in entries:
        environ["PATH"] = os.pathsep.join([bin_dir] + entries)


def install_rust(installer: ToolchainInstaller, environ=os.environ) -> None:
    logger.step("Installing Rust...")
    result = installer.install()
    if not result.success:
        raise ExternalCommandError(
            f"Rust installation failed: {result.diagnostic}",
            [f"Install Rust manually: {RUSTUP_MANUAL_URL}"],
        )
    refresh_path(environ)
    logger.okay("Rust installed successfully")


def ensure_toolchain(
    prompter: Prompter, installer: ToolchainInstaller, environ=os.environ
) -> None:
    if check_rust():
        return

    if not prompter.confirm("Would you like to install Rust now?", default=True):
        raise MissingPrerequisiteError(
            "Rust is required to build this project",
            [f"Install Rust manually: {RUSTUP_MANUAL_URL}"],
        )

    install_rust(installer, environ)
