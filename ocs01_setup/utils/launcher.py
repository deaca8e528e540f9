import os
import subprocess

from .constants import APP_NAME, INTERFACE_FILE_NAME, WALLET_FILE_NAME
from .custom_exceptions import ExternalCommandError
from .logger import logger
from .prompt import Prompter


def run_binary(project_dir: str, binary_path: str) -> int:
    """Run the built client in the foreground, sharing this terminal."""
    executable = os.path.join(project_dir, binary_path)
    logger.log(f"Run: {executable}")
    try:
        return subprocess.run([executable], cwd=project_dir, check=False).returncode
    except OSError as e:
        raise ExternalCommandError(f"Failed to start {executable}: {e}")


def print_manifest(project_dir: str, binary_path: str) -> None:
    logger.stdout()
    logger.okay("🎉 Complete setup finished successfully!")
    logger.stdout()
    logger.info(f"Your {APP_NAME} is ready to use!")
    logger.info("Project location", project_dir)
    logger.info("Files created:")
    logger.report_table(
        [
            [WALLET_FILE_NAME, "your wallet configuration"],
            [INTERFACE_FILE_NAME, "contract interface"],
            [binary_path, "the application"],
        ]
    )
    logger.stdout()


def print_resume_instructions(project_dir: str, binary_path: str) -> None:
    logger.stdout()
    logger.info("To start the application later, run:")
    logger.plain(f"   cd {project_dir}")
    logger.plain(f"   ./{binary_path}")
    logger.stdout()
    logger.info(
        f"Make sure to keep {WALLET_FILE_NAME} and {INTERFACE_FILE_NAME} in the same directory!"
    )


def launch(
    project_dir: str,
    binary_path: str,
    prompter: Prompter,
    runner=run_binary,
) -> int:
    """
    Offer to start the freshly built client.

    Returns:
        The client's exit code when it was started, otherwise 0
    """
    print_manifest(project_dir, binary_path)

    if not prompter.confirm("Would you like to start the application now?", default=True):
        print_resume_instructions(project_dir, binary_path)
        return 0

    logger.stdout()
    logger.step(f"Starting {APP_NAME}...")
    logger.stdout()
    return runner(project_dir, binary_path)
