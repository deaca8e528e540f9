import argparse
import os
import sys
import textwrap

from .utils.builder import build_project
from .utils.commands import (
    BuildSystem,
    CargoBuildSystem,
    GitClient,
    RustupInstaller,
    ToolchainInstaller,
    VcsClient,
)
from .utils.common import load_settings
from .utils.constants import APP_NAME, EXIT_FAILURE, EXIT_INTERRUPTED
from .utils.credentials import collect_credentials
from .utils.custom_exceptions import BaseSetupError
from .utils.custom_types import SetupOptions, Settings
from .utils.launcher import launch
from .utils.logger import logger
from .utils.prober import require_git
from .utils.prompt import Prompter
from .utils.repository import fetch_repository, require_project_root
from .utils.toolchain import ensure_toolchain
from .utils.wallet import write_config_files

__version__ = "0.1.0"

PROG = "ocs01-setup"

HELP_EPILOG = textwrap.dedent(
    """\
    This script will:
      1. Check/install Git and Rust if needed
      2. Clone the repository from GitHub
      3. Ask for your private key and wallet address
      4. Create wallet.json configuration
      5. Copy contract interface file
      6. Build the project from source
      7. Run the application

    Requirements:
      • Internet connection (for git clone, Rust installation, and RPC calls)
      • Git (will be checked)
      • Your wallet private key (base64 encoded)
      • Your wallet address

    Example usage:
      # Complete setup from scratch:
      ocs01-setup

      # Resume inside an already cloned project:
      cd ocs01-test && ocs01-setup --skip-clone
    """
)


class SetupArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        logger.error(message)
        self.print_help()
        sys.exit(EXIT_FAILURE)


def parse_arguments(argv=None):
    parser = SetupArgumentParser(
        prog=PROG,
        description=f"{APP_NAME} - Complete Setup Script",
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Display version information"
    )
    parser.add_argument(
        "--skip-rust",
        help="Skip Rust installation check",
        action="store_true",
    )
    parser.add_argument(
        "--skip-clone",
        help="Skip git clone (use if already in project directory)",
        action="store_true",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON or YAML file overriding repository URL, directory, RPC endpoint",
    )
    return parser.parse_args(argv)


def run_setup(
    options: SetupOptions,
    settings: Settings,
    prompter: Prompter,
    vcs: VcsClient,
    installer: ToolchainInstaller,
    build_system: BuildSystem,
    base_dir: str | None = None,
    environ=os.environ,
) -> int:
    logger.greet(APP_NAME, "Complete Build from Source")
    logger.info(f"This script will set up the {APP_NAME} completely from source.")
    logger.info(
        "It will clone the repository, build the project, and configure everything."
    )
    logger.divider()

    # The project root is checked before the first prompt.
    if options.skip_clone:
        project_dir = require_project_root(base_dir)
    else:
        require_git()

    if not options.skip_rust:
        ensure_toolchain(prompter, installer, environ)

    if not options.skip_clone:
        project_dir = fetch_repository(settings, prompter, vcs, base_dir)

    credentials = collect_credentials(prompter)

    write_config_files(project_dir, credentials, settings.rpc_endpoint)

    binary_path = build_project(project_dir, build_system, settings.binary_name)

    return launch(project_dir, binary_path, prompter)


def report_failure(error: BaseSetupError | None, settings: Settings) -> None:
    if error is not None:
        logger.error(error.message)
        logger.hints(error.hints)

    logger.stdout()
    logger.error("Setup failed! Check the error messages above.")
    logger.info("You can run this script again to retry.")
    logger.info("If the repository was cloned, you can also run:")
    logger.info(f"  cd {settings.project_dir_name} && {PROG} --skip-clone")


def main(argv=None) -> int:
    args = parse_arguments(argv)
    if args.version:
        print(f"{PROG} {__version__}")
        return 0

    options = SetupOptions(
        skip_rust=args.skip_rust,
        skip_clone=args.skip_clone,
        config_path=args.config,
    )
    settings = Settings()

    try:
        settings = load_settings(options.config_path)
        logger.set_log_file(settings.log_file)
        code = run_setup(
            options,
            settings,
            Prompter(),
            GitClient(),
            RustupInstaller(settings.installer_url),
            CargoBuildSystem(),
        )
    except BaseSetupError as setup_error:
        report_failure(setup_error, settings)
        return EXIT_FAILURE
    except OSError as os_error:
        report_failure(BaseSetupError(f"File system error: {os_error}"), settings)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.stdout()
        logger.info("Keyboard interrupt by user")
        report_failure(None, settings)
        return EXIT_INTERRUPTED

    if code != 0:
        logger.error(f"{settings.binary_name} exited with code {code}")
        report_failure(None, settings)
    return code


if __name__ == "__main__":
    sys.exit(main())
