from .commands import BuildSystem
from .constants import binary_relative_path
from .custom_exceptions import ExternalCommandError
from .logger import logger

BUILD_FAILURE_HINTS = [
    "Internet connection required for downloading dependencies",
    "Ensure you have enough disk space",
    "Check that Rust is properly installed",
]


def build_project(project_dir: str, build_system: BuildSystem, binary_name: str) -> str:
    logger.step("Building the project from source...")
    logger.info("This may take several minutes on first build...")
    logger.info("Downloading dependencies and compiling...")

    result = build_system.build(project_dir)
    if not result.success:
        raise ExternalCommandError(
            f"Build failed ({result.diagnostic})! Please check the error messages above. Common issues:",
            BUILD_FAILURE_HINTS,
        )

    binary_path = binary_relative_path(binary_name)
    logger.okay("Project built successfully!")
    logger.info("Binary created at", binary_path)
    return binary_path
