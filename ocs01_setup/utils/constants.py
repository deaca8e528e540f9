import os

APP_NAME = "OCS01 Test Client"

REPO_URL = "https://github.com/octra-labs/ocs01-test.git"
PROJECT_DIR_NAME = "ocs01-test"
RPC_ENDPOINT = "https://octra.network"
BINARY_NAME = "ocs01-test"

RUSTUP_INSTALLER_URL = "https://sh.rustup.rs"
RUSTUP_MANUAL_URL = "https://rustup.rs/"
INSTALLER_TIMEOUT_SEC = 60

VCS_TOOL = "git"
TOOLCHAIN_TOOL = "cargo"

BUILD_DESCRIPTOR = "Cargo.toml"
INTERFACE_SOURCE_DIR = "EI"
INTERFACE_SOURCE_PATH = os.path.join(INTERFACE_SOURCE_DIR, "exec_interface.json")
INTERFACE_FILE_NAME = "exec_interface.json"
WALLET_FILE_NAME = "wallet.json"
WALLET_FILE_MODE = 0o600

ADDRESS_PATTERN = r"^oct[a-zA-Z0-9]{40,}$"
EXAMPLE_ADDRESS = "oct72upsjWZF6hCg557Wisa9ZApM88zw2rAdN2nbPFWaxGa"

SETTINGS_ENV_VARS = {
    "repo_url": "OCS01_REPO_URL",
    "project_dir_name": "OCS01_PROJECT_DIR",
    "rpc_endpoint": "OCS01_RPC_ENDPOINT",
    "log_file": "OCS01_SETUP_LOG",
}

# RPC URLs may embed provider API keys.
SENSITIVE_SETTINGS = {"rpc_endpoint"}

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def binary_relative_path(binary_name: str = BINARY_NAME) -> str:
    return os.path.join("target", "release", binary_name)
