import json
import os
import shutil

from .constants import (
    INTERFACE_FILE_NAME,
    INTERFACE_SOURCE_PATH,
    WALLET_FILE_MODE,
    WALLET_FILE_NAME,
)
from .custom_exceptions import RepositoryStructureError
from .custom_types import Credentials, WalletConfig
from .logger import logger


def build_wallet_config(credentials: Credentials, rpc_endpoint: str) -> WalletConfig:
    return {
        "priv": credentials.private_key,
        "addr": credentials.address,
        "rpc": rpc_endpoint,
    }


def write_wallet_file(project_dir: str, wallet: WalletConfig) -> str:
    """
    Write the wallet config readable and writable by the owner only.

    The file is created with the restricted mode and the mode is applied again
    afterwards, since an already existing file keeps its old permissions.
    """
    logger.step("Creating wallet configuration...")
    wallet_path = os.path.join(project_dir, WALLET_FILE_NAME)

    fd = os.open(wallet_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, WALLET_FILE_MODE)
    with os.fdopen(fd, "w") as wallet_file:
        json.dump(wallet, wallet_file, indent=2)
        wallet_file.write("\n")
    os.chmod(wallet_path, WALLET_FILE_MODE)

    logger.okay(f"Wallet configuration created ({WALLET_FILE_NAME})")
    return wallet_path


def copy_contract_interface(project_dir: str) -> str:
    logger.step("Setting up contract interface...")
    source_path = os.path.join(project_dir, INTERFACE_SOURCE_PATH)

    if not os.path.isfile(source_path):
        raise RepositoryStructureError(
            f"Contract interface file not found at {INTERFACE_SOURCE_PATH}",
            ["This might indicate an issue with the repository structure"],
        )

    destination_path = os.path.join(project_dir, INTERFACE_FILE_NAME)
    shutil.copyfile(source_path, destination_path)
    logger.okay(f"Contract interface copied ({INTERFACE_FILE_NAME})")
    return destination_path


def write_config_files(
    project_dir: str, credentials: Credentials, rpc_endpoint: str
) -> tuple[str, str]:
    wallet_path = write_wallet_file(
        project_dir, build_wallet_config(credentials, rpc_endpoint)
    )
    interface_path = copy_contract_interface(project_dir)
    return wallet_path, interface_path
