from dataclasses import dataclass, field
from typing import NotRequired, TypedDict

from .constants import (
    BINARY_NAME,
    PROJECT_DIR_NAME,
    REPO_URL,
    RPC_ENDPOINT,
    RUSTUP_INSTALLER_URL,
)


class WalletConfig(TypedDict):
    priv: str
    addr: str
    rpc: str


class SettingsFile(TypedDict):
    repo_url: NotRequired[str]
    project_dir_name: NotRequired[str]
    rpc_endpoint: NotRequired[str]
    binary_name: NotRequired[str]
    installer_url: NotRequired[str]
    log_file: NotRequired[str]


@dataclass(frozen=True)
class SetupOptions:
    skip_rust: bool = False
    skip_clone: bool = False
    config_path: str | None = None


@dataclass(frozen=True)
class Settings:
    repo_url: str = REPO_URL
    project_dir_name: str = PROJECT_DIR_NAME
    rpc_endpoint: str = RPC_ENDPOINT
    binary_name: str = BINARY_NAME
    installer_url: str = RUSTUP_INSTALLER_URL
    log_file: str | None = None


@dataclass(frozen=True)
class Credentials:
    private_key: str = field(repr=False)
    address: str
