import dataclasses
import json
import os
import ssl
from urllib.parse import urlparse

import requests
import yaml
from requests.adapters import HTTPAdapter

from .logger import logger
from .custom_types import Settings, SettingsFile
from .custom_exceptions import ConfigError, ExternalCommandError
from .constants import SENSITIVE_SETTINGS, SETTINGS_ENV_VARS


def load_env(variable_name, masked=False):
    value = os.getenv(variable_name, default=None)

    if value:
        printable_value = mask_text(value) if masked else value
        logger.okay(f"{variable_name}", printable_value)

    return value or None


def load_config(path: str) -> SettingsFile:
    extension = os.path.splitext(path)[1].lower()

    with open(path, mode="r") as config_file:
        if extension == ".json":
            return json.load(config_file)
        if extension in (".yaml", ".yml"):
            config = yaml.safe_load(config_file)
            if config is None:
                raise ValueError(f"Config {path} is empty or contains only comments")
            return config

    raise ValueError(f"Unsupported config file extension: '{extension}'")


def load_settings(config_path: str | None = None) -> Settings:
    """
    Build the run settings: defaults, then the optional config file, then
    environment overrides.

    Raises:
        ConfigError: If the config file cannot be read or has unexpected content
    """
    values = {}
    known_keys = {f.name for f in dataclasses.fields(Settings)}

    if config_path is not None:
        logger.info(f"Loading config {config_path}...")
        try:
            config = load_config(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(str(e))

        if not isinstance(config, dict):
            raise ConfigError(f"{config_path} must contain a mapping")

        unknown_keys = sorted(set(config) - known_keys)
        if unknown_keys:
            raise ConfigError(f"unknown keys in {config_path}: {', '.join(unknown_keys)}")

        for key, value in config.items():
            if not isinstance(value, str):
                raise ConfigError(f'"{key}" in {config_path} must be a string')
        values.update(config)

    for key, variable_name in SETTINGS_ENV_VARS.items():
        value = load_env(variable_name, masked=key in SENSITIVE_SETTINGS)
        if value is not None:
            values[key] = value

    return Settings(**values)


class _TLSAdapter(HTTPAdapter):
    """Transport adapter refusing anything older than TLS 1.2."""

    def init_poolmanager(self, *args, **kwargs):
        context = ssl.create_default_context()
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        kwargs["ssl_context"] = context
        return super().init_poolmanager(*args, **kwargs)


def _handle_request_errors(error_class):
    """Decorator to handle common HTTP request errors and convert them to custom exceptions."""

    def decorator(func):
        def wrapper(*args, **kwargs):
            try:
                response = func(*args, **kwargs)
                response.raise_for_status()
                return response
            except requests.exceptions.HTTPError as http_err:
                raise error_class(f"HTTP error occurred: {http_err}")
            except requests.exceptions.ConnectionError as conn_err:
                raise error_class(f"Connection error occurred: {conn_err}")
            except requests.exceptions.Timeout as timeout_err:
                raise error_class(f"Timeout error occurred: {timeout_err}")
            except requests.exceptions.RequestException as req_err:
                raise error_class(f"Request exception occurred: {req_err}")

        return wrapper

    return decorator


@_handle_request_errors(ExternalCommandError)
def fetch_secure(url, timeout=None):
    if urlparse(url).scheme != "https":
        raise ExternalCommandError(f"Refusing to download over a non-https URL: {url}")

    logger.log(f"Fetch: {url}")
    with requests.Session() as session:
        session.mount("https://", _TLSAdapter())
        return session.get(url, timeout=timeout)


def mask_text(text, mask_start=3, mask_end=3):
    text_length = len(text)
    if text_length <= mask_start + mask_end:
        return "*" * text_length
    mask = "*" * (text_length - mask_start - mask_end)
    return text[:mask_start] + mask + text[text_length - mask_end :]
