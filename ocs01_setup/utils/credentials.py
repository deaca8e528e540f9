import re

from .constants import ADDRESS_PATTERN, EXAMPLE_ADDRESS, WALLET_FILE_NAME
from .custom_exceptions import SetupCancelledError, UserInputError
from .custom_types import Credentials
from .logger import logger
from .prompt import Prompter


def is_valid_address(address: str) -> bool:
    return re.fullmatch(ADDRESS_PATTERN, address) is not None


def get_private_key(prompter: Prompter) -> str:
    logger.stdout()
    logger.info("Please enter your wallet private key (base64 encoded):")
    logger.warn(f"Your private key will be stored locally in {WALLET_FILE_NAME}")
    logger.warn("Keep this file secure and never share it!")
    logger.stdout()

    private_key = prompter.secret("Private Key")
    if not private_key:
        raise UserInputError("Private key cannot be empty!")
    return private_key


def get_wallet_address(prompter: Prompter) -> str:
    logger.stdout()
    logger.info("Please enter your wallet address:")
    logger.info("Example", EXAMPLE_ADDRESS)
    logger.stdout()

    address = prompter.text("Wallet Address")
    if not address:
        raise UserInputError("Wallet address cannot be empty!")

    if not is_valid_address(address):
        logger.warn(
            "Address format looks unusual. OCT addresses typically start with 'oct'"
        )
        if not prompter.confirm("Continue anyway?", default=False):
            raise SetupCancelledError(
                "Setup cancelled. Please check your address and try again."
            )
    return address


def collect_credentials(prompter: Prompter) -> Credentials:
    private_key = get_private_key(prompter)
    address = get_wallet_address(prompter)
    return Credentials(private_key=private_key, address=address)
