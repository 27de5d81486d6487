import json
import os
from collections import namedtuple
from pathlib import Path
from typing import Any, NoReturn, Optional, Sequence

import yaml
from ape import accounts, networks, project
from ape.api import AccountAPI
from ape.contracts import ContractContainer
from ape.utils import ZERO_ADDRESS
from eth_utils import is_address, to_checksum_address
from hexbytes import HexBytes

from zep_vouching import log
from zep_vouching.constants import (
    LOCAL_PACKAGE_NAME,
    OZ_DEPENDENCY_NAME,
    OZ_DEPENDENCY_VERSION,
)
from zep_vouching.networks import is_local_network


class DeploymentError(Exception):
    """Raised when a deployment step cannot go on."""


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def load_constants(filepath: Path, required: Sequence[str] = ()):
    """
    Loads the 'constants' section of a params file.
    Constants are exposed as attributes (e.g., constants.VOUCHING_MIN_STAKE).
    """
    if not Path(filepath).exists():
        raise ValueError(f"Params file not found at {filepath}.")

    config = _load_yaml(filepath) or dict()
    constants = config.get("constants")
    if not constants:
        raise ValueError(f"Params file {filepath} is missing the 'constants' field.")

    missing = [name for name in required if name not in constants]
    if missing:
        raise ValueError(f"Constant(s) {', '.join(missing)} not found in params file {filepath}.")

    _Constants = namedtuple("_Constants", list(constants))
    return _Constants(**constants)


def validate_address(address: Optional[str]) -> bool:
    """Returns True for a well-formed, non-zero address."""
    if not address or not is_address(address):
        return False
    return to_checksum_address(address) != ZERO_ADDRESS


def metadata_hash_to_bytes32(value) -> bytes:
    """Right-pads a metadata hash to 32 bytes (e.g. 0x2a -> 0x2a00...00)."""
    data = bytes(HexBytes(value))
    if len(data) > 32:
        raise ValueError(f"Metadata hash {value} is longer than 32 bytes.")
    return data.ljust(32, b"\x00")


def oz_dependency():
    return project.dependencies[OZ_DEPENDENCY_NAME][OZ_DEPENDENCY_VERSION]


def _get_dependency_contract_container(package_name: str, contract: str) -> ContractContainer:
    try:
        dependency_versions = project.dependencies[package_name]
    except KeyError:
        raise ValueError(f"No dependency found with name '{package_name}'.")

    if len(dependency_versions) != 1:
        raise ValueError(f"Ambiguous {package_name} dependency for {contract}")

    dependency_api = list(dependency_versions.values())[0]
    try:
        return getattr(dependency_api, contract)
    except AttributeError:
        raise ValueError(f"No contract found with name '{contract}' in {package_name}.")


def get_contract_container(contract: str, package_name: str = LOCAL_PACKAGE_NAME) -> ContractContainer:
    if package_name == LOCAL_PACKAGE_NAME:
        try:
            return getattr(project, contract)
        except AttributeError:
            raise ValueError(f"No contract found with name '{contract}'.")

    return _get_dependency_contract_container(package_name, contract)


def call_description(container: ContractContainer, method: str, args: Sequence[Any]) -> str:
    """Describes a contract call for error messages, e.g. 'initialize(address,uint256)'."""
    method_abis = [
        abi
        for abi in container.contract_type.methods
        if abi.name == method and len(abi.inputs) == len(args)
    ]
    if method_abis:
        signature = ",".join(abi_input.type for abi_input in method_abis[0].inputs)
    else:
        signature = "?"
    pretty_args = ", ".join(str(arg) for arg in args)
    return f"{method}({signature}) with arguments [{pretty_args}]"


def get_account(address: str) -> AccountAPI:
    """Returns the loaded (or test) account for an address."""
    try:
        return accounts[address]
    except (IndexError, KeyError):
        raise ValueError(f"No account found for address {address}.")


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the appropriate API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to publish contracts.")
    ecosystem_name = networks.provider.network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    api_key = os.environ.get(explorer_envvar) if explorer_envvar else None
    if not api_key:
        raise ValueError(f"{explorer_envvar or 'Explorer API key'} is not set.")


def check_plugins(verify: bool) -> None:
    log.base("Checking plugins...")
    if verify:
        check_etherscan_plugin()


def same_address(address_1: Optional[str], address_2: Optional[str]) -> bool:
    if not address_1 or not address_2:
        return False
    return address_1.lower() == address_2.lower()


def fail(message: str, error: Optional[Exception] = None) -> NoReturn:
    """Logs a failed step and raises the underlying error (or a DeploymentError)."""
    log.error(f" ✘ {message}")
    if error:
        raise error
    raise DeploymentError(message)
