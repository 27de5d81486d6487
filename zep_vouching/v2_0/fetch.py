from typing import Optional

from ape.contracts import ContractInstance

from zep_vouching.constants import (
    BASIC_JURISDICTION,
    LOCAL_PACKAGE_NAME,
    OLD_VOUCHING,
    ORGANIZATIONS_VALIDATOR,
    TPL_PACKAGE_NAME,
    VOUCHING,
    ZEP_TOKEN,
)
from zep_vouching.network_file import NetworkFile
from zep_vouching.utils import get_contract_container, validate_address


def fetch_network_file(network: str) -> NetworkFile:
    return NetworkFile.load(network)


def fetch_proxy(
    network_file: NetworkFile, package_name: str, alias: str, contract_name: str
) -> Optional[ContractInstance]:
    """Returns the most recent proxy of an alias wrapped as contract_name, if any."""
    proxies = network_file.proxies_of(package_name, alias)
    if proxies:
        address = proxies[-1].address
        if validate_address(address):
            contract_container = get_contract_container(contract_name, package_name)
            return contract_container.at(address)
    return None


def fetch_jurisdiction(network_file: NetworkFile) -> Optional[ContractInstance]:
    return fetch_proxy(network_file, TPL_PACKAGE_NAME, BASIC_JURISDICTION, BASIC_JURISDICTION)


def fetch_zep_token(network_file: NetworkFile) -> Optional[ContractInstance]:
    return fetch_proxy(network_file, LOCAL_PACKAGE_NAME, ZEP_TOKEN, ZEP_TOKEN)


def fetch_vouching(network_file: NetworkFile) -> Optional[ContractInstance]:
    # 2.0 instances run the first generation of the vouching contract
    return fetch_proxy(network_file, LOCAL_PACKAGE_NAME, VOUCHING, OLD_VOUCHING)


def fetch_validator(network_file: NetworkFile) -> Optional[ContractInstance]:
    return fetch_proxy(
        network_file, TPL_PACKAGE_NAME, ORGANIZATIONS_VALIDATOR, ORGANIZATIONS_VALIDATOR
    )
