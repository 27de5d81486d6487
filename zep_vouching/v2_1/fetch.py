from typing import Optional

from ape.contracts import ContractInstance

from zep_vouching.constants import LOCAL_PACKAGE_NAME, VOUCHING
from zep_vouching.network_file import NetworkFile
from zep_vouching.v2_0.fetch import fetch_proxy


def fetch_vouching(network_file: NetworkFile) -> Optional[ContractInstance]:
    return fetch_proxy(network_file, LOCAL_PACKAGE_NAME, VOUCHING, VOUCHING)
