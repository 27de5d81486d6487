from ape import networks

from zep_vouching.constants import LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_network_name() -> str:
    return networks.provider.network.name


def get_chain_id() -> int:
    return networks.provider.network.chain_id


def is_local_network() -> bool:
    return get_network_name() in LOCAL_BLOCKCHAIN_ENVIRONMENTS
