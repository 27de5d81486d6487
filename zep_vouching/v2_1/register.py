from typing import Optional

from zep_vouching import log
from zep_vouching.confirm import _confirm_registration
from zep_vouching.network_file import NetworkFile
from zep_vouching.params import Transactor
from zep_vouching.utils import DeploymentError, fail, metadata_hash_to_bytes32
from zep_vouching.v2_0.fetch import fetch_zep_token
from zep_vouching.v2_1.fetch import fetch_vouching


def _registered_entry_id(vouching, receipt) -> int:
    registered_logs = receipt.decode_logs(vouching.Registered)
    if not registered_logs:
        raise DeploymentError(f"No Registered event found in transaction {receipt.txn_hash}")
    return registered_logs[0].id


def register(
    address: str,
    amount: int,
    metadata_uri: str,
    metadata_hash,
    prompt: bool,
    transactor: Transactor,
    network_file: NetworkFile,
) -> Optional[int]:
    """
    Stakes amount ZEP on a new vouching entry for address.
    Returns the ID of the new entry, or None when amount is below the minimum stake.
    """
    vouching = fetch_vouching(network_file)
    zep_token = fetch_zep_token(network_file)
    if not vouching or not zep_token:
        fail(f"Could not find Vouching and ZEPToken instances in {network_file.file_name}")

    minimum_stake = vouching.minimumStake()
    if minimum_stake > amount:
        log.error(
            f" ✘ Registering amount ({amount} ZEP) must be greater than or equal to "
            f"the minimum stake {minimum_stake}"
        )
        return None

    if prompt:
        _confirm_registration(address, amount, metadata_uri, metadata_hash)

    try:
        transactor.transact(zep_token.approve, vouching.address, amount)
        log.info(
            f" ✔ Approved {amount} ZEP from {transactor.owner} "
            f"to vouching contract {vouching.address}"
        )

        receipt = transactor.transact(
            vouching.register,
            address,
            amount,
            metadata_uri,
            metadata_hash_to_bytes32(metadata_hash),
        )
        entry_id = _registered_entry_id(vouching, receipt)
        log.info(f" ✔ Vouching entry registered with ID {entry_id}")
        return entry_id
    except Exception as error:
        fail("Could not register entry", error)


def register_and_transfer(
    address: str,
    amount: int,
    metadata_uri: str,
    metadata_hash,
    prompt: bool,
    owner: str,
    transactor: Transactor,
    network_file: NetworkFile,
) -> Optional[int]:
    """Registers a new vouching entry and hands its ownership over to owner."""
    try:
        entry_id = register(
            address, amount, metadata_uri, metadata_hash, prompt, transactor, network_file
        )
        if entry_id is None:
            return None

        vouching = fetch_vouching(network_file)
        transactor.transact(vouching.transferOwnership, entry_id, owner)
        log.info(f" ✔ Ownership of entry with ID {entry_id} transferred to {owner}")
        return entry_id
    except Exception as error:
        fail("Could not register and transfer entry", error)
