from ape.contracts import ContractInstance

from zep_vouching import log
from zep_vouching.constants import (
    INITIALIZE_METHOD,
    LOCAL_PACKAGE_NAME,
    SEPARATOR,
    VOUCHING,
    output_filepath,
)
from zep_vouching.params import Deployer
from zep_vouching.utils import fail
from zep_vouching.v2_0.display import address_or_new
from zep_vouching.v2_0.fetch import (
    fetch_jurisdiction,
    fetch_validator,
    fetch_vouching,
    fetch_zep_token,
)
from zep_vouching.v2_0.save import save
from zep_vouching.v2_1.verify import verify_vouching_has_tpl_attribute


def deploy(deployer: Deployer, constants) -> ContractInstance:
    """
    Replaces the 2.0 vouching instance with a new one that supports appeals,
    keeping the ZEP token and TPL contracts already deployed.
    """
    deployer.add({VOUCHING: VOUCHING})
    log.base(f"Pushing new vouching contract to network {deployer.network}...")
    # forced, since the new contract overrides the storage layout of the old one
    deployer.push(force=True)

    appeals_resolver = deployer.owner
    network_file = deployer.network_file
    log.base(f"\n\n{SEPARATOR}\n\n")

    old_vouching = fetch_vouching(network_file)
    if old_vouching:
        log.warn(f"\n\nDropping old Vouching instance {old_vouching.address}...")
        network_file.remove_proxy(LOCAL_PACKAGE_NAME, VOUCHING, old_vouching.address)
        network_file.write()

    zep_token = fetch_zep_token(network_file)
    if zep_token:
        log.info(f" ✔ Using ZEPToken instance at {zep_token.address}")
    else:
        fail(f"Could not find a ZEPToken instance in {network_file.file_name}")

    validator = fetch_validator(network_file)
    if validator:
        log.info(f" ✔ Using Validator instance at {validator.address}")
    else:
        fail(f"Could not find a Validator instance in {network_file.file_name}")

    print_vouching(appeals_resolver, constants, zep_token)
    vouching = create_vouching(deployer, zep_token, appeals_resolver, constants)
    issue_transfer_attribute_to_vouching(deployer, zep_token, validator, vouching)
    _update_summary(deployer, zep_token, validator, vouching)
    return vouching


def create_vouching(
    deployer: Deployer, zep_token, appeals_resolver: str, constants
) -> ContractInstance:
    init_args = [
        zep_token.address,
        constants.VOUCHING_MIN_STAKE,
        constants.VOUCHING_APPEAL_FEE,
        appeals_resolver,
    ]
    try:
        vouching = deployer.create(
            package_name=LOCAL_PACKAGE_NAME,
            contract_alias=VOUCHING,
            init_method=INITIALIZE_METHOD,
            init_args=init_args,
        )
    except Exception:
        description = deployer.describe_call(
            LOCAL_PACKAGE_NAME, VOUCHING, INITIALIZE_METHOD, init_args
        )
        log.error(f" ✘ Could not create Vouching instance by calling {description}")
        raise
    log.info(f" ✔ Vouching created at {vouching.address}")
    return vouching


def issue_transfer_attribute_to_vouching(deployer: Deployer, zep_token, validator, vouching) -> None:
    log.base(f"\nIssuing TPL attribute to Vouching instance {vouching.address}...")
    try:
        if verify_vouching_has_tpl_attribute(zep_token, vouching, False):
            log.warn(" ✔ Vouching instance already has TPL attribute")
        else:
            receipt = deployer.transact(validator.issueAttribute, vouching.address)
            log.info(f" ✔ TPL attribute issued to vouching instance: {receipt.txn_hash}")
    except Exception as error:
        fail("Could not issue TPL attribute to vouching instance", error)


def _update_summary(deployer: Deployer, zep_token, validator, vouching) -> None:
    jurisdiction = fetch_jurisdiction(deployer.network_file)
    if not jurisdiction:
        log.warn(" -  No BasicJurisdiction instance found, deployment summary not updated")
        return
    save(
        output_filepath(deployer.network),
        deployer.network_file.app_owner,
        jurisdiction,
        zep_token,
        validator,
        vouching,
    )


def print_vouching(appeals_resolver: str, constants, zep_token=None) -> None:
    log.base(f"\n{SEPARATOR}\n\n")
    log.base("Creating new Vouching instance with: ")
    log.base(f" - Appeals resolver:  {appeals_resolver}")
    log.base(f" - Appeal fee:        {constants.VOUCHING_APPEAL_FEE}")
    log.base(f" - Minimum stake:     {constants.VOUCHING_MIN_STAKE}")
    log.base(f" - ZEP token:         {address_or_new(zep_token)}\n")
