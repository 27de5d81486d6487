from typing import NamedTuple, Optional

from ape.contracts import ContractInstance

from zep_vouching import log
from zep_vouching.constants import (
    BASIC_JURISDICTION,
    INITIALIZE_METHOD,
    LOCAL_PACKAGE_NAME,
    ORGANIZATIONS_VALIDATOR,
    TPL_PACKAGE_NAME,
    VOUCHING,
    ZEP_TOKEN,
)
from zep_vouching.params import Deployer
from zep_vouching.v2_0.display import (
    print_jurisdiction,
    print_validator,
    print_vouching,
    print_zep_token,
)
from zep_vouching.v2_0.fetch import (
    fetch_jurisdiction,
    fetch_validator,
    fetch_vouching,
    fetch_zep_token,
)


class AppContracts(NamedTuple):
    app: Optional[str]
    jurisdiction: ContractInstance
    validator: ContractInstance
    zep_token: ContractInstance
    vouching: ContractInstance


def create_contracts(deployer: Deployer, constants) -> AppContracts:
    owner = deployer.owner

    jurisdiction = create_basic_jurisdiction(deployer, owner)
    zep_token = create_zep_token(deployer, owner, jurisdiction, constants)
    vouching = create_vouching(deployer, zep_token, constants)
    validator = create_organizations_validator(deployer, owner, jurisdiction, constants)
    app = deployer.network_file.app_owner
    return AppContracts(
        app=app,
        jurisdiction=jurisdiction,
        validator=validator,
        zep_token=zep_token,
        vouching=vouching,
    )


def _create(deployer: Deployer, package_name: str, contract_alias: str, init_args: list, what: str):
    try:
        return deployer.create(
            package_name=package_name,
            contract_alias=contract_alias,
            init_method=INITIALIZE_METHOD,
            init_args=init_args,
        )
    except Exception:
        description = deployer.describe_call(
            package_name, contract_alias, INITIALIZE_METHOD, init_args
        )
        log.error(f" ✘ Could not create {what} by calling {description}")
        raise


def create_basic_jurisdiction(deployer: Deployer, owner: str) -> ContractInstance:
    print_jurisdiction(owner)
    jurisdiction = fetch_jurisdiction(deployer.network_file)
    if jurisdiction:
        log.warn(f" -  Reusing BasicJurisdiction instance at {jurisdiction.address}")
        return jurisdiction

    init_args = [owner]
    jurisdiction = _create(
        deployer, TPL_PACKAGE_NAME, BASIC_JURISDICTION, init_args, "basic jurisdiction"
    )
    log.info(f" ✔ BasicJurisdiction created at {jurisdiction.address}")
    return jurisdiction


def create_zep_token(deployer: Deployer, owner: str, jurisdiction, constants) -> ContractInstance:
    print_zep_token(owner, jurisdiction, constants)
    zep_token = fetch_zep_token(deployer.network_file)
    if zep_token:
        log.warn(f" -  Reusing ZEPToken instance at {zep_token.address}")
        return zep_token

    init_args = [owner, jurisdiction.address, constants.ZEPTOKEN_ATTRIBUTE_ID]
    zep_token = _create(deployer, LOCAL_PACKAGE_NAME, ZEP_TOKEN, init_args, "ZEP token")
    log.info(f" ✔ ZEPToken created at {zep_token.address}")
    return zep_token


def create_organizations_validator(
    deployer: Deployer, owner: str, jurisdiction, constants
) -> ContractInstance:
    print_validator(owner, jurisdiction, constants)
    validator = fetch_validator(deployer.network_file)
    if validator:
        log.warn(f" -  Reusing Organizations validator instance at {validator.address}")
        return validator

    init_args = [jurisdiction.address, constants.ZEPTOKEN_ATTRIBUTE_ID, owner]
    validator = _create(
        deployer, TPL_PACKAGE_NAME, ORGANIZATIONS_VALIDATOR, init_args, "Organizations validator"
    )
    log.info(f" ✔ Organizations validator created at {validator.address}")
    return validator


def create_vouching(deployer: Deployer, zep_token, constants) -> ContractInstance:
    print_vouching(zep_token, constants)
    vouching = fetch_vouching(deployer.network_file)
    if vouching:
        log.warn(f" -  Reusing Vouching instance at {vouching.address}")
        return vouching

    init_args = [constants.VOUCHING_MIN_STAKE, zep_token.address]
    vouching = _create(deployer, LOCAL_PACKAGE_NAME, VOUCHING, init_args, "vouching contract")
    log.info(f" ✔ Vouching created at {vouching.address}")
    return vouching
