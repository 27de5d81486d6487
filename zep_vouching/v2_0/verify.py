from zep_vouching import log
from zep_vouching.constants import (
    BASIC_JURISDICTION,
    LOCAL_PACKAGE_NAME,
    ORGANIZATIONS_VALIDATOR,
    SEPARATOR,
    TPL_PACKAGE_NAME,
    VOUCHING,
    ZEP_TOKEN,
)
from zep_vouching.network_file import NetworkFile, contract_key
from zep_vouching.units import zep
from zep_vouching.utils import oz_dependency, same_address, validate_address
from zep_vouching.v2_0.fetch import (
    fetch_jurisdiction,
    fetch_validator,
    fetch_vouching,
    fetch_zep_token,
)

APP_CONTRACTS = [
    (LOCAL_PACKAGE_NAME, ZEP_TOKEN),
    (LOCAL_PACKAGE_NAME, VOUCHING),
    (TPL_PACKAGE_NAME, BASIC_JURISDICTION),
    (TPL_PACKAGE_NAME, ORGANIZATIONS_VALIDATOR),
]


def _check(matches: bool, success: str, failure: str) -> bool:
    if matches:
        log.info(f" ✔ {success}")
    else:
        log.error(f" ✘ {failure}")
    return bool(matches)


def _proxy_admin_owner(admin_address: str) -> str:
    proxy_admin = oz_dependency().ProxyAdmin.at(admin_address)
    return proxy_admin.owner()


def verify(network_file: NetworkFile, owner: str, constants) -> bool:
    log.info(f"Verifying vouching app on network {network_file.network}...")
    results = [
        verify_app_setup(network_file, owner),
        verify_jurisdiction(network_file, owner),
        verify_zep_token(network_file, owner, constants),
        verify_vouching(network_file, owner, constants),
        verify_organizations_validator(network_file, owner, constants),
        verify_tpl_configuration(network_file, owner, constants),
    ]
    if all(results):
        log.info("\n\nVouching app was deployed and configured successfully!")
    else:
        log.error("\n\nThere was an error while verifying the vouching app.")
    return all(results)


def verify_app_setup(network_file: NetworkFile, owner: str) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying app setup...")

    results = [
        _check(
            same_address(network_file.app_owner, owner),
            "App is administered by the requested owner",
            f"App owner {network_file.app_owner} does not match requested owner {owner}",
        )
    ]

    for package_name, alias in APP_CONTRACTS:
        key = contract_key(package_name, alias)
        entry = network_file.contract(package_name, alias)
        results.append(
            _check(
                entry is not None and validate_address(entry.address),
                f"{key} implementation was pushed",
                f"Missing valid implementation of {key}",
            )
        )

        for proxy in network_file.proxies_of(package_name, alias):
            if proxy.admin is None:
                continue
            admin_owner = _proxy_admin_owner(proxy.admin)
            results.append(
                _check(
                    same_address(admin_owner, owner),
                    f"{key} proxy {proxy.address} is administered by the app owner",
                    f"{key} proxy {proxy.address} is administered by {admin_owner}, "
                    f"it was expected {owner}",
                )
            )

    return all(results)


def verify_jurisdiction(network_file: NetworkFile, owner: str) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying BasicJurisdiction instance...")

    jurisdiction = fetch_jurisdiction(network_file)
    if not jurisdiction:
        log.error(" ✘ Missing valid instance of BasicJurisdiction")
        return False

    jurisdiction_owner = jurisdiction.owner()
    return _check(
        same_address(jurisdiction_owner, owner),
        "BasicJurisdiction owner matches requested owner",
        f"BasicJurisdiction owner {jurisdiction_owner} does not match requested owner {owner}",
    )


def verify_zep_token(network_file: NetworkFile, owner: str, constants) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying ZEPToken instance...")

    zep_token = fetch_zep_token(network_file)
    if not zep_token:
        log.error(" ✘ Missing valid instance of ZEPToken")
        return False

    jurisdiction = fetch_jurisdiction(network_file)
    name = zep_token.name()
    symbol = zep_token.symbol()
    decimals = zep_token.decimals()
    total_supply = zep_token.totalSupply()
    registry = zep_token.getRegistry()
    attribute_id = zep_token.getValidAttributeTypeID()
    expected_supply = zep(constants.ZEPTOKEN_SUPPLY)

    results = [
        _check(
            name == constants.ZEPTOKEN_NAME,
            "ZEPToken name matches requested value",
            f"ZEPToken name {name} does not match requested value, "
            f"it was expected {constants.ZEPTOKEN_NAME}",
        ),
        _check(
            symbol == constants.ZEPTOKEN_SYMBOL,
            "ZEPToken symbol matches requested value",
            f"ZEPToken symbol {symbol} does not match requested value, "
            f"it was expected {constants.ZEPTOKEN_SYMBOL}",
        ),
        _check(
            decimals == constants.ZEPTOKEN_DECIMALS,
            "ZEPToken decimals matches requested value",
            f"ZEPToken decimals {decimals} does not match requested value, "
            f"it was expected {constants.ZEPTOKEN_DECIMALS}",
        ),
        _check(
            total_supply == expected_supply,
            "ZEPToken total supply matches requested value",
            f"ZEPToken total supply {total_supply} does not match requested value, "
            f"it was expected {expected_supply}",
        ),
        _check(
            jurisdiction is not None and same_address(registry, jurisdiction.address),
            "ZEPToken jurisdiction matches BasicJurisdiction deployed instance",
            f"ZEPToken jurisdiction {registry} does not match BasicJurisdiction deployed instance",
        ),
        _check(
            attribute_id == constants.ZEPTOKEN_ATTRIBUTE_ID,
            "ZEPToken attribute ID matches requested value",
            f"ZEPToken attribute ID {attribute_id} does not match requested value, "
            f"it was expected {constants.ZEPTOKEN_ATTRIBUTE_ID}",
        ),
    ]
    return all(results)


def verify_vouching(network_file: NetworkFile, owner: str, constants) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying Vouching instance...")

    vouching = fetch_vouching(network_file)
    if not vouching:
        log.error(" ✘ Missing valid instance of Vouching")
        return False

    zep_token = fetch_zep_token(network_file)
    token = vouching.token()
    minimum_stake = vouching.minimumStake()

    results = [
        _check(
            zep_token is not None and same_address(token, zep_token.address),
            "Vouching token matches ZEP Token deployed instance",
            f"Vouching token {token} does not match ZEP Token deployed instance",
        ),
        _check(
            minimum_stake == constants.VOUCHING_MIN_STAKE,
            "Vouching minimum stake matches requested value",
            f"Vouching minimum stake {minimum_stake} does not match requested value, "
            f"it was expected {constants.VOUCHING_MIN_STAKE}",
        ),
    ]
    return all(results)


def verify_organizations_validator(network_file: NetworkFile, owner: str, constants) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying OrganizationsValidator instance...")

    validator = fetch_validator(network_file)
    if not validator:
        log.error(" ✘ Missing valid instance of OrganizationsValidator")
        return False

    jurisdiction = fetch_jurisdiction(network_file)
    validator_owner = validator.owner()
    validator_jurisdiction = validator.getJurisdiction()
    attribute_id = validator.getValidAttributeID()

    results = [
        _check(
            same_address(validator_owner, owner),
            "OrganizationsValidator owner matches requested owner",
            f"OrganizationsValidator owner {validator_owner} does not match "
            f"requested owner {owner}",
        ),
        _check(
            jurisdiction is not None and same_address(validator_jurisdiction, jurisdiction.address),
            "OrganizationsValidator jurisdiction matches BasicJurisdiction deployed instance",
            f"OrganizationsValidator jurisdiction {validator_jurisdiction} does not match "
            "BasicJurisdiction deployed instance",
        ),
        _check(
            attribute_id == constants.ZEPTOKEN_ATTRIBUTE_ID,
            "OrganizationsValidator attribute ID matches requested value",
            f"OrganizationsValidator attribute ID {attribute_id} does not match requested value, "
            f"it was expected {constants.ZEPTOKEN_ATTRIBUTE_ID}",
        ),
    ]
    return all(results)


def verify_tpl_configuration(network_file: NetworkFile, owner: str, constants) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying TPL configuration...")

    jurisdiction = fetch_jurisdiction(network_file)
    validator = fetch_validator(network_file)
    if not jurisdiction or not validator:
        log.error(" ✘ Missing valid instances of BasicJurisdiction and OrganizationsValidator")
        return False

    attribute_id = constants.ZEPTOKEN_ATTRIBUTE_ID
    validators = jurisdiction.getValidators()
    attribute_ids = jurisdiction.getAttributeTypeIDs()
    can_issue = jurisdiction.canIssueAttributeType(validator.address, attribute_id)
    organization = validator.getOrganizationInformation(owner)
    organization_exists, maximum_accounts = organization[0], organization[1]

    results = [
        _check(
            any(same_address(address, validator.address) for address in validators),
            "Validator is registered in the jurisdiction",
            f"Validator {validator.address} is not registered in the jurisdiction",
        ),
        _check(
            attribute_id in attribute_ids,
            f"Attribute type {attribute_id} is registered in the jurisdiction",
            f"Attribute type {attribute_id} is not registered in the jurisdiction",
        ),
        _check(
            can_issue,
            f"Validator is approved to issue attribute {attribute_id}",
            f"Validator is not approved to issue attribute {attribute_id}",
        ),
        _check(
            organization_exists and maximum_accounts == constants.ZEPPELIN_ORG_MAX_ADDRESSES,
            f"Organization {owner} can issue up to "
            f"{constants.ZEPPELIN_ORG_MAX_ADDRESSES} attributes",
            f"Organization {owner} is not registered in the validator as requested",
        ),
    ]
    return all(results)
