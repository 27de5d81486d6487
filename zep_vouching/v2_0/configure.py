from zep_vouching import log
from zep_vouching.constants import SEPARATOR
from zep_vouching.params import Deployer
from zep_vouching.utils import fail, same_address


def configure_tpl(deployer: Deployer, jurisdiction, validator, constants) -> None:
    """
    Wires the validator into the jurisdiction and registers the app owner as
    an organization allowed to issue the "can receive" attribute.
    Steps already performed on-chain are skipped.
    """
    log.base(f"\n{SEPARATOR}\n")
    log.base("Configuring TPL...")
    add_validator(deployer, jurisdiction, validator, constants)
    add_attribute_type(deployer, jurisdiction, constants)
    add_validator_approval(deployer, jurisdiction, validator, constants)
    add_organization(deployer, validator, constants)


def add_validator(deployer: Deployer, jurisdiction, validator, constants) -> None:
    validators = jurisdiction.getValidators()
    if any(same_address(address, validator.address) for address in validators):
        log.warn(f" -  Validator {validator.address} already added to jurisdiction")
        return
    try:
        deployer.transact(jurisdiction.addValidator, validator.address, constants.VALIDATOR_NAME)
        log.info(f" ✔ Validator {validator.address} added to jurisdiction")
    except Exception as error:
        fail(f"Could not add validator {validator.address} to jurisdiction", error)


def add_attribute_type(deployer: Deployer, jurisdiction, constants) -> None:
    attribute_id = constants.ZEPTOKEN_ATTRIBUTE_ID
    if attribute_id in jurisdiction.getAttributeTypeIDs():
        log.warn(f" -  Attribute type {attribute_id} already added to jurisdiction")
        return
    try:
        deployer.transact(
            jurisdiction.addAttributeType, attribute_id, constants.ZEPTOKEN_ATTRIBUTE_DESCRIPTION
        )
        log.info(f" ✔ Attribute type {attribute_id} added to jurisdiction")
    except Exception as error:
        fail(f"Could not add attribute type {attribute_id} to jurisdiction", error)


def add_validator_approval(deployer: Deployer, jurisdiction, validator, constants) -> None:
    attribute_id = constants.ZEPTOKEN_ATTRIBUTE_ID
    if jurisdiction.canIssueAttributeType(validator.address, attribute_id):
        log.warn(f" -  Validator already approved to issue attribute {attribute_id}")
        return
    try:
        deployer.transact(jurisdiction.addValidatorApproval, validator.address, attribute_id)
        log.info(f" ✔ Validator approved to issue attribute {attribute_id}")
    except Exception as error:
        fail(f"Could not approve validator to issue attribute {attribute_id}", error)


def add_organization(deployer: Deployer, validator, constants) -> None:
    owner = deployer.owner
    exists = validator.getOrganizationInformation(owner)[0]
    if exists:
        log.warn(f" -  Organization {owner} already added to validator")
        return
    try:
        deployer.transact(
            validator.addOrganization,
            owner,
            constants.ZEPPELIN_ORG_MAX_ADDRESSES,
            constants.ZEPPELIN_ORG_NAME,
        )
        log.info(f" ✔ Organization {owner} added to validator")
    except Exception as error:
        fail(f"Could not add organization {owner} to validator", error)
