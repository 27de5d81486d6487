from zep_vouching import log
from zep_vouching.constants import SEPARATOR

NEW_INSTANCE = "[a new instance to be created]"


def address_or_new(instance) -> str:
    return instance.address if instance else NEW_INSTANCE


def print_jurisdiction(owner: str) -> None:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Creating BasicJurisdiction instance with: ")
    log.base(f" - Owner:              {owner}\n")


def print_zep_token(owner: str, jurisdiction, constants) -> None:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Creating ZEPToken instance with: ")
    log.base(f" - Owner:              {owner}")
    log.base(f" - Name:               {constants.ZEPTOKEN_NAME}")
    log.base(f" - Symbol:             {constants.ZEPTOKEN_SYMBOL}")
    log.base(f" - Decimals:           {constants.ZEPTOKEN_DECIMALS}")
    log.base(f" - Supply:             {constants.ZEPTOKEN_SUPPLY} ZEP")
    log.base(f" - Attribute ID:       {constants.ZEPTOKEN_ATTRIBUTE_ID}")
    log.base(f" - Jurisdiction:       {address_or_new(jurisdiction)}\n")


def print_vouching(zep_token, constants) -> None:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Creating Vouching instance with: ")
    log.base(f" - Minimum stake:      {constants.VOUCHING_MIN_STAKE}")
    log.base(f" - ZEP token:          {address_or_new(zep_token)}\n")


def print_validator(owner: str, jurisdiction, constants) -> None:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Creating OrganizationsValidator instance with: ")
    log.base(f" - Owner:              {owner}")
    log.base(f" - Attribute ID:       {constants.ZEPTOKEN_ATTRIBUTE_ID}")
    log.base(f" - Jurisdiction:       {address_or_new(jurisdiction)}\n")
