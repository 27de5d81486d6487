from pathlib import Path

import zep_vouching

#
# Filesystem
#

PACKAGE_DIR = Path(zep_vouching.__file__).parent
PARAMS_DIR = PACKAGE_DIR / "params"

V2_0_PARAMS_FILEPATH = PARAMS_DIR / "2.0.yml"
V2_1_PARAMS_FILEPATH = PARAMS_DIR / "2.1.yml"

V2_0_REQUIRED_CONSTANTS = (
    "ZEPTOKEN_NAME",
    "ZEPTOKEN_SYMBOL",
    "ZEPTOKEN_DECIMALS",
    "ZEPTOKEN_SUPPLY",
    "ZEPTOKEN_ATTRIBUTE_ID",
    "ZEPTOKEN_ATTRIBUTE_DESCRIPTION",
    "VOUCHING_MIN_STAKE",
    "VALIDATOR_NAME",
    "ZEPPELIN_ORG_NAME",
    "ZEPPELIN_ORG_MAX_ADDRESSES",
)
V2_1_REQUIRED_CONSTANTS = ("VOUCHING_MIN_STAKE", "VOUCHING_APPEAL_FEE")

STANDARD_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


def network_filepath(network: str) -> Path:
    """Returns the bookkeeping file of proxies and implementations for a network."""
    return Path.cwd() / f"zep.{network}.json"


def output_filepath(network: str) -> Path:
    """Returns the deployment summary file for a network."""
    return Path.cwd() / f"zep.summary.{network}.json"


#
# Networks
#

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]

#
# Packages
#

LOCAL_PACKAGE_NAME = "zep-vouching"
TPL_PACKAGE_NAME = "tpl-contracts-eth"

OZ_DEPENDENCY_NAME = "openzeppelin"
OZ_DEPENDENCY_VERSION = "5.0.0"

# package name -> contracts whose logic is pushed along with the app
DEPENDENCY_CONTRACTS = {
    TPL_PACKAGE_NAME: ["BasicJurisdiction", "OrganizationsValidator"],
}

#
# Contracts
#

BASIC_JURISDICTION = "BasicJurisdiction"
ORGANIZATIONS_VALIDATOR = "OrganizationsValidator"
ZEP_TOKEN = "ZEPToken"
VOUCHING = "Vouching"
OLD_VOUCHING = "OldVouching"

INITIALIZE_METHOD = "initialize"

# EIP1967 Admin slot - https://eips.ethereum.org/EIPS/eip-1967#admin-address
EIP1967_ADMIN_SLOT = 0xB53127684A568B3173AE13B9F8A6016E243E63B6E8EE1178D6A717850B5D6103

#
# Console
#

SEPARATOR = "--------------------------------------------------------------------"
