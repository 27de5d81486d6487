from zep_vouching import log
from zep_vouching.constants import OLD_VOUCHING, VOUCHING, ZEP_TOKEN, output_filepath
from zep_vouching.params import Deployer
from zep_vouching.v2_0.configure import configure_tpl
from zep_vouching.v2_0.create import AppContracts, create_contracts
from zep_vouching.v2_0.save import save


def deploy(deployer: Deployer, constants) -> AppContracts:
    """
    Deploys the 2.0 vouching app: TPL jurisdiction and validator, ZEP token
    and the first generation of the vouching contract.
    """
    deployer.add({VOUCHING: OLD_VOUCHING, ZEP_TOKEN: ZEP_TOKEN})

    log.base(f"Pushing vouching app to network {deployer.network}...")
    # pushing dependencies only deploys the ones not yet on the network
    deployer.push(deploy_dependencies=True)

    contracts = create_contracts(deployer, constants)
    configure_tpl(deployer, contracts.jurisdiction, contracts.validator, constants)
    save(
        output_filepath(deployer.network),
        contracts.app,
        contracts.jurisdiction,
        contracts.zep_token,
        contracts.validator,
        contracts.vouching,
    )
    return contracts
