#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from zep_vouching.constants import V2_1_PARAMS_FILEPATH, V2_1_REQUIRED_CONSTANTS
from zep_vouching.networks import get_network_name
from zep_vouching.options import autosign_option, verify_option
from zep_vouching.params import Deployer
from zep_vouching.utils import load_constants
from zep_vouching.v2_0.fetch import fetch_network_file
from zep_vouching.v2_1.deploy import deploy


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@verify_option
@autosign_option
def cli(network, account, verify, autosign):
    """
    Upgrade a 2.0 vouching app to 2.1: drops the old vouching instance and
    creates a new one, with the deployer account as appeals resolver.
    """
    constants = load_constants(V2_1_PARAMS_FILEPATH, required=V2_1_REQUIRED_CONSTANTS)
    network_file = fetch_network_file(get_network_name())
    deployer = Deployer(
        network_file=network_file, verify=verify, account=account, autosign=autosign
    )
    deploy(deployer, constants)


if __name__ == "__main__":
    cli()
