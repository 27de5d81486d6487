#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, network_option

from zep_vouching.constants import V2_1_PARAMS_FILEPATH, V2_1_REQUIRED_CONSTANTS
from zep_vouching.networks import get_network_name
from zep_vouching.types import ChecksumAddress
from zep_vouching.utils import load_constants
from zep_vouching.v2_0.fetch import fetch_network_file
from zep_vouching.v2_1.verify import verify


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--appeals-resolver",
    "-r",
    help="Account expected to resolve vouching appeals (the 2.1 deployer).",
    type=ChecksumAddress(),
    required=True,
)
def cli(network, appeals_resolver):
    """Verify the vouching instance created by the 2.1 deployment."""
    constants = load_constants(V2_1_PARAMS_FILEPATH, required=V2_1_REQUIRED_CONSTANTS)
    network_file = fetch_network_file(get_network_name())
    if not verify(network_file, appeals_resolver, constants):
        raise click.exceptions.Exit(1)


if __name__ == "__main__":
    cli()
