#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, network_option

from zep_vouching.constants import V2_0_PARAMS_FILEPATH, V2_0_REQUIRED_CONSTANTS
from zep_vouching.networks import get_network_name
from zep_vouching.types import ChecksumAddress
from zep_vouching.utils import load_constants
from zep_vouching.v2_0.fetch import fetch_network_file
from zep_vouching.v2_0.verify import verify


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--owner",
    "-o",
    help="Account that deployed and owns the vouching app.",
    type=ChecksumAddress(),
    required=True,
)
def cli(network, owner):
    """Verify the deployment and TPL configuration of a 2.0 vouching app."""
    constants = load_constants(V2_0_PARAMS_FILEPATH, required=V2_0_REQUIRED_CONSTANTS)
    network_file = fetch_network_file(get_network_name())
    if not verify(network_file, owner, constants):
        raise click.exceptions.Exit(1)


if __name__ == "__main__":
    cli()
