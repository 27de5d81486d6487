#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, network_option

from zep_vouching.constants import output_filepath
from zep_vouching.networks import get_network_name
from zep_vouching.v2_0.save import load_summary


@click.command(cls=ConnectedProviderCommand, name="show-summary")
@network_option(required=True)
def cli(network):
    """Show the addresses of the vouching app deployed to a network."""
    summary = load_summary(output_filepath(get_network_name()))
    click.secho(f"\nVouching app on {get_network_name()}", fg="green")
    for index, (name, address) in enumerate(summary.items(), start=1):
        click.secho(f"    {index}. {name} {address}", fg="cyan")


if __name__ == "__main__":
    cli()
