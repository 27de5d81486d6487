from typing import List

import click
from ape.cli import ConnectedProviderCommand, network_option

from zep_vouching import log
from zep_vouching.networks import get_network_name
from zep_vouching.options import (
    address_option,
    amount_option,
    autosign_option,
    hash_option,
    owner_option,
    sender_option,
    uri_option,
    yes_option,
)
from zep_vouching.params import Transactor
from zep_vouching.utils import get_account
from zep_vouching.v2_0.fetch import fetch_network_file
from zep_vouching.v2_1.register import register, register_and_transfer


def missing_arguments(address, amount, uri, metadata_hash, sender) -> List[str]:
    """Returns one message per missing registration argument."""
    messages = list()
    if not address:
        messages.append(
            "Please specify the address of the entry to be registered using --address=<addr>."
        )
    if amount is None:
        messages.append(
            "Please specify the amount of ZEP tokens to be vouched for the new entry "
            "using --amount=<amount>."
        )
    if not uri:
        messages.append(
            "Please specify the metadata URI of the entry to be registered using --uri=<uri>."
        )
    if not metadata_hash:
        messages.append(
            "Please specify the metadata hash of the entry to be registered using --hash=<hash>."
        )
    if not sender:
        messages.append("Please specify a sender address using --from=<addr>.")
    return messages


@click.command(cls=ConnectedProviderCommand, name="register")
@network_option(required=True)
@address_option
@amount_option
@uri_option
@hash_option
@owner_option
@sender_option
@yes_option
@autosign_option
def cli(address, amount, uri, metadata_hash, owner, sender, yes, autosign):
    """Register a new vouching entry, optionally transferring it to a new owner."""
    messages = missing_arguments(address, amount, uri, metadata_hash, sender)
    for message in messages:
        log.error(message)
    if messages:
        raise click.exceptions.Exit(1)

    transactor = Transactor(account=get_account(sender), autosign=autosign)
    network_file = fetch_network_file(get_network_name())
    prompt = not yes
    if owner:
        entry_id = register_and_transfer(
            address, amount, uri, metadata_hash, prompt, owner, transactor, network_file
        )
    else:
        entry_id = register(address, amount, uri, metadata_hash, prompt, transactor, network_file)

    if entry_id is not None:
        click.echo(entry_id)


if __name__ == "__main__":
    cli()
