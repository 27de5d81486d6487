import click

from zep_vouching.types import Bytes32, ChecksumAddress, TokenAmount

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish contract sources to the block explorer.",
    default=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions without asking for confirmation.",
    is_flag=True,
    default=False,
)

address_option = click.option(
    "--address",
    help="Address of the entry to be registered.",
    type=ChecksumAddress(),
    required=False,
)

amount_option = click.option(
    "--amount",
    help="Amount of ZEP tokens (base units, e.g. 1000e18) to be vouched for the entry.",
    type=TokenAmount(),
    required=False,
)

uri_option = click.option(
    "--uri",
    help="Metadata URI of the entry to be registered.",
    type=str,
    required=False,
)

hash_option = click.option(
    "--hash",
    "metadata_hash",
    help="Metadata hash of the entry to be registered.",
    type=Bytes32(),
    required=False,
)

owner_option = click.option(
    "--owner",
    help="Address the ownership of the new entry is transferred to.",
    type=ChecksumAddress(),
    required=False,
)

sender_option = click.option(
    "--from",
    "sender",
    help="Address of the account sending the transactions.",
    type=ChecksumAddress(),
    required=False,
)

yes_option = click.option(
    "--yes",
    "-y",
    help="Skip the registration confirmation prompt.",
    is_flag=True,
    default=False,
)
