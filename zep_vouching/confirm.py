import sys


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        sys.exit(-1)


def _confirm_registration(address: str, amount: int, metadata_uri: str, metadata_hash) -> None:
    """Asks the user to confirm a vouching entry until a y/n answer is given."""
    question = (
        "You're about to register the following entry:\n"
        f" - Address: {address}\n"
        f" - Amount: ZEP {amount}\n"
        f" - Metadata URI: {metadata_uri}\n"
        f" - Metadata hash: {metadata_hash}\n\n"
        "Do you want to proceed? [y/n] "
    )
    answer = None
    while answer not in ("y", "Y", "n", "N"):
        answer = input(question)

    if answer in ("n", "N"):
        sys.exit(0)
