from web3 import Web3

PCT_BASE = Web3.to_wei(1, "ether")  # 100 %


def zep(amount) -> int:
    """Whole ZEP to token base units."""
    return Web3.to_wei(amount, "ether")


def pct(amount) -> int:
    """Percentage expressed over PCT_BASE, so that pct(100) == PCT_BASE."""
    return Web3.to_wei(amount, "ether") // 100
