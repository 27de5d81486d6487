from decimal import Decimal, InvalidOperation

import click
from eth_utils import to_checksum_address
from hexbytes import HexBytes


class TokenAmount(click.ParamType):
    """Token amount in base units; accepts scientific notation such as 1000e18."""

    name = "token_amount"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            amount = Decimal(value)
        else:
            try:
                amount = Decimal(str(value).strip())
            except InvalidOperation:
                self.fail(f"{value} is not a valid amount", param, ctx)
        if not amount.is_finite() or amount != amount.to_integral_value():
            self.fail(f"{value} is not a whole number of token units", param, ctx)
        if amount < 0:
            self.fail(f"{value} is negative", param, ctx)
        return int(amount)


class ChecksumAddress(click.ParamType):
    name = "checksum_address"

    def convert(self, value, param, ctx):
        try:
            value = to_checksum_address(value=value)
        except ValueError:
            self.fail(f"Invalid ethereum address {value}", param, ctx)
        else:
            return value


class Bytes32(click.ParamType):
    """Hex string of at most 32 bytes."""

    name = "bytes32"

    def convert(self, value, param, ctx):
        try:
            data = HexBytes(value)
        except ValueError:
            self.fail(f"{value} is not a valid hex string", param, ctx)
        if len(data) > 32:
            self.fail(f"{value} is longer than 32 bytes", param, ctx)
        return value
