"""Rows for account balances read at a block."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table


def process_balance(block_number, address, balance, columns: Columns, schema: Table) -> None:
    """Add one row holding an account's balance at a block."""
    if schema.datatype is not Datatype.BALANCES:
        raise CollectError("schema not provided")
    columns.add_row(
        block_number=block_number,
        address=bytes(address),
        balance=int(balance),
    )