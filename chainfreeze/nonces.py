"""Rows for account nonces read at a block."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table


def process_nonce(block_number, address, nonce, columns: Columns, schema: Table) -> None:
    """Add one row holding an account's transaction count at a block."""
    if schema.datatype is not Datatype.NONCES:
        raise CollectError("schema not provided")
    columns.add_row(
        block_number=block_number,
        address=bytes(address),
        nonce=int(nonce),
    )