"""Rows for contract bytecode read at a block."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table


def process_code(block_number, address, code, columns: Columns, schema: Table) -> None:
    """Add one row holding the code deployed at an address."""
    if schema.datatype is not Datatype.CODES:
        raise CollectError("schema not provided")
    columns.add_row(
        block_number=block_number,
        address=bytes(address),
        code=bytes(code),
    )