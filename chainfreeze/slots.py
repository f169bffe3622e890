"""Rows for contract storage slot reads."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table


def process_slot(block_number, address, slot, value, columns: Columns, schema: Table) -> None:
    """Add one row holding a storage value read at a block."""
    if schema.datatype is not Datatype.SLOTS:
        raise CollectError("schema not provided")
    columns.add_row(
        block_number=block_number,
        address=bytes(address),
        slot=bytes(slot),
        value=bytes(value),
    )