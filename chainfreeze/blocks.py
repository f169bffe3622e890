"""Rows for block headers."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table
from .evm import Block


def process_block(block: Block, columns: Columns, schema: Table) -> None:
    """Add one row describing a block header."""
    if schema.datatype is not Datatype.BLOCKS:
        raise CollectError("schema not provided")
    columns.add_row(
        block_hash=block.hash,
        parent_hash=block.parent_hash,
        author=block.author,
        state_root=block.state_root,
        transactions_root=block.transactions_root,
        receipts_root=block.receipts_root,
        block_number=block.number,
        gas_used=block.gas_used,
        extra_data=block.extra_data,
        logs_bloom=block.logs_bloom,
        timestamp=block.timestamp,
        total_difficulty=block.total_difficulty,
        base_fee_per_gas=block.base_fee_per_gas,
        size=block.size,
    )