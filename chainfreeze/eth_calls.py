"""Rows for results of contract calls made against a block."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table
from .evm import keccak256


def process_eth_call(
    block_number, contract_address, call_data, output_data, columns: Columns, schema: Table
) -> None:
    """Add one row holding a call, its output and the hashes of both."""
    if schema.datatype is not Datatype.ETH_CALLS:
        raise CollectError("schema not provided")
    call_data = bytes(call_data)
    output_data = bytes(output_data)
    columns.add_row(
        block_number=block_number,
        contract_address=bytes(contract_address),
        call_data=call_data,
        call_data_hash=keccak256(call_data),
        output_data=output_data,
        output_data_hash=keccak256(output_data),
    )