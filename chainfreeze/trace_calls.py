"""Rows for traces of simulated calls made against a block."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table
from .traces import (
    action_fields,
    action_type_to_string,
    format_trace_address,
    result_fields,
)


def process_trace_calls(
    block_number, contract, call_data, traces, columns: Columns, schema: Table
) -> None:
    """Add one row per trace of a simulated call, numbered by position."""
    if schema.datatype is not Datatype.TRACE_CALLS:
        raise CollectError("schema not provided")
    contract = bytes(contract)
    call_data = bytes(call_data)
    for transaction_index, trace in enumerate(traces):
        columns.add_row(
            **action_fields(trace.action),
            **result_fields(trace.result),
            action_type=action_type_to_string(trace.action_type()),
            trace_address=format_trace_address(trace.trace_address),
            subtraces=trace.subtraces,
            transaction_index=transaction_index,
            block_number=block_number,
            error=trace.error,
            tx_to_address=contract,
            tx_call_data=call_data,
        )