"""Rows for transfers of the native currency found in traces."""

from __future__ import annotations

from .columns import Columns, Datatype, get_schema
from .evm import (
    ZERO_ADDRESS,
    CallAction,
    CreateAction,
    CreateResult,
    RewardAction,
    SuicideAction,
)


def _endpoints(trace) -> tuple:
    action = trace.action
    if isinstance(action, CallAction):
        return action.from_address, action.to, action.value
    if isinstance(action, CreateAction):
        if isinstance(trace.result, CreateResult):
            to_address = trace.result.address
        else:
            to_address = bytes(32)
        return action.from_address, to_address, action.value
    if isinstance(action, SuicideAction):
        return action.address, action.refund_address, action.balance
    if isinstance(action, RewardAction):
        return ZERO_ADDRESS, action.author, action.value
    raise TypeError(f"unknown trace action: {action!r}")


def process_native_transfers(traces, columns: Columns, schemas: dict) -> None:
    """Add one row per trace, numbered by its position in the list."""
    get_schema(schemas, Datatype.NATIVE_TRANSFERS)
    for transfer_index, trace in enumerate(traces):
        from_address, to_address, value = _endpoints(trace)
        columns.add_row(
            block_number=trace.block_number,
            transaction_index=trace.transaction_position,
            transfer_index=transfer_index,
            transaction_hash=trace.transaction_hash,
            from_address=from_address,
            to_address=to_address,
            value=value,
        )