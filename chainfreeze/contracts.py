"""Rows for contracts created in traces."""

from __future__ import annotations

from .columns import Columns, Datatype, get_schema
from .evm import (
    ZERO_ADDRESS,
    CallAction,
    CreateAction,
    CreateResult,
    RewardAction,
    SuicideAction,
    keccak256,
)


def _initiator(action) -> bytes:
    if isinstance(action, (CallAction, CreateAction)):
        return action.from_address
    if isinstance(action, SuicideAction):
        return action.refund_address
    if isinstance(action, RewardAction):
        return action.author
    raise TypeError(f"unknown trace action: {action!r}")


def process_contracts(traces, columns: Columns, schemas: dict) -> None:
    """Add one row per successful contract creation."""
    get_schema(schemas, Datatype.CONTRACTS)
    deployer = ZERO_ADDRESS
    create_index = 0
    for trace in traces:
        if not trace.trace_address:
            deployer = _initiator(trace.action)
        action, result = trace.action, trace.result
        if isinstance(action, CreateAction) and isinstance(result, CreateResult):
            columns.add_row(
                block_number=trace.block_number,
                create_index=create_index,
                transaction_hash=trace.transaction_hash,
                contract_address=result.address,
                deployer=deployer,
                factory=action.from_address,
                init_code=action.init,
                code=result.code,
                code_hash=keccak256(action.init),
                init_code_hash=keccak256(result.code),
            )
            create_index += 1