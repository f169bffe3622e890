"""Rows for parity-style call traces."""

from __future__ import annotations

from .columns import Columns, Datatype, get_schema
from .evm import (
    ActionType,
    CallAction,
    CallResult,
    CallType,
    CreateAction,
    CreateResult,
    RewardAction,
    RewardType,
    SuicideAction,
    Trace,
)


def reward_type_to_string(reward_type: RewardType) -> str:
    return reward_type.value


def action_type_to_string(action_type: ActionType) -> str:
    return action_type.value


def action_call_type_to_string(call_type: CallType) -> str:
    return call_type.value


def filter_failed_traces(traces) -> list:
    """Drop failed traces together with every trace nested beneath them."""
    error_address = None
    filtered = []
    for trace in traces:
        address = tuple(trace.trace_address)
        if not address:
            error_address = None
        if error_address is not None:
            if address[: len(error_address)] == error_address:
                continue
            error_address = None
        if trace.error is not None:
            error_address = address
        else:
            filtered.append(trace)
    return filtered


def action_fields(action) -> dict:
    """Column values describing a trace action."""
    fields = dict(
        action_from=None,
        action_to=None,
        action_value=None,
        action_gas=None,
        action_input=None,
        action_call_type=None,
        action_init=None,
        action_reward_type=None,
    )
    if isinstance(action, CallAction):
        fields.update(
            action_from=action.from_address,
            action_to=action.to,
            action_value=str(action.value),
            action_gas=action.gas,
            action_input=action.input,
            action_call_type=action_call_type_to_string(action.call_type),
        )
    elif isinstance(action, CreateAction):
        fields.update(
            action_from=action.from_address,
            action_value=str(action.value),
            action_gas=action.gas,
            action_init=action.init,
        )
    elif isinstance(action, SuicideAction):
        fields.update(
            action_from=action.address,
            action_to=action.refund_address,
            action_value=str(action.balance),
        )
    elif isinstance(action, RewardAction):
        fields.update(
            action_from=action.author,
            action_value=str(action.value),
            action_reward_type=reward_type_to_string(action.reward_type),
        )
    else:
        raise TypeError(f"unknown trace action: {action!r}")
    return fields


def result_fields(result) -> dict:
    """Column values describing a trace result."""
    fields = dict(
        result_gas_used=None,
        result_output=None,
        result_code=None,
        result_address=None,
    )
    if isinstance(result, CallResult):
        fields.update(result_gas_used=result.gas_used, result_output=result.output)
    elif isinstance(result, CreateResult):
        fields.update(
            result_gas_used=result.gas_used,
            result_code=result.code,
            result_address=result.address,
        )
    return fields


def format_trace_address(trace_address) -> str:
    return "_".join(str(n) for n in trace_address)


def process_traces(traces, columns: Columns, schemas: dict) -> None:
    """Add one row per trace."""
    get_schema(schemas, Datatype.TRACES)
    for trace in traces:
        trace: Trace
        columns.add_row(
            **action_fields(trace.action),
            **result_fields(trace.result),
            action_type=action_type_to_string(trace.action_type()),
            trace_address=format_trace_address(trace.trace_address),
            subtraces=trace.subtraces,
            transaction_index=trace.transaction_position,
            transaction_hash=trace.transaction_hash,
            block_number=trace.block_number,
            block_hash=trace.block_hash,
            error=trace.error,
        )