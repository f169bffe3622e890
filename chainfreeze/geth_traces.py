"""Rows for call frames from geth call-tracer debug traces."""

from __future__ import annotations

from typing import Iterator, Optional

from .columns import CollectError, Columns, Datatype
from .evm import CallFrame


def _to_address(value) -> Optional[bytes]:
    if value is None:
        return None
    if isinstance(value, str):
        raise CollectError("block name string not allowed")
    return bytes(value)


def _frame_rows(frame: CallFrame, trace_address: tuple) -> Iterator[dict]:
    """Yield row values for a frame, then for its sub-calls depth first."""
    yield dict(
        typ=frame.typ,
        from_address=bytes(frame.from_address),
        to_address=_to_address(frame.to),
        value=frame.value,
        gas=frame.gas,
        gas_used=frame.gas_used,
        input=bytes(frame.input),
        output=bytes(frame.output) if frame.output is not None else None,
        error=frame.error,
        trace_address=" ".join(str(n) for n in trace_address),
    )
    for position, subcall in enumerate(frame.calls or ()):
        yield from _frame_rows(subcall, trace_address + (position,))


def process_geth_traces(block_number, transactions, frames, columns: Columns, schemas: dict) -> None:
    """Add one row per call frame, each transaction's frames numbered by position."""
    if schemas.get(Datatype.GETH_TRACES) is None:
        raise CollectError("schema for geth_traces missing")
    for tx_index, (tx, frame) in enumerate(zip(transactions, frames)):
        for row in _frame_rows(frame, ()):
            columns.add_row(
                **row,
                block_number=block_number,
                transaction_hash=tx,
                transaction_index=tx_index,
            )