"""Rows for individual opcodes executed in VM traces."""

from __future__ import annotations

from typing import Iterator

from .columns import Columns, Datatype, get_schema
from .evm import VmTrace


def _operation_rows(vm_trace: VmTrace) -> Iterator[dict]:
    """Yield row values for each operation, each followed by its sub-trace."""
    for operation in vm_trace.ops:
        ex = operation.ex
        row = dict(
            pc=operation.pc,
            cost=operation.cost,
            used=None,
            push=None,
            mem_off=None,
            mem_data=None,
            storage_key=None,
            storage_val=None,
            op=operation.op,
        )
        if ex is not None:
            row.update(used=ex.used, push=bytes(ex.push))
            if ex.mem is not None:
                row.update(mem_off=ex.mem.offset, mem_data=bytes(ex.mem.data))
            if ex.store is not None:
                row.update(storage_key=bytes(ex.store.key), storage_val=bytes(ex.store.value))
        yield row
        if operation.sub is not None:
            yield from _operation_rows(operation.sub)


def process_vm_traces(block_number, transaction_hash, block_traces, columns: Columns, schemas: dict) -> None:
    """Add one row per executed opcode across the given block traces."""
    get_schema(schemas, Datatype.VM_TRACES)
    for tx_pos, block_trace in enumerate(block_traces):
        if block_trace.vm_trace is None:
            continue
        for row in _operation_rows(block_trace.vm_trace):
            columns.add_row(
                block_number=block_number,
                transaction_hash=transaction_hash,
                transaction_index=tx_pos,
                **row,
            )