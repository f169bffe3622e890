"""Rows for balance, code, nonce and storage changes from state-diff traces."""

from __future__ import annotations

from typing import Optional

from .columns import Columns, Datatype, get_schema
from .evm import ZERO_HASH, Diff, DiffKind


def _born_value(diff: Diff):
    return diff.after if diff.after is not None else diff.before


def _died_value(diff: Diff):
    return diff.before if diff.before is not None else diff.after


def _diff_values(diff: Diff, zero) -> Optional[tuple]:
    """Return (from, to) for a diff, or None when the value did not change."""
    if diff.kind is DiffKind.SAME:
        return None
    if diff.kind is DiffKind.BORN:
        return zero, _born_value(diff)
    if diff.kind is DiffKind.DIED:
        return _died_value(diff), zero
    if diff.kind is DiffKind.CHANGED:
        return diff.before, diff.after
    raise TypeError(f"unknown diff kind: {diff.kind!r}")


def _account_diffs(transactions, traces):
    """Yield (transaction_index, transaction_hash, address, account_diff) in address order."""
    for index, (trace, tx) in enumerate(zip(traces, transactions)):
        if trace.state_diff is None:
            continue
        for address, account_diff in sorted(trace.state_diff.items()):
            yield index, tx, bytes(address), account_diff


def _add_row(columns, block_number, index, tx, address, from_value, to_value, **extra):
    columns.add_row(
        block_number=block_number,
        transaction_index=index,
        transaction_hash=tx,
        address=address,
        from_value=from_value,
        to_value=to_value,
        **extra,
    )


def process_balance_diffs(block_number, transactions, traces, columns: Columns, schemas: dict) -> None:
    """Add one row per changed account balance."""
    get_schema(schemas, Datatype.BALANCE_DIFFS)
    for index, tx, address, account_diff in _account_diffs(transactions, traces):
        values = _diff_values(account_diff.balance, 0)
        if values is not None:
            _add_row(columns, block_number, index, tx, address, *values)


def process_code_diffs(block_number, transactions, traces, columns: Columns, schemas: dict) -> None:
    """Add one row per changed contract code, skipping accounts born without code."""
    get_schema(schemas, Datatype.CODE_DIFFS)
    for index, tx, address, account_diff in _account_diffs(transactions, traces):
        diff = account_diff.code
        if diff.kind is DiffKind.BORN and not _born_value(diff):
            continue
        values = _diff_values(diff, b"")
        if values is not None:
            from_value, to_value = values
            _add_row(
                columns, block_number, index, tx, address,
                bytes(from_value or b""), bytes(to_value or b""),
            )


def process_nonce_diffs(block_number, transactions, traces, columns: Columns, schemas: dict) -> None:
    """Add one row per changed account nonce."""
    get_schema(schemas, Datatype.NONCE_DIFFS)
    for index, tx, address, account_diff in _account_diffs(transactions, traces):
        values = _diff_values(account_diff.nonce, 0)
        if values is not None:
            _add_row(columns, block_number, index, tx, address, *values)


def process_storage_diffs(block_number, transactions, traces, columns: Columns, schemas: dict) -> None:
    """Add one row per changed storage slot, slots in ascending order."""
    get_schema(schemas, Datatype.STORAGE_DIFFS)
    for index, tx, address, account_diff in _account_diffs(transactions, traces):
        for slot, diff in sorted(account_diff.storage.items()):
            values = _diff_values(diff, ZERO_HASH)
            if values is None:
                continue
            from_value, to_value = values
            _add_row(
                columns, block_number, index, tx, address,
                bytes(from_value), bytes(to_value), slot=bytes(slot),
            )