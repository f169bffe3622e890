"""Rows for balance, code, nonce and storage changes from prestate diff traces."""

from __future__ import annotations

import string
from typing import Optional

from .columns import CollectError, Columns, Datatype
from .evm import ZERO_HASH, AccountState

_BLANK_ACCOUNT = AccountState()
_HEX_DIGITS = frozenset(string.hexdigits)


def decode_hex(text: str) -> bytes:
    """Decode a ``0x``-prefixed hex string into bytes."""
    if not text.startswith("0x"):
        raise ValueError(f"hex string lacks 0x prefix: {text!r}")
    body = text[2:]
    if len(body) % 2 or not set(body) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex string: {text!r}")
    return bytes.fromhex(body)


def _decode_code(text: Optional[str], side: str) -> bytes:
    if not text:
        return b""
    try:
        return decode_hex(text)
    except ValueError:
        raise CollectError(f"could not decode {side} code contents") from None


def _add_balance(columns, index, pre, post) -> None:
    columns.add_row(
        **index,
        from_value=pre.balance if pre.balance is not None else 0,
        to_value=post.balance if post.balance is not None else 0,
    )


def _add_code(columns, index, pre, post) -> None:
    from_value = _decode_code(pre.code, "from")
    to_value = _decode_code(post.code, "to")
    columns.add_row(**index, from_value=from_value, to_value=to_value)


def _add_nonce(columns, index, pre, post) -> None:
    columns.add_row(
        **index,
        from_value=pre.nonce if pre.nonce is not None else 0,
        to_value=post.nonce if post.nonce is not None else 0,
    )


def _add_storage(columns, index, pre, post) -> None:
    before = pre.storage or {}
    after = post.storage or {}
    for slot in sorted(set(before) | set(after)):
        columns.add_row(
            **index,
            slot=bytes(slot),
            from_value=bytes(before.get(slot, ZERO_HASH)),
            to_value=bytes(after.get(slot, ZERO_HASH)),
        )


def process_geth_diffs(
    block_number,
    transactions,
    traces,
    schemas: dict,
    balances: Optional[Columns] = None,
    codes: Optional[Columns] = None,
    nonces: Optional[Columns] = None,
    storages: Optional[Columns] = None,
) -> None:
    """Add rows for every account touched in each transaction's pre/post state.

    A table is filled only when its columns are given and its schema is present.
    """
    targets = [
        (columns, _add)
        for columns, datatype, _add in (
            (balances, Datatype.GETH_BALANCE_DIFFS, _add_balance),
            (codes, Datatype.GETH_CODE_DIFFS, _add_code),
            (nonces, Datatype.GETH_NONCE_DIFFS, _add_nonce),
            (storages, Datatype.GETH_STORAGE_DIFFS, _add_storage),
        )
        if columns is not None and schemas.get(datatype) is not None
    ]
    for tx_index, (trace, tx) in enumerate(zip(traces, transactions)):
        for address in sorted(set(trace.pre) | set(trace.post)):
            pre = trace.pre.get(address, _BLANK_ACCOUNT)
            post = trace.post.get(address, _BLANK_ACCOUNT)
            index = dict(
                block_number=block_number,
                transaction_index=tx_index,
                transaction_hash=tx,
                address=bytes(address),
            )
            for columns, add in targets:
                add(columns, index, pre, post)


_KINDS = (
    Datatype.GETH_BALANCE_DIFFS,
    Datatype.GETH_CODE_DIFFS,
    Datatype.GETH_NONCE_DIFFS,
    Datatype.GETH_STORAGE_DIFFS,
)


class GethStateDiffs:
    """Balance, code, nonce and storage diffs, one table per schema given."""

    def __init__(self, schemas: dict) -> None:
        self.tables = {
            datatype: Columns(schemas[datatype]) for datatype in _KINDS if datatype in schemas
        }

    @property
    def balances(self) -> Optional[Columns]:
        return self.tables.get(Datatype.GETH_BALANCE_DIFFS)

    @property
    def codes(self) -> Optional[Columns]:
        return self.tables.get(Datatype.GETH_CODE_DIFFS)

    @property
    def nonces(self) -> Optional[Columns]:
        return self.tables.get(Datatype.GETH_NONCE_DIFFS)

    @property
    def storages(self) -> Optional[Columns]:
        return self.tables.get(Datatype.GETH_STORAGE_DIFFS)

    def transform(self, block_number, transactions, traces, schemas: dict) -> None:
        """Add rows to every table held."""
        process_geth_diffs(
            block_number,
            list(transactions),
            list(traces),
            schemas,
            self.balances,
            self.codes,
            self.nonces,
            self.storages,
        )

    def create_tables(self, chain_id: int) -> dict:
        return {
            datatype: self.tables[datatype].to_dict(chain_id)
            for datatype in _KINDS
            if datatype in self.tables
        }