"""Rows recording every address that appears in a block's activity."""

from __future__ import annotations

from collections import defaultdict
from typing import Optional

from .columns import CollectError, Columns, Datatype, Table
from .evm import (
    ZERO_HASH,
    Block,
    CallAction,
    CreateAction,
    CreateResult,
    Log,
    RewardAction,
    SuicideAction,
    keccak256,
)

EVENT_ERC20_TRANSFER = keccak256(b"Transfer(address,address,uint256)")


def transfer_name(log: Log) -> Optional[str]:
    """Name the kind of token transfer a log records, if it is one."""
    if not log.topics or bytes(log.topics[0]) != EVENT_ERC20_TRANSFER:
        return None
    if len(log.data) > 0:
        return "erc20_transfer"
    if len(log.topics) == 4:
        return "erc721_transfer"
    return None


class _Appearances:
    def __init__(self, columns: Columns, block_author: bytes, logs_by_tx: dict) -> None:
        self.columns = columns
        self.block_author = block_author
        self.logs_by_tx = logs_by_tx

    def add(self, address, relationship, block_number, tx_hash) -> None:
        self.columns.add_row(
            address=address,
            relationship=relationship,
            block_number=block_number,
            transaction_hash=tx_hash,
        )

    def first_transaction(self, trace, tx_hash) -> None:
        block_number = trace.block_number
        self.add(self.block_author, "miner_fee", block_number, tx_hash)

        for log in self.logs_by_tx.get(tx_hash, ()):
            if len(log.topics) < 3:
                continue
            name = transfer_name(log)
            if name is None:
                continue
            sender = bytes(log.topics[1])[12:32]
            name = name + "_from"
            self.add(sender, name, block_number, tx_hash)
            receiver = bytes(log.topics[1])[12:32]
            name = name + "_to"
            self.add(receiver, name, block_number, tx_hash)

        action = trace.action
        if isinstance(action, CallAction):
            self.add(action.from_address, "tx_from", block_number, tx_hash)
            self.add(action.to, "tx_to", block_number, tx_hash)
        elif isinstance(action, CreateAction):
            self.add(action.from_address, "tx_from", block_number, tx_hash)

        if isinstance(trace.result, CreateResult):
            self.add(trace.result.address, "tx_to", block_number, tx_hash)

    def trace(self, trace, tx_hash) -> None:
        block_number = trace.block_number
        action = trace.action
        if isinstance(action, CallAction):
            self.add(action.from_address, "call_from", block_number, tx_hash)
            self.add(action.to, "call_to", block_number, tx_hash)
        elif isinstance(action, CreateAction):
            self.add(action.from_address, "factory", block_number, tx_hash)
        elif isinstance(action, SuicideAction):
            self.add(action.address, "suicide", block_number, tx_hash)
            self.add(action.refund_address, "suicide_refund", block_number, tx_hash)
        elif isinstance(action, RewardAction):
            self.add(action.author, "author", block_number, tx_hash)
        else:
            raise TypeError(f"unknown trace action: {action!r}")

        if isinstance(trace.result, CreateResult):
            self.add(trace.result.address, "create", block_number, tx_hash)


def process_appearances(block: Block, logs, traces, columns: Columns, schema: Table) -> None:
    """Add a row for each address appearance in the block's traces and logs."""
    if schema.datatype is not Datatype.ADDRESS_APPEARANCES:
        raise CollectError("schema not provided")

    logs_by_tx = defaultdict(list)
    for log in logs:
        if log.transaction_hash is not None:
            logs_by_tx[log.transaction_hash].append(log)

    if block.number is None or block.author is None:
        return

    appearances = _Appearances(columns, block.author, logs_by_tx)
    current_tx_hash = ZERO_HASH
    for trace in traces:
        tx_hash = trace.transaction_hash
        if tx_hash is None or trace.transaction_position is None:
            continue
        if tx_hash != current_tx_hash:
            appearances.first_transaction(trace, tx_hash)
        appearances.trace(trace, tx_hash)
        current_tx_hash = tx_hash