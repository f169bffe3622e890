"""Rows for transactions, optionally joined with their receipts."""

from __future__ import annotations

from typing import Optional

from .columns import CollectError, Columns, Datatype, Table
from .evm import Transaction, TransactionReceipt

BYZANTIUM_BLOCK = 4_370_000


def tx_success(tx: Transaction, receipt: Optional[TransactionReceipt]) -> bool:
    """Decide whether a transaction succeeded, raising CollectError if unknown."""
    if receipt is not None and receipt.status is not None:
        return receipt.status == 1
    if tx.chain_id == 1 and tx.block_number is not None and tx.block_number < BYZANTIUM_BLOCK:
        if receipt is not None and receipt.gas_used is not None:
            return receipt.gas_used == 0
    raise CollectError("could not determine status of transaction")


def process_transaction(
    tx: Transaction,
    receipt: Optional[TransactionReceipt],
    columns: Columns,
    schema: Table,
    exclude_failed: bool,
) -> None:
    """Add one row for a transaction, skipping it if failed and excluded."""
    if schema.datatype is not Datatype.TRANSACTIONS:
        raise CollectError("schema not provided")
    if exclude_failed or schema.has_column("success"):
        success = tx_success(tx, receipt)
        if exclude_failed and not success:
            return
    else:
        success = False

    columns.add_row(
        block_number=tx.block_number,
        transaction_index=tx.transaction_index,
        transaction_hash=tx.hash,
        from_address=tx.from_address,
        to_address=tx.to,
        nonce=tx.nonce,
        value=tx.value,
        input=tx.input,
        gas_limit=tx.gas,
        success=success,
        gas_used=receipt.gas_used if receipt is not None else None,
        gas_price=tx.gas_price,
        transaction_type=tx.transaction_type,
        max_fee_per_gas=tx.max_fee_per_gas,
        max_priority_fee_per_gas=tx.max_priority_fee_per_gas,
    )


def process_block_transactions(
    transactions,
    receipts,
    columns: Columns,
    schema: Table,
    exclude_failed: bool,
) -> None:
    """Add rows for a block's transactions, paired with receipts when given."""
    if receipts is None:
        for tx in transactions:
            process_transaction(tx, None, columns, schema, exclude_failed)
    else:
        for tx, receipt in zip(transactions, receipts):
            process_transaction(tx, receipt, columns, schema, exclude_failed)