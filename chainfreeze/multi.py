"""Collections that fill several related tables from one response."""

from __future__ import annotations

from .blocks import process_block
from .columns import Columns, Datatype, get_schema
from .contracts import process_contracts
from .evm import Block
from .native_transfers import process_native_transfers
from .state_diffs import (
    process_balance_diffs,
    process_code_diffs,
    process_nonce_diffs,
    process_storage_diffs,
)
from .traces import filter_failed_traces, process_traces
from .transactions import process_block_transactions


class BlocksAndTransactions:
    """Blocks and their transactions, filled from blocks fetched with full transactions."""

    def __init__(self, schemas: dict) -> None:
        self.blocks = Columns(get_schema(schemas, Datatype.BLOCKS))
        self.transactions = Columns(get_schema(schemas, Datatype.TRANSACTIONS))

    def transform(self, block: Block, receipts, exclude_failed: bool, schemas: dict) -> None:
        """Add a row for the block and one for each of its transactions."""
        process_block(block, self.blocks, get_schema(schemas, Datatype.BLOCKS))
        process_block_transactions(
            block.transactions,
            receipts,
            self.transactions,
            get_schema(schemas, Datatype.TRANSACTIONS),
            exclude_failed,
        )

    def create_tables(self, chain_id: int) -> dict:
        return {
            Datatype.BLOCKS: self.blocks.to_dict(chain_id),
            Datatype.TRANSACTIONS: self.transactions.to_dict(chain_id),
        }


_TRACE_DERIVATIVES = (
    (Datatype.CONTRACTS, process_contracts),
    (Datatype.NATIVE_TRANSFERS, process_native_transfers),
    (Datatype.TRACES, process_traces),
)


class CallTraceDerivatives:
    """Contracts, native transfers and traces, each filled only if its schema is present."""

    def __init__(self, schemas: dict) -> None:
        self.tables = {
            datatype: Columns(schemas[datatype])
            for datatype, _ in _TRACE_DERIVATIVES
            if datatype in schemas
        }

    @property
    def contracts(self):
        return self.tables.get(Datatype.CONTRACTS)

    @property
    def native_transfers(self):
        return self.tables.get(Datatype.NATIVE_TRANSFERS)

    @property
    def traces(self):
        return self.tables.get(Datatype.TRACES)

    def transform(self, traces, schemas: dict, exclude_failed: bool) -> None:
        """Add rows for every table whose schema is given."""
        traces = list(traces)
        if exclude_failed:
            traces = filter_failed_traces(traces)
        for datatype, process in _TRACE_DERIVATIVES:
            if datatype in schemas:
                columns = self.tables.get(datatype)
                if columns is None:
                    columns = self.tables[datatype] = Columns(schemas[datatype])
                process(traces, columns, schemas)

    def create_tables(self, schemas: dict, chain_id: int) -> dict:
        return {
            datatype: self.tables[datatype].to_dict(chain_id)
            for datatype, _ in _TRACE_DERIVATIVES
            if datatype in schemas and datatype in self.tables
        }


_STATE_DIFF_KINDS = (
    (Datatype.BALANCE_DIFFS, process_balance_diffs),
    (Datatype.CODE_DIFFS, process_code_diffs),
    (Datatype.NONCE_DIFFS, process_nonce_diffs),
    (Datatype.STORAGE_DIFFS, process_storage_diffs),
)


class StateDiffs:
    """Balance, code, nonce and storage diffs from one set of state-diff traces."""

    def __init__(self, schemas: dict) -> None:
        self.tables = {
            datatype: Columns(get_schema(schemas, datatype))
            for datatype, _ in _STATE_DIFF_KINDS
        }

    @property
    def balances(self) -> Columns:
        return self.tables[Datatype.BALANCE_DIFFS]

    @property
    def codes(self) -> Columns:
        return self.tables[Datatype.CODE_DIFFS]

    @property
    def nonces(self) -> Columns:
        return self.tables[Datatype.NONCE_DIFFS]

    @property
    def storages(self) -> Columns:
        return self.tables[Datatype.STORAGE_DIFFS]

    def transform(self, block_number, transactions, traces, schemas: dict) -> None:
        """Add rows to all four diff tables."""
        transactions = list(transactions)
        traces = list(traces)
        for datatype, process in _STATE_DIFF_KINDS:
            process(block_number, transactions, traces, self.tables[datatype], schemas)

    def create_tables(self, chain_id: int) -> dict:
        return {
            datatype: self.tables[datatype].to_dict(chain_id)
            for datatype, _ in _STATE_DIFF_KINDS
        }