"""Datatypes, schemas and row-oriented column storage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Datatype(Enum):
    ADDRESS_APPEARANCES = "address_appearances"
    BALANCE_DIFFS = "balance_diffs"
    BALANCES = "balances"
    BLOCKS = "blocks"
    CODE_DIFFS = "code_diffs"
    CODES = "codes"
    CONTRACTS = "contracts"
    ERC20_BALANCES = "erc20_balances"
    ERC20_METADATA = "erc20_metadata"
    ERC20_SUPPLIES = "erc20_supplies"
    ERC20_TRANSFERS = "erc20_transfers"
    ERC721_METADATA = "erc721_metadata"
    ERC721_TRANSFERS = "erc721_transfers"
    ETH_CALLS = "eth_calls"
    GETH_BALANCE_DIFFS = "geth_balance_diffs"
    GETH_CODE_DIFFS = "geth_code_diffs"
    GETH_NONCE_DIFFS = "geth_nonce_diffs"
    GETH_STORAGE_DIFFS = "geth_storage_diffs"
    GETH_TRACES = "geth_traces"
    LOGS = "logs"
    NATIVE_TRANSFERS = "native_transfers"
    NONCE_DIFFS = "nonce_diffs"
    NONCES = "nonces"
    SLOTS = "slots"
    STORAGE_DIFFS = "storage_diffs"
    TRACE_CALLS = "trace_calls"
    TRACES = "traces"
    TRANSACTIONS = "transactions"
    VM_TRACES = "vm_traces"


class CollectError(Exception):
    """Raised when data cannot be collected or arranged into columns."""


@dataclass(frozen=True)
class Table:
    """Schema of one output table: its datatype and selected columns."""

    datatype: Datatype
    columns: tuple
    sort: Optional[tuple] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.sort is not None:
            object.__setattr__(self, "sort", tuple(self.sort))

    def has_column(self, name: str) -> bool:
        return name in self.columns


def get_schema(schemas: dict, datatype: Datatype) -> Table:
    """Return the schema for ``datatype`` or raise CollectError."""
    try:
        return schemas[datatype]
    except KeyError:
        raise CollectError(f"schema not provided: {datatype.value}") from None


class Columns:
    """Accumulates rows, keeping only the columns the schema selects."""

    def __init__(self, schema: Table) -> None:
        self.schema = schema
        self.n_rows = 0
        self._data = {name: [] for name in schema.columns if name != "chain_id"}

    @property
    def datatype(self) -> Datatype:
        return self.schema.datatype

    def __len__(self) -> int:
        return self.n_rows

    def add_row(self, **values) -> None:
        """Add one row; values for columns outside the schema are dropped."""
        self.n_rows += 1
        for name, value in values.items():
            column = self._data.get(name)
            if column is not None:
                column.append(value)

    def to_dict(self, chain_id: int) -> dict:
        """Return the columns in schema order, filling chain_id for every row."""
        output = {}
        for name in self.schema.columns:
            if name == "chain_id":
                output[name] = [chain_id] * self.n_rows
                continue
            column = self._data[name]
            if len(column) != self.n_rows:
                raise CollectError(
                    f"column {name} has {len(column)} values for {self.n_rows} rows"
                )
            output[name] = list(column)
        return output