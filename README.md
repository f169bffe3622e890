# chainfreeze

chainfreeze turns the responses of an EVM node into column tables, one table
per dataset. It covers blocks, transactions, call traces, contracts, native
transfers, address appearances, logs, state diffs, VM traces, geth call
frames and single-value reads such as balances. The package does no network
I/O. You fetch the data however you like and pass it in as the plain records
defined in `chainfreeze.evm`. Each dataset module then appends rows to a
`Columns` accumulator.

## Installation

```
pip install chainfreeze
```

To also install the test dependencies:

```
pip install "chainfreeze[test]"
```

## Concepts

- **`chainfreeze.evm`** holds dataclasses for node data: `Block`,
  `Transaction`, `TransactionReceipt`, `Log`, and `Trace` with its action and
  result types. It also has `Diff`, `AccountDiff`, `BlockTrace`, `VmTrace`,
  `CallFrame`, `AccountState` and `DiffMode`. The helper functions are
  `keccak256(data)`, `decode_uint(data)` (a big-endian integer of at most 32
  bytes) and `address_from_topic(topic)` (the low 20 bytes of a 32-byte
  topic).
- **`chainfreeze.columns.Datatype`** names each dataset.
- **`chainfreeze.columns.Table(datatype, columns, sort=None)`** is the schema
  for one dataset. `Table.has_column(name)` reports whether a column is
  selected.
- **`chainfreeze.columns.Columns(schema)`** holds the rows collected so far.
  - `add_row(**values)` counts a row and drops values for columns that are not
    selected.
  - `to_dict(chain_id)` returns the columns in schema order. It fills
    `chain_id` for every row when that column is selected. It raises
    `CollectError` if a column's length does not match the row count.
- **`chainfreeze.columns.get_schema(schemas, datatype)`** looks up a schema in
  a dict. It raises `CollectError` when the schema is missing.

The dataset functions also raise `CollectError` when they are given a schema
for another dataset, or a schemas dict that lacks their own.

## Example

```python
from chainfreeze.blocks import process_block
from chainfreeze.columns import Columns, Datatype, Table
from chainfreeze.evm import Block

schema = Table(Datatype.BLOCKS, ["block_number", "timestamp", "gas_used", "chain_id"])
columns = Columns(schema)

block = Block(number=17_000_000, timestamp=1_681_338_455, gas_used=12_345_678)
process_block(block, columns, schema)

table = columns.to_dict(chain_id=1)
# {"block_number": [17000000], "timestamp": [1681338455],
#  "gas_used": [12345678], "chain_id": [1]}
```

## Datasets

| Module | Entry points |
| --- | --- |
| `chainfreeze.blocks` | `process_block` |
| `chainfreeze.transactions` | `process_transaction`, `process_block_transactions`, `tx_success` |
| `chainfreeze.traces` | `process_traces`, `filter_failed_traces`, `action_fields`, `result_fields` |
| `chainfreeze.contracts` | `process_contracts` |
| `chainfreeze.native_transfers` | `process_native_transfers` |
| `chainfreeze.address_appearances` | `process_appearances`, `transfer_name` |
| `chainfreeze.state_diffs` | `process_balance_diffs`, `process_code_diffs`, `process_nonce_diffs`, `process_storage_diffs` |
| `chainfreeze.geth_state_diffs` | `process_geth_diffs`, `decode_hex`, `GethStateDiffs` |
| `chainfreeze.vm_traces` | `process_vm_traces` |
| `chainfreeze.logs` | `process_logs` |
| `chainfreeze.geth_traces` | `process_geth_traces` |
| `chainfreeze.trace_calls` | `process_trace_calls` |
| `chainfreeze.eth_calls` | `process_eth_call` |
| `chainfreeze.balances`, `nonces`, `codes`, `slots` | `process_balance`, `process_nonce`, `process_code`, `process_slot` |

Some notes on particular datasets:

- `tx_success` takes the receipt status when the receipt has one. Otherwise,
  for chain 1 before block 4,370,000, it treats a receipt `gas_used` of 0 as
  success. In every other case it raises `CollectError`.
- `process_transaction` skips failed transactions when `exclude_failed` is
  true.
- `process_geth_traces` raises `CollectError` when a call frame's `to` is a
  name string rather than an address.

## Collecting several datasets from one response

Some datasets can be built from the same node response. Each class below is
constructed from a dict of schemas. Call `transform(...)` with the response,
then `create_tables(...)` to get a dict that maps each `Datatype` to its
column table.

- `chainfreeze.multi.BlocksAndTransactions`: use
  `transform(block, receipts, exclude_failed, schemas)` and
  `create_tables(chain_id)`.
- `chainfreeze.multi.CallTraceDerivatives`: fills contracts, native transfers
  and traces, each only when its schema is present. Use
  `transform(traces, schemas, exclude_failed)` and
  `create_tables(schemas, chain_id)`.
- `chainfreeze.multi.StateDiffs`: fills balance, code, nonce and storage
  diffs. Use `transform(block_number, transactions, traces, schemas)` and
  `create_tables(chain_id)`.
- `chainfreeze.geth_state_diffs.GethStateDiffs`: fills the geth balance, code,
  nonce and storage diffs whose schemas are given. Use
  `transform(block_number, transactions, traces, schemas)` and
  `create_tables(chain_id)`.

## Failed traces

`chainfreeze.traces.filter_failed_traces` removes every trace that has an
error, together with all the traces nested beneath it. `CallTraceDerivatives`
applies this filter when `exclude_failed` is true.

## What the package does not do

- It does not talk to a node. You must fetch blocks, receipts, traces and
  calls yourself.
- It does not write files. Tables come back as dicts of lists, for you to
  store in whatever format you need.
- It has no command-line tool.
- It has no datasets for ERC-20 or ERC-721 token transfers, token metadata,
  token balances or token supplies.
- Logs are stored raw. Event parameters are not decoded.

## Running the tests

```
pytest
```