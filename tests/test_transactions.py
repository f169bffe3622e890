import pytest

from chainfreeze.columns import CollectError, Columns, Datatype, Table
from chainfreeze.evm import Transaction, TransactionReceipt
from chainfreeze.transactions import (
    process_block_transactions,
    process_transaction,
    tx_success,
)


def _tx(n=0, **overrides):
    values = dict(
        hash=bytes([n]) * 32,
        from_address=b"\xaa" * 20,
        to=b"\xbb" * 20,
        nonce=n,
        value=1000 + n,
        input=b"\x01\x02",
        gas=50000,
        gas_price=30,
        block_number=5_000_000,
        transaction_index=n,
        transaction_type=2,
        max_fee_per_gas=40,
        max_priority_fee_per_gas=2,
        chain_id=1,
    )
    values.update(overrides)
    return Transaction(**values)


def test_status_decides_success():
    assert tx_success(_tx(), TransactionReceipt(status=1)) is True
    assert tx_success(_tx(), TransactionReceipt(status=0)) is False


def test_pre_byzantium_mainnet_uses_gas_used():
    tx = _tx(block_number=100)
    assert tx_success(tx, TransactionReceipt(gas_used=0)) is True
    assert tx_success(tx, TransactionReceipt(gas_used=21000)) is False


@pytest.mark.parametrize(
    "tx, receipt",
    [
        (_tx(block_number=100), None),
        (_tx(block_number=5_000_000), TransactionReceipt(gas_used=0)),
        (_tx(block_number=100, chain_id=5), TransactionReceipt(gas_used=0)),
        (_tx(block_number=None), TransactionReceipt(gas_used=0)),
    ],
)
def test_undeterminable_status_raises(tx, receipt):
    with pytest.raises(CollectError):
        tx_success(tx, receipt)


def test_row_holds_transaction_fields():
    schema = Table(
        Datatype.TRANSACTIONS,
        (
            "block_number",
            "transaction_index",
            "transaction_hash",
            "nonce",
            "from_address",
            "to_address",
            "value",
            "input",
            "gas_limit",
            "gas_used",
            "gas_price",
            "transaction_type",
            "max_priority_fee_per_gas",
            "max_fee_per_gas",
            "success",
            "chain_id",
        ),
    )
    columns = Columns(schema)
    tx = _tx(3)
    process_transaction(tx, TransactionReceipt(status=1, gas_used=21000), columns, schema, False)
    data = columns.to_dict(chain_id=1)
    assert data["block_number"] == [tx.block_number]
    assert data["transaction_index"] == [3]
    assert data["transaction_hash"] == [tx.hash]
    assert data["nonce"] == [3]
    assert data["from_address"] == [tx.from_address]
    assert data["to_address"] == [tx.to]
    assert data["value"] == [tx.value]
    assert data["input"] == [b"\x01\x02"]
    assert data["gas_limit"] == [50000]
    assert data["gas_used"] == [21000]
    assert data["gas_price"] == [30]
    assert data["transaction_type"] == [2]
    assert data["max_priority_fee_per_gas"] == [2]
    assert data["max_fee_per_gas"] == [40]
    assert data["success"] == [True]
    assert data["chain_id"] == [1]


def test_without_success_column_no_receipt_needed():
    schema = Table(Datatype.TRANSACTIONS, ("transaction_hash", "gas_used"))
    columns = Columns(schema)
    tx = _tx(1)
    process_transaction(tx, None, columns, schema, False)
    assert columns.to_dict(chain_id=1) == {"transaction_hash": [tx.hash], "gas_used": [None]}


def test_exclude_failed_drops_failed_rows():
    schema = Table(Datatype.TRANSACTIONS, ("transaction_hash",))
    columns = Columns(schema)
    txs = [_tx(1), _tx(2), _tx(3)]
    receipts = [
        TransactionReceipt(status=1),
        TransactionReceipt(status=0),
        TransactionReceipt(status=1),
    ]
    process_block_transactions(txs, receipts, columns, schema, True)
    assert columns.to_dict(chain_id=1)["transaction_hash"] == [txs[0].hash, txs[2].hash]


def test_exclude_failed_without_receipt_raises():
    schema = Table(Datatype.TRANSACTIONS, ("transaction_hash",))
    with pytest.raises(CollectError):
        process_transaction(_tx(), None, Columns(schema), schema, True)


def test_block_transactions_without_receipts():
    schema = Table(Datatype.TRANSACTIONS, ("nonce", "success"))
    columns = Columns(schema)
    process_block_transactions([_tx(4), _tx(5)], None, Columns(schema), Table(
        Datatype.TRANSACTIONS, ("nonce",)), False)
    with pytest.raises(CollectError):
        process_block_transactions([_tx(4)], None, columns, schema, False)


def test_block_transactions_keep_order():
    schema = Table(Datatype.TRANSACTIONS, ("nonce",))
    columns = Columns(schema)
    process_block_transactions([_tx(4), _tx(5), _tx(6)], None, columns, schema, False)
    assert columns.to_dict(chain_id=1)["nonce"] == [4, 5, 6]


def test_wrong_schema_raises():
    schema = Table(Datatype.BLOCKS, ("nonce",))
    with pytest.raises(CollectError):
        process_transaction(_tx(), None, Columns(schema), schema, False)