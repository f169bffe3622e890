import pytest

from chainfreeze.balances import process_balance
from chainfreeze.columns import CollectError, Columns, Datatype, Table

ADDRESS = b"\x22" * 20
SCHEMA = Table(Datatype.BALANCES, ("block_number", "address", "balance", "chain_id"))


def test_rows_accumulate_in_order():
    columns = Columns(SCHEMA)
    process_balance(1, ADDRESS, 10**18, columns, SCHEMA)
    process_balance(2, ADDRESS, 0, columns, SCHEMA)
    table = columns.to_dict(10)
    assert table["block_number"] == [1, 2]
    assert table["address"] == [ADDRESS, ADDRESS]
    assert table["balance"] == [10**18, 0]
    assert table["chain_id"] == [10, 10]


def test_large_balance_kept_exactly():
    columns = Columns(SCHEMA)
    value = 2**256 - 1
    process_balance(1, ADDRESS, value, columns, SCHEMA)
    assert columns.to_dict(1)["balance"] == [value]


def test_balance_column_can_be_left_out():
    schema = Table(Datatype.BALANCES, ("address",))
    columns = Columns(schema)
    process_balance(1, ADDRESS, 5, columns, schema)
    assert columns.to_dict(1) == {"address": [ADDRESS]}
    assert len(columns) == 1


def test_wrong_schema_raises():
    schema = Table(Datatype.NONCES, ("address",))
    with pytest.raises(CollectError):
        process_balance(1, ADDRESS, 5, Columns(schema), schema)