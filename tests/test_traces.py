import pytest

from chainfreeze.columns import CollectError, Columns, Datatype, Table
from chainfreeze.evm import (
    ActionType,
    CallAction,
    CallResult,
    CallType,
    CreateAction,
    CreateResult,
    RewardAction,
    RewardType,
    SuicideAction,
    Trace,
)
from chainfreeze.traces import (
    action_call_type_to_string,
    action_fields,
    action_type_to_string,
    filter_failed_traces,
    process_traces,
    result_fields,
    reward_type_to_string,
)

A = bytes([0x11] * 20)
B = bytes([0x22] * 20)


def call_trace(address, error=None):
    return Trace(action=CallAction(from_address=A, to=B), trace_address=tuple(address), error=error)


@pytest.mark.parametrize(
    "reward_type, expected",
    [
        (RewardType.BLOCK, "reward"),
        (RewardType.UNCLE, "uncle"),
        (RewardType.EMPTY_STEP, "empty_step"),
        (RewardType.EXTERNAL, "external"),
    ],
)
def test_reward_type_to_string(reward_type, expected):
    assert reward_type_to_string(reward_type) == expected


@pytest.mark.parametrize(
    "action_type, expected",
    [
        (ActionType.CALL, "call"),
        (ActionType.CREATE, "create"),
        (ActionType.REWARD, "reward"),
        (ActionType.SUICIDE, "suicide"),
    ],
)
def test_action_type_to_string(action_type, expected):
    assert action_type_to_string(action_type) == expected


@pytest.mark.parametrize(
    "call_type, expected",
    [
        (CallType.NONE, "none"),
        (CallType.CALL, "call"),
        (CallType.CALL_CODE, "call_code"),
        (CallType.DELEGATE_CALL, "delegate_call"),
        (CallType.STATIC_CALL, "static_call"),
    ],
)
def test_action_call_type_to_string(call_type, expected):
    assert action_call_type_to_string(call_type) == expected


def test_filter_failed_traces_drops_subtree():
    traces = [
        call_trace([]),
        call_trace([0], error="Reverted"),
        call_trace([0, 0]),
        call_trace([0, 1]),
        call_trace([1]),
        call_trace([1, 0]),
    ]
    kept = filter_failed_traces(traces)
    assert [t.trace_address for t in kept] == [(), (1,), (1, 0)]


def test_filter_failed_traces_top_level_error_resets_on_next_tx():
    traces = [
        call_trace([], error="Reverted"),
        call_trace([0]),
        call_trace([]),
        call_trace([0]),
    ]
    kept = filter_failed_traces(traces)
    assert kept == [traces[2], traces[3]]


def test_filter_failed_traces_keeps_all_without_errors():
    traces = [call_trace([]), call_trace([0]), call_trace([0, 0])]
    assert filter_failed_traces(traces) == traces


def test_action_fields_call():
    action = CallAction(from_address=A, to=B, value=7, gas=21000, input=b"\x01",
                        call_type=CallType.DELEGATE_CALL)
    fields = action_fields(action)
    assert fields["action_from"] == A
    assert fields["action_to"] == B
    assert fields["action_value"] == "7"
    assert fields["action_gas"] == 21000
    assert fields["action_call_type"] == "delegate_call"
    assert fields["action_init"] is None


def test_action_fields_reward():
    fields = action_fields(RewardAction(author=A, value=5, reward_type=RewardType.UNCLE))
    assert fields["action_from"] == A
    assert fields["action_to"] is None
    assert fields["action_reward_type"] == "uncle"


def test_action_fields_suicide_and_create():
    suicide = action_fields(SuicideAction(address=A, refund_address=B, balance=3))
    assert (suicide["action_from"], suicide["action_to"], suicide["action_value"]) == (A, B, "3")
    create = action_fields(CreateAction(from_address=A, init=b"\x60"))
    assert create["action_init"] == b"\x60"
    assert create["action_to"] is None


def test_result_fields():
    assert result_fields(None) == {
        "result_gas_used": None,
        "result_output": None,
        "result_code": None,
        "result_address": None,
    }
    call = result_fields(CallResult(gas_used=10, output=b"\xff"))
    assert call["result_output"] == b"\xff"
    assert call["result_code"] is None
    create = result_fields(CreateResult(address=B, gas_used=4, code=b"\x00"))
    assert create["result_address"] == B
    assert create["result_code"] == b"\x00"


def test_process_traces_rows():
    schema = Table(
        Datatype.TRACES,
        ["action_from", "action_type", "trace_address", "result_gas_used", "block_number",
         "error", "chain_id"],
    )
    columns = Columns(schema)
    traces = [
        Trace(action=CallAction(from_address=A, to=B), result=CallResult(gas_used=9),
              trace_address=(0, 2), block_number=100),
        Trace(action=CreateAction(from_address=B), block_number=100, error="oops"),
    ]
    process_traces(traces, columns, {Datatype.TRACES: schema})
    table = columns.to_dict(1)
    assert table["action_from"] == [A, B]
    assert table["action_type"] == ["call", "create"]
    assert table["trace_address"] == ["0_2", ""]
    assert table["result_gas_used"] == [9, None]
    assert table["error"] == [None, "oops"]
    assert table["chain_id"] == [1, 1]


def test_process_traces_missing_schema():
    schema = Table(Datatype.TRACES, ["block_number"])
    with pytest.raises(CollectError):
        process_traces([], Columns(schema), {})