"""Plain data types for EVM blocks, transactions, logs, traces and state diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from Crypto.Hash import keccak

ZERO_ADDRESS = bytes(20)
ZERO_HASH = bytes(32)


def decode_uint(data: bytes) -> int:
    """Decode a big-endian unsigned 256-bit integer from at most 32 bytes."""
    data = bytes(data)
    if len(data) > 32:
        raise ValueError(f"cannot decode {len(data)} bytes as a 256-bit integer")
    return int.from_bytes(data, "big")


def address_from_topic(topic: bytes) -> bytes:
    """Return the 20-byte address held in the low bytes of a 32-byte topic."""
    topic = bytes(topic)
    if len(topic) != 32:
        raise ValueError(f"topic must be 32 bytes, got {len(topic)}")
    return topic[12:]


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


class CallType(Enum):
    NONE = "none"
    CALL = "call"
    CALL_CODE = "call_code"
    DELEGATE_CALL = "delegate_call"
    STATIC_CALL = "static_call"


class RewardType(Enum):
    BLOCK = "reward"
    UNCLE = "uncle"
    EMPTY_STEP = "empty_step"
    EXTERNAL = "external"


class ActionType(Enum):
    CALL = "call"
    CREATE = "create"
    REWARD = "reward"
    SUICIDE = "suicide"


@dataclass
class CallAction:
    from_address: bytes
    to: bytes
    value: int = 0
    gas: int = 0
    input: bytes = b""
    call_type: CallType = CallType.CALL


@dataclass
class CreateAction:
    from_address: bytes
    value: int = 0
    gas: int = 0
    init: bytes = b""


@dataclass
class SuicideAction:
    address: bytes
    refund_address: bytes
    balance: int = 0


@dataclass
class RewardAction:
    author: bytes
    value: int = 0
    reward_type: RewardType = RewardType.BLOCK


Action = Union[CallAction, CreateAction, SuicideAction, RewardAction]


@dataclass
class CallResult:
    gas_used: int = 0
    output: bytes = b""


@dataclass
class CreateResult:
    address: bytes
    gas_used: int = 0
    code: bytes = b""


TraceResult = Union[CallResult, CreateResult, None]


@dataclass
class Trace:
    """One call-tree node of a parity-style trace."""

    action: Action
    result: TraceResult = None
    trace_address: tuple = ()
    subtraces: int = 0
    transaction_position: Optional[int] = None
    transaction_hash: Optional[bytes] = None
    block_number: int = 0
    block_hash: bytes = ZERO_HASH
    error: Optional[str] = None

    def action_type(self) -> ActionType:
        """Kind of action this trace performs."""
        if isinstance(self.action, CallAction):
            return ActionType.CALL
        if isinstance(self.action, CreateAction):
            return ActionType.CREATE
        if isinstance(self.action, SuicideAction):
            return ActionType.SUICIDE
        if isinstance(self.action, RewardAction):
            return ActionType.REWARD
        raise TypeError(f"unknown trace action: {self.action!r}")


@dataclass
class Log:
    address: bytes
    topics: tuple = ()
    data: bytes = b""
    block_number: Optional[int] = None
    transaction_hash: Optional[bytes] = None
    transaction_index: Optional[int] = None
    log_index: Optional[int] = None


@dataclass
class Block:
    number: Optional[int] = None
    hash: Optional[bytes] = None
    parent_hash: bytes = ZERO_HASH
    author: Optional[bytes] = None
    state_root: bytes = ZERO_HASH
    transactions_root: bytes = ZERO_HASH
    receipts_root: bytes = ZERO_HASH
    gas_used: int = 0
    extra_data: bytes = b""
    logs_bloom: Optional[bytes] = None
    timestamp: int = 0
    total_difficulty: Optional[int] = None
    size: Optional[int] = None
    base_fee_per_gas: Optional[int] = None
    transactions: list = field(default_factory=list)


@dataclass
class Transaction:
    hash: bytes
    from_address: bytes
    nonce: int = 0
    to: Optional[bytes] = None
    value: int = 0
    input: bytes = b""
    gas: int = 0
    gas_price: Optional[int] = None
    block_number: Optional[int] = None
    block_hash: Optional[bytes] = None
    transaction_index: Optional[int] = None
    transaction_type: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    chain_id: Optional[int] = None


@dataclass
class TransactionReceipt:
    status: Optional[int] = None
    gas_used: Optional[int] = None
    logs: list = field(default_factory=list)


class DiffKind(Enum):
    SAME = "same"
    BORN = "born"
    DIED = "died"
    CHANGED = "changed"


@dataclass
class Diff:
    """Change of one value: unchanged, created, removed or altered."""

    kind: DiffKind = DiffKind.SAME
    before: object = None
    after: object = None


@dataclass
class AccountDiff:
    balance: Diff = field(default_factory=Diff)
    nonce: Diff = field(default_factory=Diff)
    code: Diff = field(default_factory=Diff)
    storage: dict = field(default_factory=dict)


@dataclass
class MemoryDiff:
    offset: int
    data: bytes = b""


@dataclass
class StorageWrite:
    key: bytes
    value: bytes


@dataclass
class VmExecution:
    used: int
    push: bytes = b""
    mem: Optional[MemoryDiff] = None
    store: Optional[StorageWrite] = None


@dataclass
class VmOperation:
    pc: int
    cost: int
    op: str
    ex: Optional[VmExecution] = None
    sub: Optional["VmTrace"] = None


@dataclass
class VmTrace:
    code: bytes = b""
    ops: list = field(default_factory=list)


@dataclass
class BlockTrace:
    state_diff: Optional[dict] = None
    vm_trace: Optional[VmTrace] = None
    trace: Optional[list] = None
    output: bytes = b""


@dataclass
class CallFrame:
    typ: str
    from_address: bytes
    to: Union[bytes, str, None] = None
    value: Optional[int] = None
    gas: int = 0
    gas_used: int = 0
    input: bytes = b""
    output: Optional[bytes] = None
    error: Optional[str] = None
    calls: Optional[list] = None


@dataclass
class AccountState:
    balance: Optional[int] = None
    code: Optional[str] = None
    nonce: Optional[int] = None
    storage: Optional[dict] = None


@dataclass
class DiffMode:
    pre: dict = field(default_factory=dict)
    post: dict = field(default_factory=dict)