"""Rows for event logs."""

from __future__ import annotations

from .columns import CollectError, Columns, Datatype, Table

_TOPIC_COLUMNS = ("topic0", "topic1", "topic2", "topic3")


def process_logs(logs, columns: Columns, schema: Table) -> None:
    """Add one row per log that carries its block and transaction position."""
    if schema.datatype is not Datatype.LOGS:
        raise CollectError("schema not provided")
    for log in logs:
        if None in (log.block_number, log.transaction_hash, log.transaction_index, log.log_index):
            continue
        topics = [bytes(topic) for topic in log.topics[: len(_TOPIC_COLUMNS)]]
        topics += [None] * (len(_TOPIC_COLUMNS) - len(topics))
        columns.add_row(
            block_number=log.block_number,
            transaction_index=log.transaction_index,
            log_index=log.log_index,
            transaction_hash=bytes(log.transaction_hash),
            address=bytes(log.address),
            data=bytes(log.data),
            **dict(zip(_TOPIC_COLUMNS, topics)),
        )