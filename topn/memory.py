"""
topn/memory.py

In-memory record source.

Holds an immutable snapshot of records and answers positional lookups by
filtering on the partition field and sorting with Python's stable sort, so
records with equal ordering keys keep their insertion order.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from topn.base import BaseRecordSource, OrderBy
from topn.errors import InvalidArgumentError


def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class InMemoryRecordSource(BaseRecordSource):
    """
    Record source backed by a tuple of mappings or objects.

    Parameters
    ----------
    records:
        Records to serve. Copied into a tuple on construction; later
        changes to the caller's iterable are not observed.
    partition_field:
        Name of the field holding the partition key.
    """

    def __init__(self, records: Iterable[Any], *, partition_field: str) -> None:
        self._records = tuple(records)
        self._partition_field = partition_field

    def record_at(self, partition_key: Hashable, index: int, order_by: OrderBy) -> Any | None:
        if index < 0:
            raise InvalidArgumentError(f"index must be >= 0, got {index}")

        members = [r for r in self._records if _read(r, self._partition_field) == partition_key]
        if index >= len(members):
            return None

        # Records missing the ordering field sort last in either direction.
        present = [r for r in members if _read(r, order_by.field) is not None]
        missing = [r for r in members if _read(r, order_by.field) is None]
        try:
            present.sort(key=lambda r: _read(r, order_by.field), reverse=order_by.descending)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"values of {order_by.field!r} are not mutually comparable"
            ) from exc
        return (present + missing)[index]

    def __len__(self) -> int:
        return len(self._records)
