"""
topn/base.py

Value types and the record-source contract shared by the aggregator and
every source implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Any

Measure = Callable[[Any], Any]
"""Extractor returning a record's numeric measure, or ``None`` when absent."""


@dataclass(frozen=True)
class OrderBy:
    """
    Sort specification used to pick the "first N" records of a partition.

    ``tiebreaker`` names the secondary key that makes equal ``field`` values
    deterministic.  Sources that have no such column (e.g. in-memory lists)
    fall back to insertion order.
    """

    field: str
    descending: bool = False
    tiebreaker: str = "id"


@dataclass(frozen=True)
class AggregateOperator:
    """
    Named associative fold applied left-to-right over the consumed measures.
    """

    name: str
    combine: Callable[[Any, Any], Any]


SUM = AggregateOperator(name="sum", combine=lambda total, value: total + value)
MIN = AggregateOperator(name="min", combine=min)
MAX = AggregateOperator(name="max", combine=max)

OPERATORS: dict[str, AggregateOperator] = {op.name: op for op in (SUM, MIN, MAX)}


@dataclass(frozen=True)
class AggregationRequest:
    """
    One top-N aggregation over a single partition.

    Created per invocation and discarded after use.
    """

    partition_key: Hashable
    n: int
    operator: AggregateOperator = SUM


@dataclass(frozen=True)
class AggregationResult:
    """
    Outcome of a top-N aggregation.

    Attributes
    ----------
    total:
        Folded value of the consumed measures, absent ones counted as 0.
    count_consumed:
        Number of real records found within the first ``n`` positions.
        Never exceeds ``n``.
    measures_present:
        How many of the consumed records carried a non-absent measure.
    """

    total: Any
    count_consumed: int
    measures_present: int = 0


def field_measure(name: str) -> Measure:
    """
    Build a measure extractor reading *name* from a mapping or an object.

    Missing keys and missing attributes are treated as absent values.
    """

    def _extract(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    _extract.__name__ = f"field_measure_{name}"
    return _extract


class BaseRecordSource(ABC):
    """
    Contract for anything the aggregator can read records from.

    Implementations own filtering by partition, sorting by :class:`OrderBy`
    and positional access.  They must not be mutated by the aggregator and
    should raise :class:`~topn.errors.SourceUnavailableError` when the
    underlying store cannot be queried.
    """

    @abstractmethod
    def record_at(self, partition_key: Hashable, index: int, order_by: OrderBy) -> Any | None:
        """
        Return the *index*-th record (0-based) of the sorted partition.

        Returns ``None`` when the partition holds ``index`` records or fewer.
        """
