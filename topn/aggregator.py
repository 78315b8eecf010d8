"""
topn/aggregator.py

Ordered top-N aggregation.

Given a partition key, walks positions ``0..n-1`` of the partition sorted by
an :class:`~topn.base.OrderBy` and folds the measure of each record found.

Degrade-to-zero semantics
-------------------------
* A record whose measure is absent contributes ``0`` but still counts as
  consumed.
* A position past the end of the partition contributes ``0`` and is not
  counted.
* All ``n`` positions are requested from the source even once the partition
  is exhausted; there is no early exit.

The aggregator holds no state between calls. Two calls with identical
arguments against an unchanged source return identical results.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from topn.base import (
    SUM,
    AggregateOperator,
    AggregationRequest,
    AggregationResult,
    BaseRecordSource,
    Measure,
    OrderBy,
)
from topn.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_ABSENT_CONTRIBUTION = 0


class OrderedTopNAggregator:
    """
    Folds a numeric measure over the first N records of a partition.

    Usage::

        aggregator = OrderedTopNAggregator()
        result = aggregator.aggregate(
            startup_id, 3, OrderBy("announced_date"), field_measure("raised_amount_usd"), source
        )
        print(result.total, result.count_consumed)
    """

    def aggregate(
        self,
        partition_key: Hashable,
        n: int,
        order_by: OrderBy,
        measure: Measure,
        source: BaseRecordSource,
        *,
        operator: AggregateOperator = SUM,
    ) -> AggregationResult:
        """
        Aggregate the first *n* records of *partition_key* in *order_by* order.

        Raises
        ------
        InvalidArgumentError
            ``n`` is negative or not an integer.
        SourceUnavailableError
            Propagated from *source*; no partial result is returned.
        """
        _validate_n(n)
        if n == 0:
            return AggregationResult(total=_ABSENT_CONTRIBUTION, count_consumed=0)

        total: Any = None
        consumed = 0
        present = 0

        for index in range(n):
            record = source.record_at(partition_key, index, order_by)
            if record is None:
                value = _ABSENT_CONTRIBUTION
            else:
                consumed += 1
                value = measure(record)
                if value is None:
                    value = _ABSENT_CONTRIBUTION
                else:
                    present += 1
            total = value if total is None else operator.combine(total, value)

        logger.debug(
            "aggregate partition=%r n=%d op=%s order_by=%s → total=%r consumed=%d present=%d",
            partition_key, n, operator.name, order_by.field, total, consumed, present,
        )
        return AggregationResult(total=total, count_consumed=consumed, measures_present=present)

    def execute(
        self,
        request: AggregationRequest,
        order_by: OrderBy,
        measure: Measure,
        source: BaseRecordSource,
    ) -> AggregationResult:
        """Run :meth:`aggregate` for a pre-built :class:`AggregationRequest`."""
        return self.aggregate(
            request.partition_key,
            request.n,
            order_by,
            measure,
            source,
            operator=request.operator,
        )


def _validate_n(n: object) -> None:
    # bool is an int subclass; True/False are never a meaningful N.
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"n must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
