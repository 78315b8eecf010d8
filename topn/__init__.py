"""
Ordered top-N aggregation primitive.
"""

from topn.aggregator import OrderedTopNAggregator
from topn.base import (
    MAX,
    MIN,
    OPERATORS,
    SUM,
    AggregateOperator,
    AggregationRequest,
    AggregationResult,
    BaseRecordSource,
    OrderBy,
    field_measure,
)
from topn.errors import InvalidArgumentError, SourceUnavailableError, TopNAggregationError
from topn.memory import InMemoryRecordSource

__all__ = [
    "OrderedTopNAggregator",
    "AggregateOperator",
    "AggregationRequest",
    "AggregationResult",
    "BaseRecordSource",
    "InMemoryRecordSource",
    "OrderBy",
    "field_measure",
    "SUM",
    "MIN",
    "MAX",
    "OPERATORS",
    "TopNAggregationError",
    "InvalidArgumentError",
    "SourceUnavailableError",
]
