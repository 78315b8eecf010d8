"""
topn/errors.py

Exceptions raised by the ordered top-N aggregator and its record sources.
"""

from __future__ import annotations


class TopNAggregationError(Exception):
    """Base exception for top-N aggregation failures."""


class InvalidArgumentError(TopNAggregationError, ValueError):
    """
    Raised when an aggregation request is malformed.

    Examples: a negative ``n``, a non-integer ``n``, or an ordering field
    the record source does not know how to sort on.
    """


class SourceUnavailableError(TopNAggregationError, RuntimeError):
    """
    Raised by a record source that cannot be reached or queried.

    The aggregator propagates it unchanged; no partial result is produced.
    """
