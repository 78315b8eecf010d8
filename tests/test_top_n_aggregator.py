"""
tests/test_top_n_aggregator.py

Pytest unit tests for OrderedTopNAggregator.

Pure Python: records come from InMemoryRecordSource or small stub sources.

Coverage
--------
- Fewer records than N
- n = 0 and invalid n
- Absent measures and exhausted positions
- Fetch attempts past the end of data
- Ordering direction and tie-breaking
- MIN / MAX operators
- Idempotence and summation order
- SourceUnavailableError propagation
"""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from topn import (
    MAX,
    MIN,
    SUM,
    AggregationRequest,
    AggregationResult,
    BaseRecordSource,
    InMemoryRecordSource,
    InvalidArgumentError,
    OrderBy,
    OrderedTopNAggregator,
    SourceUnavailableError,
    field_measure,
)

BY_DATE = OrderBy(field="announced_date")
AMOUNT = field_measure("amount")


def _rounds() -> list[dict]:
    # Inserted out of date order on purpose.
    return [
        {"startup_id": 1, "announced_date": date(2021, 1, 1), "amount": 50},
        {"startup_id": 2, "announced_date": date(2019, 1, 1), "amount": 9_999},
        {"startup_id": 1, "announced_date": date(2020, 1, 1), "amount": 100},
        {"startup_id": 1, "announced_date": date(2020, 6, 1), "amount": None},
    ]


class _RecordingSource(BaseRecordSource):
    def __init__(self, inner: BaseRecordSource) -> None:
        self.inner = inner
        self.calls: list[int] = []

    def record_at(self, partition_key, index, order_by):
        self.calls.append(index)
        return self.inner.record_at(partition_key, index, order_by)


class _FailingSource(BaseRecordSource):
    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at

    def record_at(self, partition_key, index, order_by):
        if index == self.fail_at:
            raise SourceUnavailableError("store offline")
        return {"amount": 1}


@pytest.fixture()
def agg() -> OrderedTopNAggregator:
    return OrderedTopNAggregator()


@pytest.fixture()
def source() -> InMemoryRecordSource:
    return InMemoryRecordSource(_rounds(), partition_field="startup_id")


# ---------------------------------------------------------------------------
# Reference example
# ---------------------------------------------------------------------------


class TestFirstNRounds:
    def test_first_two_skip_absent_amount(self, agg, source) -> None:
        result = agg.aggregate(1, 2, BY_DATE, AMOUNT, source)
        assert result.total == 100
        assert result.count_consumed == 2
        assert result.measures_present == 1

    def test_n_beyond_partition_sums_everything(self, agg, source) -> None:
        result = agg.aggregate(1, 5, BY_DATE, AMOUNT, source)
        assert result == AggregationResult(total=150, count_consumed=3, measures_present=2)

    def test_other_partitions_are_ignored(self, agg, source) -> None:
        result = agg.aggregate(2, 10, BY_DATE, AMOUNT, source)
        assert result.total == 9_999
        assert result.count_consumed == 1

    def test_unknown_partition_yields_zero(self, agg, source) -> None:
        result = agg.aggregate(404, 3, BY_DATE, AMOUNT, source)
        assert result.total == 0
        assert result.count_consumed == 0
        assert result.measures_present == 0

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 10])
    def test_count_consumed_never_exceeds_n(self, agg, source, n: int) -> None:
        result = agg.aggregate(1, n, BY_DATE, AMOUNT, source)
        assert result.count_consumed == min(n, 3)


# ---------------------------------------------------------------------------
# n validation
# ---------------------------------------------------------------------------


class TestN:
    def test_zero_returns_zero_without_touching_source(self, agg, source) -> None:
        recording = _RecordingSource(source)
        result = agg.aggregate(1, 0, BY_DATE, AMOUNT, recording)
        assert result.total == 0
        assert result.count_consumed == 0
        assert recording.calls == []

    def test_negative_n_raises(self, agg, source) -> None:
        with pytest.raises(InvalidArgumentError):
            agg.aggregate(1, -1, BY_DATE, AMOUNT, source)

    def test_invalid_argument_is_a_value_error(self, agg, source) -> None:
        with pytest.raises(ValueError):
            agg.aggregate(1, -5, BY_DATE, AMOUNT, source)

    @pytest.mark.parametrize("n", [True, 2.5, "3", None])
    def test_non_integer_n_raises(self, agg, source, n) -> None:
        with pytest.raises(InvalidArgumentError):
            agg.aggregate(1, n, BY_DATE, AMOUNT, source)


# ---------------------------------------------------------------------------
# Iteration behaviour
# ---------------------------------------------------------------------------


class TestIteration:
    def test_every_position_is_requested_past_end_of_data(self, agg, source) -> None:
        recording = _RecordingSource(source)
        agg.aggregate(1, 6, BY_DATE, AMOUNT, recording)
        assert recording.calls == [0, 1, 2, 3, 4, 5]

    def test_source_failure_propagates(self, agg) -> None:
        with pytest.raises(SourceUnavailableError):
            agg.aggregate(1, 5, BY_DATE, AMOUNT, _FailingSource(fail_at=2))

    def test_summation_follows_ascending_order(self, agg) -> None:
        records = [
            {"k": "a", "t": 3, "amount": 0.3},
            {"k": "a", "t": 1, "amount": 0.1},
            {"k": "a", "t": 2, "amount": 0.2},
        ]
        src = InMemoryRecordSource(records, partition_field="k")
        result = agg.aggregate("a", 3, OrderBy("t"), AMOUNT, src)
        assert result.total == (0.1 + 0.2) + 0.3

    def test_idempotent_for_unchanged_source(self, agg, source) -> None:
        first = agg.aggregate(1, 4, BY_DATE, AMOUNT, source)
        second = agg.aggregate(1, 4, BY_DATE, AMOUNT, source)
        assert first == second


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_descending_changes_selected_records(self, agg, source) -> None:
        result = agg.aggregate(1, 2, OrderBy("announced_date", descending=True), AMOUNT, source)
        assert result.total == 50
        assert result.count_consumed == 2

    def test_ties_keep_insertion_order(self, agg) -> None:
        same_day = date(2022, 3, 1)
        records = [
            {"k": 1, "announced_date": same_day, "amount": 10},
            {"k": 1, "announced_date": same_day, "amount": 20},
        ]
        src = InMemoryRecordSource(records, partition_field="k")
        assert agg.aggregate(1, 1, BY_DATE, AMOUNT, src).total == 10
        assert agg.aggregate(1, 1, OrderBy("announced_date", descending=True), AMOUNT, src).total == 10

    def test_records_without_ordering_value_sort_last(self, agg) -> None:
        records = [
            {"k": 1, "announced_date": None, "amount": 7},
            {"k": 1, "announced_date": date(2020, 1, 1), "amount": 3},
        ]
        src = InMemoryRecordSource(records, partition_field="k")
        assert agg.aggregate(1, 1, BY_DATE, AMOUNT, src).total == 3


# ---------------------------------------------------------------------------
# Operators and requests
# ---------------------------------------------------------------------------


class TestOperators:
    def test_max(self, agg, source) -> None:
        assert agg.aggregate(1, 3, BY_DATE, AMOUNT, source, operator=MAX).total == 100

    def test_min_counts_absent_as_zero(self, agg, source) -> None:
        assert agg.aggregate(1, 3, BY_DATE, AMOUNT, source, operator=MIN).total == 0

    def test_min_of_single_record(self, agg, source) -> None:
        assert agg.aggregate(1, 1, BY_DATE, AMOUNT, source, operator=MIN).total == 100

    def test_execute_uses_request_operator(self, agg, source) -> None:
        request = AggregationRequest(partition_key=1, n=3, operator=MAX)
        assert agg.execute(request, BY_DATE, AMOUNT, source).total == 100

    def test_request_defaults_to_sum(self) -> None:
        assert AggregationRequest(partition_key=1, n=1).operator is SUM


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_field_measure_reads_objects(self) -> None:
        assert field_measure("amount")(SimpleNamespace(amount=5)) == 5

    def test_field_measure_missing_is_absent(self) -> None:
        assert field_measure("amount")({}) is None
        assert field_measure("amount")(SimpleNamespace()) is None

    def test_in_memory_source_snapshots_records(self, agg) -> None:
        records = [{"k": 1, "announced_date": date(2020, 1, 1), "amount": 1}]
        src = InMemoryRecordSource(records, partition_field="k")
        records.append({"k": 1, "announced_date": date(2019, 1, 1), "amount": 99})
        assert agg.aggregate(1, 5, BY_DATE, AMOUNT, src).total == 1
        assert len(src) == 1

    def test_result_is_frozen(self) -> None:
        result = AggregationResult(total=1, count_consumed=1)
        with pytest.raises((AttributeError, TypeError)):
            result.total = 2  # type: ignore[misc]
