"""Unit tests for predicate nodes and their SQL translation."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from sqlalchemy import select

from operations.filters.builder import PredicateBuilder
from operations.filters.predicates import (
    And,
    AnyOf,
    Equals,
    In,
    Predicate,
    Range,
    conjunction,
)
from operations.models import TransactionRequest, Transfer

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _where(model, predicate) -> str:
    query = select(model).where(predicate.to_clause(model))
    compiled = str(query.compile(compile_kwargs={"literal_binds": True}))
    return compiled.split("WHERE", 1)[1]


def _conjuncts(where: str) -> set[str]:
    return {part.strip(" ()") for part in where.split(" AND ")}


def _range(start_from, start_to):
    return PredicateBuilder(DATE_FORMAT).started_between(start_from, start_to).build()


class TestLeafTranslation:
    def test_equals(self):
        where = _where(Transfer, Equals("currency", "USD"))
        assert "transfers.currency = 'USD'" in where

    def test_equals_decimal(self):
        where = _where(Transfer, Equals("amount", Decimal("10.50")))
        assert "transfers.amount = 10.50" in where

    def test_any_of_is_or(self):
        where = _where(Transfer, AnyOf(("payer_party_id", "payee_party_id"), "123"))
        assert "transfers.payer_party_id = '123' OR transfers.payee_party_id = '123'" in where

    def test_in(self):
        where = _where(TransactionRequest, In("external_id", ("a", "b")))
        assert "transaction_requests.external_id IN ('a', 'b')" in where

    def test_closed_range_is_between(self):
        predicate = Range(
            "started_at",
            lower=datetime(2023, 1, 1, tzinfo=UTC),
            upper=datetime(2023, 1, 2, tzinfo=UTC),
        )
        assert "transfers.started_at BETWEEN" in _where(Transfer, predicate)

    def test_lower_bound_only(self):
        predicate = Range("started_at", lower=datetime(2023, 1, 1, tzinfo=UTC))
        where = _where(Transfer, predicate)
        assert "transfers.started_at >=" in where
        assert "<=" not in where

    def test_upper_bound_only(self):
        predicate = Range("started_at", upper=datetime(2023, 1, 1, tzinfo=UTC))
        where = _where(Transfer, predicate)
        assert "transfers.started_at <=" in where
        assert ">=" not in where

    def test_range_without_bounds_rejected(self):
        with pytest.raises(ValueError):
            Range("started_at")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="no field"):
            Equals("nope", 1).to_clause(Transfer)

    def test_node_without_translation_cannot_be_built(self):
        class Untranslated(Predicate):
            pass

        with pytest.raises(TypeError):
            Untranslated()


class TestComposition:
    def test_and_joins_children(self):
        predicate = And((Equals("currency", "USD"), Equals("direction", "OUTGOING")))
        where = _where(Transfer, predicate)
        assert "transfers.currency = 'USD' AND transfers.direction = 'OUTGOING'" in where

    def test_ampersand_flattens(self):
        a, b, c = Equals("currency", "USD"), Equals("status", "FAILED"), In("id", (1,))
        combined = (a & b) & c
        assert combined == And((a, b, c))
        assert (c & (a & b)) == And((c, a, b))

    def test_conjunction_of_nothing_is_none(self):
        assert conjunction([]) is None

    def test_conjunction_of_one_is_that_predicate(self):
        only = Equals("currency", "USD")
        assert conjunction([only]) is only

    def test_order_does_not_change_matched_columns(self):
        a, b = Equals("currency", "USD"), AnyOf(("payer_party_id", "payee_party_id"), "1")
        first = _where(Transfer, And((a, b)))
        second = _where(Transfer, And((b, a)))
        assert _conjuncts(first) == _conjuncts(second)


class TestPredicateBuilder:
    def test_empty_builder_matches_all(self):
        assert PredicateBuilder(DATE_FORMAT).build() is None

    def test_absent_values_are_skipped(self):
        predicate = (
            PredicateBuilder(DATE_FORMAT)
            .equals("currency", None)
            .any_of(("payer_party_id", "payee_party_id"), None)
            .equals("direction", "OUTGOING")
            .build()
        )
        assert predicate == Equals("direction", "OUTGOING")

    def test_inclusive_range_from_both_bounds(self):
        predicate = _range("2023-01-01", "2023-01-02")
        assert predicate == Range(
            "started_at",
            lower=datetime(2023, 1, 1, tzinfo=UTC),
            upper=datetime(2023, 1, 2, tzinfo=UTC),
        )

    def test_open_ended_ranges(self):
        later = _range("2023-01-01 08:00:00", None)
        earlier = _range(None, "2023-01-01 08:00:00")
        assert later == Range("started_at", lower=datetime(2023, 1, 1, 8, tzinfo=UTC))
        assert earlier == Range("started_at", upper=datetime(2023, 1, 1, 8, tzinfo=UTC))

    def test_unparseable_bound_drops_whole_range(self):
        predicate = _range("not-a-date", "2023-01-02")
        assert predicate is None

    def test_unparseable_single_bound_dropped(self):
        assert _range(None, "junk") is None

    def test_add_flattens_nested_conjunction(self):
        nested = And((Equals("currency", "USD"), Equals("direction", "OUTGOING")))
        predicate = PredicateBuilder(DATE_FORMAT).equals("status", "FAILED").add(nested).build()
        assert predicate == And(
            (
                Equals("status", "FAILED"),
                Equals("currency", "USD"),
                Equals("direction", "OUTGOING"),
            )
        )
