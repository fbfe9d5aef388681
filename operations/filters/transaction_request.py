"""Filters for TransactionRequest queries."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from operations.filters.builder import PredicateBuilder
from operations.filters.parsing import decode_identifier, parse_state
from operations.filters.predicates import Predicate


class ExportSharedFilter(BaseModel):
    """Refinements ANDed into every lookup of a transaction request export."""

    state: str | None = None
    start_from: str | None = None
    start_to: str | None = None

    def to_predicate(self, date_format: str) -> Predicate | None:
        return (
            PredicateBuilder(date_format)
            .equals("state", parse_state(self.state))
            .started_between(self.start_from, self.start_to)
            .build()
        )


class TransactionRequestFilter(ExportSharedFilter):
    """Optional refinements for transaction request list queries.

    Supported query params::

        ?payerPartyId=27710203999
        ?transactionId=7f1c...
        ?state=ACCEPTED
        ?amount=10.50&currency=USD
        ?startFrom=2024-01-01 00:00:00
    """

    payer_party_id: str | None = None
    payee_party_id: str | None = None
    payee_dfsp_id: str | None = None
    payer_dfsp_id: str | None = None
    transaction_id: str | None = None
    amount: Decimal | None = None
    currency: str | None = None
    direction: str | None = None

    def to_predicate(self, date_format: str) -> Predicate | None:
        return (
            PredicateBuilder(date_format)
            .equals("payer_party_id", decode_identifier(self.payer_party_id))
            .equals("payee_party_id", decode_identifier(self.payee_party_id))
            .equals("payee_dfsp_id", self.payee_dfsp_id)
            .equals("payer_dfsp_id", self.payer_dfsp_id)
            .equals("transaction_id", self.transaction_id)
            .add(super().to_predicate(date_format))
            .equals("amount", self.amount)
            .equals("currency", self.currency)
            .equals("direction", self.direction)
            .build()
        )
