"""Filters for Transfer queries."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from operations.filters.builder import PredicateBuilder
from operations.filters.parsing import decode_identifier, parse_status
from operations.filters.predicates import Predicate


class TransferFilter(BaseModel):
    """Optional refinements for transfer list queries.

    Supported query params::

        ?payerPartyId=27710203999
        ?payeeDfspId=payeefsp1
        ?status=COMPLETED
        ?partyId=27710203999          (payer or payee)
        ?partyIdType=MSISDN           (payer or payee)
        ?startFrom=2024-01-01 00:00:00&startTo=2024-01-31 23:59:59
    """

    payer_party_id: str | None = None
    payer_dfsp_id: str | None = None
    payee_party_id: str | None = None
    payee_dfsp_id: str | None = None
    transaction_id: str | None = None
    status: str | None = None
    amount: Decimal | None = None
    currency: str | None = None
    direction: str | None = None
    party_id: str | None = None
    party_id_type: str | None = None
    start_from: str | None = None
    start_to: str | None = None

    def to_predicate(self, date_format: str) -> Predicate | None:
        return (
            PredicateBuilder(date_format)
            .equals("payer_party_id", decode_identifier(self.payer_party_id))
            .equals("payee_party_id", decode_identifier(self.payee_party_id))
            .equals("payee_dfsp_id", self.payee_dfsp_id)
            .equals("payer_dfsp_id", self.payer_dfsp_id)
            .equals("transaction_id", self.transaction_id)
            .equals("status", parse_status(self.status))
            .equals("amount", self.amount)
            .equals("currency", self.currency)
            .equals("direction", self.direction)
            .any_of(("payee_party_id_type", "payer_party_id_type"), self.party_id_type)
            .any_of(("payer_party_id", "payee_party_id"), decode_identifier(self.party_id))
            .started_between(self.start_from, self.start_to)
            .build()
        )
