"""Pydantic snapshot schemas for the ledger aggregate.

LedgerSnapshot keeps the logical shape of the aggregate: four ordered
collections (participants, lots, demands, trades).
"""

from datetime import datetime

from pydantic import BaseModel

from src.em_common.enums import ParticipantRole
from src.em_ledger.domain.models import (
    DemandRequest,
    Ledger,
    Participant,
    ProductionLot,
    Trade,
)

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    role: ParticipantRole


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ParticipantResponse(BaseModel):
    id: str
    role: ParticipantRole
    wallet_balance: int
    energy_balance: int

    @classmethod
    def from_domain(cls, p: Participant) -> "ParticipantResponse":
        return cls(
            id=p.id, role=p.role, wallet_balance=p.wallet_balance, energy_balance=p.energy_balance
        )


class LotResponse(BaseModel):
    producer_id: str
    energy_amount: int
    price: int

    @classmethod
    def from_domain(cls, lot: ProductionLot) -> "LotResponse":
        return cls(producer_id=lot.producer_id, energy_amount=lot.energy_amount, price=lot.price)


class DemandResponse(BaseModel):
    consumer_id: str
    energy_amount: int
    price_limit: int

    @classmethod
    def from_domain(cls, d: DemandRequest) -> "DemandResponse":
        return cls(consumer_id=d.consumer_id, energy_amount=d.energy_amount, price_limit=d.price_limit)


class TradeResponse(BaseModel):
    consumer_id: str
    producer_id: str
    amount: int
    price: int
    total_cost: int
    timestamp: datetime

    @classmethod
    def from_domain(cls, t: Trade) -> "TradeResponse":
        return cls(
            consumer_id=t.consumer_id,
            producer_id=t.producer_id,
            amount=t.amount,
            price=t.price,
            total_cost=t.total_cost,
            timestamp=t.timestamp,
        )


class LedgerSnapshot(BaseModel):
    participants: list[ParticipantResponse]
    lots: list[LotResponse]
    demands: list[DemandResponse]
    trades: list[TradeResponse]

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> "LedgerSnapshot":
        return cls(
            participants=[ParticipantResponse.from_domain(p) for p in ledger.participants.values()],
            lots=[LotResponse.from_domain(lot) for lot in ledger.lots],
            demands=[DemandResponse.from_domain(d) for d in ledger.demands],
            trades=[TradeResponse.from_domain(t) for t in ledger.trades],
        )
