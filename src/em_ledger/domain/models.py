"""Ledger aggregate: pure dataclasses, no framework dependency."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from src.em_common.enums import ParticipantRole


@dataclass
class Participant:
    id: str
    role: ParticipantRole
    wallet_balance: int = 0   # u64, never negative
    energy_balance: int = 0   # unbounded, +received / -delivered through trades


@dataclass
class ProductionLot:
    """Energy a producer makes available at a fixed unit price."""

    producer_id: str
    energy_amount: int  # remaining, decreases as matched
    price: int  # per unit


@dataclass
class DemandRequest:
    """Energy a consumer wants at or below price_limit."""

    consumer_id: str
    energy_amount: int  # remaining, decreases as matched
    price_limit: int


@dataclass(frozen=True)
class Trade:
    """Settlement record. Append-only, never mutated once recorded."""

    consumer_id: str  # from: paid total_cost
    producer_id: str  # to: received total_cost
    amount: int
    price: int
    timestamp: datetime

    @property
    def total_cost(self) -> int:
        return self.amount * self.price


@dataclass
class Ledger:
    """Root aggregate: four ordered collections.

    Participants are keyed by identity in insertion order. Lot and demand
    order is part of the state: matching sorts stably from it.
    """

    participants: dict[str, Participant] = field(default_factory=dict)
    lots: list[ProductionLot] = field(default_factory=list)
    demands: list[DemandRequest] = field(default_factory=list)
    trades: list[Trade] = field(default_factory=list)

    def clone(self) -> "Ledger":
        """Independent working copy; trades are frozen and shared."""
        return Ledger(
            participants={pid: replace(p) for pid, p in self.participants.items()},
            lots=[replace(lot) for lot in self.lots],
            demands=[replace(d) for d in self.demands],
            trades=list(self.trades),
        )
