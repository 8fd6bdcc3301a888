"""Offer/demand book: append, filter and prune production lots and demand requests."""

import logging

from src.em_common.checked import require_u64
from src.em_ledger.domain.models import DemandRequest, Ledger, ProductionLot
from src.em_ledger.domain.registry import require_participant

logger = logging.getLogger(__name__)


def submit_production(ledger: Ledger, producer_id: str, amount: int, price: int) -> Ledger:
    """Append a lot. The producer must be registered so it can later be credited."""
    require_u64("energy_amount", amount)
    require_u64("price", price)
    require_participant(ledger, producer_id)
    updated = ledger.clone()
    updated.lots.append(ProductionLot(producer_id=producer_id, energy_amount=amount, price=price))
    logger.info("Production lot submitted: producer=%s amount=%d price=%d",
                producer_id, amount, price)
    return updated


def submit_demand(ledger: Ledger, consumer_id: str, amount: int, price_limit: int) -> Ledger:
    """Append a demand request under the same registration precondition."""
    require_u64("energy_amount", amount)
    require_u64("price_limit", price_limit)
    require_participant(ledger, consumer_id)
    updated = ledger.clone()
    updated.demands.append(
        DemandRequest(consumer_id=consumer_id, energy_amount=amount, price_limit=price_limit)
    )
    logger.info("Demand submitted: consumer=%s amount=%d price_limit=%d",
                consumer_id, amount, price_limit)
    return updated


def lots_for(ledger: Ledger, producer_id: str) -> list[ProductionLot]:
    return [lot for lot in ledger.lots if lot.producer_id == producer_id]


def demands_for(ledger: Ledger, consumer_id: str) -> list[DemandRequest]:
    return [d for d in ledger.demands if d.consumer_id == consumer_id]


def prune_exhausted(ledger: Ledger) -> None:
    """Drop zero-remaining lots and demands in place, preserving order."""
    ledger.lots = [lot for lot in ledger.lots if lot.energy_amount > 0]
    ledger.demands = [d for d in ledger.demands if d.energy_amount > 0]
