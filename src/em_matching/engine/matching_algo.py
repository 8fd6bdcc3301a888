"""Clearing pass for the energy book.

Demands are tried largest-first, lots cheapest-first. A demand clears only
against a single lot that covers it entirely at or below its price limit;
it is never split across lots within one pass.
"""
import logging
from datetime import datetime

from src.em_account.domain.balance import credit, debit
from src.em_book.domain.book import prune_exhausted
from src.em_common.checked import checked_mul, checked_sub
from src.em_common.errors import InternalError, InvalidAccountDataError
from src.em_ledger.domain.invariants import verify_book_clean, verify_ledger_invariants
from src.em_ledger.domain.models import DemandRequest, Ledger, ProductionLot, Trade
from src.em_matching.domain.models import MatchResult

logger = logging.getLogger(__name__)


def sort_book(ledger: Ledger) -> None:
    """Stable in-place sort: demands by remaining amount desc, lots by price asc."""
    ledger.demands = sorted(ledger.demands, key=lambda d: d.energy_amount, reverse=True)
    ledger.lots = sorted(ledger.lots, key=lambda lot: lot.price)


def pair_clears(demand: DemandRequest, lot: ProductionLot) -> bool:
    return demand.energy_amount <= lot.energy_amount and demand.price_limit >= lot.price


def match_offers(ledger: Ledger, cleared_at: datetime) -> MatchResult:
    """Run one clearing pass and return the new ledger plus the trades it recorded.

    Raises ArithmeticOverflowError or InvalidAccountDataError for the whole pass;
    the ledger passed in is never modified.
    """
    working = ledger.clone()
    sort_book(working)

    trades: list[Trade] = []
    skipped = 0
    for demand in working.demands:
        for lot in working.lots:
            if demand.energy_amount == 0:
                break
            if not pair_clears(demand, lot):
                continue
            trade = _settle_pair(working, demand, lot, cleared_at)
            if trade is None:
                skipped += 1
                continue
            trades.append(trade)

    prune_exhausted(working)
    working.trades.extend(trades)

    violations = verify_ledger_invariants(working) + verify_book_clean(working)
    if violations:
        raise InternalError("; ".join(violations))

    logger.info(
        "Clearing pass: trades=%d skipped=%d lots_left=%d demands_left=%d",
        len(trades), skipped, len(working.lots), len(working.demands),
    )
    return MatchResult(ledger=working, trades=trades, skipped_pairs=skipped)


def _settle_pair(
    working: Ledger, demand: DemandRequest, lot: ProductionLot, cleared_at: datetime
) -> Trade | None:
    """Move funds and energy for one clearing pair. None = consumer cannot pay."""
    trade_amount = min(demand.energy_amount, lot.energy_amount)
    trade_price = lot.price
    total_cost = checked_mul(trade_amount, trade_price)

    consumer = working.participants.get(demand.consumer_id)
    producer = working.participants.get(lot.producer_id)
    if consumer is None or producer is None:
        raise InvalidAccountDataError(
            f"settlement references unregistered participant "
            f"(consumer={demand.consumer_id}, producer={lot.producer_id})"
        )

    if consumer.wallet_balance < total_cost:
        logger.debug(
            "Pair skipped, insufficient funds: consumer=%s balance=%d cost=%d",
            consumer.id, consumer.wallet_balance, total_cost,
        )
        return None

    debit(consumer, total_cost)
    credit(producer, total_cost)
    consumer.energy_balance += trade_amount
    producer.energy_balance -= trade_amount
    demand.energy_amount = checked_sub(demand.energy_amount, trade_amount)
    lot.energy_amount = checked_sub(lot.energy_amount, trade_amount)

    return Trade(
        consumer_id=consumer.id,
        producer_id=producer.id,
        amount=trade_amount,
        price=trade_price,
        timestamp=cleared_at,
    )
