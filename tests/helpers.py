"""Ledger builders and constants shared by the test suites."""

from datetime import datetime, timezone

from src.em_account.domain.balance import deposit
from src.em_book.domain.book import submit_demand, submit_production
from src.em_common.enums import ParticipantRole
from src.em_ledger.domain.models import Ledger
from src.em_ledger.domain.registry import initialize, register

CLEARED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_ledger(
    balances: dict[str, int] | None = None,
    lots: list[tuple[str, int, int]] | None = None,
    demands: list[tuple[str, int, int]] | None = None,
) -> Ledger:
    """Register every id in `balances` (as PROSUMER), fund it, then submit
    lots (producer, amount, price) and demands (consumer, amount, price_limit)."""
    ledger = initialize()
    for pid, amount in (balances or {}).items():
        ledger = register(ledger, pid, ParticipantRole.PROSUMER)
        if amount:
            ledger = deposit(ledger, pid, amount)
    for producer, amount, price in lots or []:
        ledger = submit_production(ledger, producer, amount, price)
    for consumer, amount, limit in demands or []:
        ledger = submit_demand(ledger, consumer, amount, limit)
    return ledger
