"""Ledger invariant checks.

INV-1: every wallet balance is within [0, U64_MAX]
INV-2: every trade names registered counterparties and a representable cost
INV-3: energy balances sum to zero (each trade moves energy producer -> consumer)
INV-4: no exhausted lot or demand is left in the book (only after a matching pass)
"""

import logging

from src.em_common.checked import U64_MAX
from src.em_ledger.domain.models import Ledger

logger = logging.getLogger(__name__)


def verify_ledger_invariants(ledger: Ledger) -> list[str]:
    """Check INV-1..INV-3. Returns list of violation strings."""
    violations: list[str] = []
    for p in ledger.participants.values():
        if not (0 <= p.wallet_balance <= U64_MAX):
            violations.append(
                f"INV-1 violated: participant {p.id} wallet_balance={p.wallet_balance}"
            )

    for i, t in enumerate(ledger.trades):
        missing = [pid for pid in (t.consumer_id, t.producer_id) if pid not in ledger.participants]
        if missing:
            violations.append(f"INV-2 violated: trade #{i} references unknown {missing}")
        if t.total_cost > U64_MAX:
            violations.append(f"INV-2 violated: trade #{i} cost {t.total_cost} overflows u64")

    energy_sum = sum(p.energy_balance for p in ledger.participants.values())
    if energy_sum != 0:
        violations.append(f"INV-3 violated: energy balances sum to {energy_sum} != 0")

    for msg in violations:
        logger.error(msg)
    return violations


def verify_book_clean(ledger: Ledger) -> list[str]:
    """Check INV-4. Only meaningful right after a matching pass."""
    violations: list[str] = []
    for lot in ledger.lots:
        if lot.energy_amount == 0:
            violations.append(f"INV-4 violated: exhausted lot of {lot.producer_id} in book")
    for d in ledger.demands:
        if d.energy_amount == 0:
            violations.append(f"INV-4 violated: exhausted demand of {d.consumer_id} in book")
    for msg in violations:
        logger.error(msg)
    return violations
