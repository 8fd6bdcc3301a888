from dataclasses import dataclass, field

from src.em_ledger.domain.models import Ledger, Trade


@dataclass
class MatchResult:
    """Outcome of one clearing pass, passed from matching back to the caller."""

    ledger: Ledger
    trades: list[Trade] = field(default_factory=list)  # appended by this pass only
    skipped_pairs: int = 0  # clearable pairs skipped for insufficient consumer funds
