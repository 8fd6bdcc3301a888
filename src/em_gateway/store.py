"""LedgerStore: the host's single in-process ledger.

One asyncio.Lock serialises every instruction. The stored snapshot is only
replaced after a transition returns, so a failed instruction commits nothing.
"""
import asyncio
import logging

from src.em_common.clock import Clock, utc_now
from src.em_common.errors import LedgerNotInitializedError
from src.em_gateway.dispatcher import InstructionOutcome, execute_instruction
from src.em_gateway.instructions import Instruction
from src.em_ledger.domain.models import Ledger

logger = logging.getLogger(__name__)


class LedgerStore:
    def __init__(self, clock: Clock = utc_now) -> None:
        self._ledger: Ledger | None = None
        self._lock = asyncio.Lock()
        self._clock = clock

    @property
    def is_initialized(self) -> bool:
        return self._ledger is not None

    def snapshot(self) -> Ledger:
        """Current ledger for read-only use. Raises if not yet initialized."""
        if self._ledger is None:
            raise LedgerNotInitializedError()
        return self._ledger

    async def submit(self, instruction: Instruction, caller: str) -> InstructionOutcome:
        async with self._lock:
            try:
                outcome = execute_instruction(self._ledger, instruction, caller, self._clock())
            except Exception:
                logger.warning("Instruction %s rejected for caller=%s", instruction.kind, caller)
                raise
            self._ledger = outcome.ledger
            return outcome


ledger_store = LedgerStore()


def get_ledger_store() -> LedgerStore:
    """FastAPI dependency: the process-wide store (overridden in tests)."""
    return ledger_store
