"""Participant registry: initialize, register, find.

Every function that changes state returns a new Ledger and leaves the one it
was given untouched.
"""

import logging

from src.em_common.enums import ParticipantRole
from src.em_common.errors import DuplicateParticipantError, UnknownParticipantError
from src.em_ledger.domain.models import Ledger, Participant

logger = logging.getLogger(__name__)


def initialize() -> Ledger:
    """Fresh empty ledger. Never merges with prior state."""
    return Ledger()


def register(ledger: Ledger, identity: str, role: ParticipantRole) -> Ledger:
    """Append a participant with zero balances. Duplicate identities are rejected."""
    if identity in ledger.participants:
        raise DuplicateParticipantError(identity)
    updated = ledger.clone()
    updated.participants[identity] = Participant(id=identity, role=ParticipantRole(role))
    logger.info("Participant registered: id=%s role=%s", identity, role)
    return updated


def find(ledger: Ledger, identity: str) -> Participant | None:
    return ledger.participants.get(identity)


def require_participant(ledger: Ledger, identity: str) -> Participant:
    participant = find(ledger, identity)
    if participant is None:
        raise UnknownParticipantError(identity)
    return participant
