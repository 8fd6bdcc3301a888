"""Global enums shared by the domain and API schemas."""

from enum import Enum


class ParticipantRole(str, Enum):
    """Informational only; not enforced against the instructions a participant submits."""
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"
    PROSUMER = "PROSUMER"
