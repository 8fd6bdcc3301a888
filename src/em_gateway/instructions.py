"""Closed instruction set and its JSON decoding.

Identity is never part of an instruction: the host supplies the caller, and
register/submit/deposit/withdraw act on the caller's own participant record.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.em_common.enums import ParticipantRole
from src.em_common.errors import InvalidInstructionError
from src.em_common.schema_types import U64


class _Instruction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Initialize(_Instruction):
    kind: Literal["initialize"] = "initialize"


class RegisterParticipant(_Instruction):
    kind: Literal["register_participant"] = "register_participant"
    role: ParticipantRole


class SubmitOffer(_Instruction):
    kind: Literal["submit_offer"] = "submit_offer"
    energy_amount: U64
    price: U64


class SubmitDemand(_Instruction):
    kind: Literal["submit_demand"] = "submit_demand"
    energy_amount: U64
    price_limit: U64


class MatchOffers(_Instruction):
    kind: Literal["match_offers"] = "match_offers"


class Deposit(_Instruction):
    kind: Literal["deposit"] = "deposit"
    amount: U64


class Withdraw(_Instruction):
    kind: Literal["withdraw"] = "withdraw"
    amount: U64


Instruction = Annotated[
    Union[
        Initialize,
        RegisterParticipant,
        SubmitOffer,
        SubmitDemand,
        MatchOffers,
        Deposit,
        Withdraw,
    ],
    Field(discriminator="kind"),
]

_adapter: TypeAdapter[Instruction] = TypeAdapter(Instruction)


def decode_instruction(raw: bytes | str | dict[str, object]) -> Instruction:
    """Decode wire JSON (or an already-parsed dict) into one instruction.

    Raises InvalidInstructionError on unknown kinds, missing fields or values
    outside the u64 range.
    """
    try:
        if isinstance(raw, dict):
            return _adapter.validate_python(raw)
        return _adapter.validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in errors
        )
        raise InvalidInstructionError(detail) from None
