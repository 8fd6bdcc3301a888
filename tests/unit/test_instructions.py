import json

import pytest
from pydantic import ValidationError

from src.em_common.checked import U64_MAX
from src.em_common.enums import ParticipantRole
from src.em_common.errors import InvalidInstructionError
from src.em_gateway.instructions import (
    Deposit,
    Initialize,
    MatchOffers,
    RegisterParticipant,
    SubmitDemand,
    SubmitOffer,
    Withdraw,
    decode_instruction,
)


class TestDecode:
    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"kind": "initialize"}, Initialize()),
            ({"kind": "register_participant", "role": "PROSUMER"},
             RegisterParticipant(role=ParticipantRole.PROSUMER)),
            ({"kind": "submit_offer", "energy_amount": 100, "price": 5},
             SubmitOffer(energy_amount=100, price=5)),
            ({"kind": "submit_demand", "energy_amount": 50, "price_limit": 10},
             SubmitDemand(energy_amount=50, price_limit=10)),
            ({"kind": "match_offers"}, MatchOffers()),
            ({"kind": "deposit", "amount": 1000}, Deposit(amount=1000)),
            ({"kind": "withdraw", "amount": 0}, Withdraw(amount=0)),
        ],
    )
    def test_every_kind_decodes_from_json(self, payload: dict[str, object], expected: object) -> None:
        assert decode_instruction(json.dumps(payload)) == expected
        assert decode_instruction(payload) == expected

    def test_u64_ceiling_accepted(self) -> None:
        raw = json.dumps({"kind": "deposit", "amount": U64_MAX}).encode()
        assert decode_instruction(raw) == Deposit(amount=U64_MAX)

    @pytest.mark.parametrize(
        "payload",
        [
            {"kind": "deposit", "amount": U64_MAX + 1},
            {"kind": "deposit", "amount": -1},
            {"kind": "deposit", "amount": "10"},
            {"kind": "deposit"},
            {"kind": "submit_offer", "energy_amount": 1, "price": 1, "producer": "x"},
            {"kind": "register_participant", "role": "TRADER"},
            {"kind": "cancel_everything"},
            {},
        ],
    )
    def test_invalid_payloads_rejected(self, payload: dict[str, object]) -> None:
        with pytest.raises(InvalidInstructionError) as exc:
            decode_instruction(json.dumps(payload))
        assert exc.value.code == 9003
        assert exc.value.http_status == 400

    def test_malformed_json_rejected(self) -> None:
        with pytest.raises(InvalidInstructionError):
            decode_instruction(b"{not json")

    def test_instructions_are_immutable(self) -> None:
        instruction = Deposit(amount=5)
        with pytest.raises(ValidationError):
            instruction.amount = 6  # type: ignore[misc]
