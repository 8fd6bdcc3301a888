"""Pydantic field types shared by instruction and API request schemas."""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.em_common.checked import U64_MAX


def _at_most_u64_max(value: int) -> int:
    if value > U64_MAX:
        raise ValueError(f"must be <= {U64_MAX}")
    return value


# Unsigned 64-bit integer; strict so "10" or 1.0 are rejected rather than coerced
U64 = Annotated[int, Field(strict=True, ge=0), AfterValidator(_at_most_u64_max)]
