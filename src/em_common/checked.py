"""Checked integer arithmetic for ledger balances and trade values.

Wallet balances, amounts and prices are unsigned 64-bit. Python ints never
wrap, so every result is range-checked and reported instead of silently
exceeding the field width.
"""

from src.em_common.errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    ValueOutOfRangeError,
)

U64_MAX: int = (1 << 64) - 1


def require_u64(field: str, value: int) -> int:
    """Reject anything a u64 field cannot hold (negatives, bools, > U64_MAX)."""
    if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= U64_MAX):
        raise ValueOutOfRangeError(field, value)
    return value


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > U64_MAX:
        raise ArithmeticOverflowError(f"{a} + {b} exceeds {U64_MAX}")
    return result


def checked_sub(a: int, b: int) -> int:
    result = a - b
    if result < 0:
        raise ArithmeticUnderflowError(f"{a} - {b} is below zero")
    return result


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > U64_MAX:
        raise ArithmeticOverflowError(f"{a} * {b} exceeds {U64_MAX}")
    return result
