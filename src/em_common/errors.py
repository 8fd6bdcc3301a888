"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Participant
  2xxx: Balance / arithmetic
  3xxx: Book
  4xxx: Matching
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Participant ---

class UnknownParticipantError(AppError):
    def __init__(self, identity: str) -> None:
        super().__init__(1001, f"Participant not registered: {identity}", 404)


class DuplicateParticipantError(AppError):
    def __init__(self, identity: str) -> None:
        super().__init__(1002, f"Participant already registered: {identity}", 409)


# --- 2xxx: Balance / arithmetic ---

class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient funds: required {required}, available {available}",
            422,
        )


class ArithmeticOverflowError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Arithmetic overflow: {detail}", 422)


class ArithmeticUnderflowError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Arithmetic underflow: {detail}", 422)


# --- 3xxx: Book ---

class ValueOutOfRangeError(AppError):
    def __init__(self, field: str, value: object) -> None:
        super().__init__(3001, f"{field} must be an unsigned 64-bit integer, got {value!r}", 422)


# --- 4xxx: Matching ---

class InvalidAccountDataError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Invalid account data: {detail}", 500)


# --- 9xxx: System ---

class LedgerNotInitializedError(AppError):
    def __init__(self) -> None:
        super().__init__(9001, "Ledger is not initialized", 409)


class UnauthorizedError(AppError):
    def __init__(self, detail: str = "Caller identity required") -> None:
        super().__init__(9002, detail, 401)


class InvalidInstructionError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9003, f"Invalid instruction: {detail}", 400)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9099, detail, 500)
