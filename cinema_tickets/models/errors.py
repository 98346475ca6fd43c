"""Error codes and exceptions raised while processing a purchase"""
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Purchase error codes"""
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    UNACCOMPANIED_MINORS = "UNACCOMPANIED_MINORS"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"


@dataclass(eq=False)
class InvalidPurchaseError(Exception):
    """Base business rule failure with code and user-safe message"""
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account id is not a valid account"""

    def __init__(self, account_id) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account id",
        )
        self.account_id = account_id


class InvalidTicketCountError(InvalidPurchaseError):
    """Raised for a negative ticket count or too many tickets in one purchase"""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message=message,
        )


class UnaccompaniedMinorsError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult ticket"""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNACCOMPANIED_MINORS,
            message="Child and infant tickets require at least one adult ticket",
        )


class InvalidTicketTypeError(TypeError):
    """
    Raised for a ticket category that is not recognised

    This is a data error rather than a business rule, so it is not an
    InvalidPurchaseError.
    """
    code = ErrorCode.INVALID_TICKET_TYPE

    def __init__(self, value) -> None:
        super().__init__(f"{self.code.value}: Unknown ticket type {value!r}")
        self.value = value
