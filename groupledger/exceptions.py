from typing import Any, Optional


class BaseAPIException(Exception):
    """
    Base exception for all ledger errors.

    Provides consistent structure with status_code, error_code, and details.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}


class ValidationException(BaseAPIException):
    """Invalid input data (HTTP 422)."""

    status_code = 422
    error_code = "VALIDATION_ERROR"


class BusinessException(BaseAPIException):
    """Business rule violation (HTTP 409)."""

    status_code = 409
    error_code = "BUSINESS_RULE_VIOLATION"


class NotFoundException(BaseAPIException):
    """Resource not found (HTTP 404)."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"


# Ledger precondition violations
class InvalidGroupException(NotFoundException):
    """Group id is 0 or beyond the highest allocated id."""

    error_code = "GROUP_INVALID"

    def __init__(self, group_id: int):
        super().__init__(
            message=f"Invalid group: {group_id}",
            details={"group_id": group_id},
        )


class DuplicateMemberException(BusinessException):
    """Address is already a member of the group."""

    error_code = "MEMBER_DUPLICATE"

    def __init__(self, group_id: int, address: str):
        super().__init__(
            message=f"Address is already a member of group {group_id}",
            details={"group_id": group_id, "address": address},
        )


class NotMemberException(BusinessException):
    """Base for a party that is not a member of the group."""

    role: str = "party"

    def __init__(self, group_id: int, address: str):
        super().__init__(
            message=f"{self.role.capitalize()} is not a member of group {group_id}",
            details={"group_id": group_id, "address": address, "role": self.role},
        )


class PayerNotMemberException(NotMemberException):
    error_code = "PAYER_NOT_MEMBER"
    role = "payer"


class FromNotMemberException(NotMemberException):
    error_code = "FROM_NOT_MEMBER"
    role = "sender"


class ToNotMemberException(NotMemberException):
    error_code = "TO_NOT_MEMBER"
    role = "recipient"


class NonPositiveAmountException(ValidationException):
    """Amount must be strictly greater than zero."""

    error_code = "AMOUNT_NOT_POSITIVE"

    def __init__(self, amount: int):
        super().__init__(
            message=f"Amount must be positive, got {amount}",
            details={"amount": amount},
        )


class EmptyGroupException(BusinessException):
    """Payment cannot be split across a group with no members."""

    error_code = "GROUP_EMPTY"

    def __init__(self, group_id: int):
        super().__init__(
            message=f"Group has no members: {group_id}",
            details={"group_id": group_id},
        )


class AmountOutOfRangeException(ValidationException):
    """Amount exceeds what the ledger can store."""

    error_code = "AMOUNT_OUT_OF_RANGE"

    def __init__(self, amount: int, limit: int):
        super().__init__(
            message=f"Amount exceeds the maximum of {limit}",
            details={"amount": amount, "limit": limit},
        )


class BalanceOutOfRangeException(BusinessException):
    """Applying the operation would push a balance past the storable range."""

    error_code = "BALANCE_OUT_OF_RANGE"

    def __init__(self, group_id: int, address: str, balance: int):
        super().__init__(
            message=f"Balance out of range for a member of group {group_id}",
            details={"group_id": group_id, "address": address, "balance": balance},
        )
