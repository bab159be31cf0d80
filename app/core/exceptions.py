# exceptions.py
from decimal import Decimal

class BusinessLogicException(Exception):
    """Base class for business-related exceptions."""
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.detail)

class NegativeAmountException(BusinessLogicException):
    def __init__(self, amount: Decimal):
        self.amount = amount
        super().__init__(
            status_code=400,
            detail=f"Negative amount {amount} not accepted"
        )

class InvalidAmountException(BusinessLogicException):
    def __init__(self, amount: Decimal):
        self.amount = amount
        super().__init__(
            status_code=400,
            detail=f"Amount {amount} has more than two decimal places"
        )


class DatabaseException(Exception):
    """Base class for database-related exceptions."""
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.detail)


class Error500Server(Exception):
    """Generic internal server error handed to the 500 exception handler.

    Raised by controllers for any failure, whatever its cause. The cause is
    kept as ``__cause__`` and never rendered to the client.
    """
    def __init__(self, detail: str = "Internal Server Error"):
        self.status_code = 500
        self.detail = detail
        super().__init__(self.detail)
