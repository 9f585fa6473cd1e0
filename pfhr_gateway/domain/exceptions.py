"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidIncomeError(DomainException):
    """Monthly income is zero, so income-relative ratios are undefined"""

    def __init__(self, message: str = "Monthly income must be greater than 0 to calculate PFHR score"):
        super().__init__(message)
