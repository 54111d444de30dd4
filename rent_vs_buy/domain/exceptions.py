"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """A projection input is non-numeric or outside its allowed range"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DegenerateResultError(DomainException):
    """Computation overflowed or produced a non-finite figure"""

    pass
