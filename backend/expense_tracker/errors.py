class ExpenseError(Exception):
    """Base class for errors raised by the expense service and store."""


class ValidationError(ExpenseError):
    """Missing or malformed input; the client's fault."""


class NotFoundError(ExpenseError):
    """No expense row matches the requested id."""


class StoreError(ExpenseError):
    """The underlying database operation failed."""
