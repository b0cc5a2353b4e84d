import logging

from pydantic import ValidationError as PydanticValidationError

from expense_tracker.errors import NotFoundError, ValidationError
from expense_tracker.schemas import ExpenseIn
from expense_tracker.store import ExpenseStore
from expense_tracker.utils import describe_errors, to_cents

logger = logging.getLogger("expense_service")

REQUIRED_FIELDS = ("description", "amount", "category", "date")


class ExpenseService:
    """Business rules for expense records.

    Input is validated here before anything reaches the store. Amounts are
    normalized to two decimal places on the way in.
    """

    def __init__(self, store: ExpenseStore):
        self.store = store

    @staticmethod
    def validate_input(payload) -> ExpenseIn:
        if not isinstance(payload, dict):
            raise ValidationError("Expense must be a JSON object")

        missing = [name for name in REQUIRED_FIELDS if payload.get(name) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            return ExpenseIn.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(describe_errors(exc.errors())) from exc

    @staticmethod
    def normalize_amount(value):
        return to_cents(value)

    def _prepare(self, payload) -> dict:
        fields = self.validate_input(payload).model_dump()
        fields["amount"] = self.normalize_amount(fields["amount"])
        return fields

    def list(self):
        return self.store.list()

    def get(self, expense_id: int):
        expense = self.store.get(expense_id)
        if expense is None:
            logger.debug(f"Expense {expense_id} not found")
            raise NotFoundError(f"Expense {expense_id} not found")
        return expense

    def create(self, payload):
        fields = self._prepare(payload)
        return self.store.insert(fields)

    def update(self, expense_id: int, payload):
        """Replace all four business fields and return the persisted row."""
        fields = self._prepare(payload)
        self.get(expense_id)
        self.store.replace(expense_id, fields)
        return self.get(expense_id)

    def remove(self, expense_id: int) -> bool:
        return self.store.remove(expense_id)

    def summary(self):
        return self.store.sum_by_category()
