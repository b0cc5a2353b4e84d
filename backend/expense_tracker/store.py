import logging
from contextlib import contextmanager

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_tracker.errors import StoreError
from expense_tracker.models import Expense
from expense_tracker.utils import to_cents

logger = logging.getLogger("expense_store")


class ExpenseStore:
    """Durable CRUD against the ``expenses`` table.

    Every method issues a single statement; there are no transactions spanning
    several operations. Database failures are rolled back and surfaced as
    ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Failed to {action}")
            raise StoreError(f"Failed to {action}") from exc

    def list(self) -> list[Expense]:
        with self._guard("list expenses"):
            return (
                self.db.query(Expense)
                .order_by(Expense.date.desc(), Expense.id.asc())
                .all()
            )

    def get(self, expense_id: int) -> Expense | None:
        """Return the expense or ``None`` when no row has this id."""
        with self._guard(f"read expense {expense_id}"):
            return self.db.get(Expense, expense_id)

    def insert(self, fields: dict) -> Expense:
        with self._guard("insert expense"):
            expense = Expense(**fields)
            self.db.add(expense)
            self.db.commit()
            self.db.refresh(expense)
            return expense

    def replace(self, expense_id: int, fields: dict) -> int:
        """Overwrite the business fields of a row.

        Does not check that the row exists; the returned count is 0 when it
        doesn't.
        """
        with self._guard(f"replace expense {expense_id}"):
            count = (
                self.db.query(Expense)
                .filter(Expense.id == expense_id)
                .update({**fields, "updated_at": func.now()}, synchronize_session=False)
            )
            self.db.commit()
            return count

    def remove(self, expense_id: int) -> bool:
        with self._guard(f"delete expense {expense_id}"):
            count = (
                self.db.query(Expense)
                .filter(Expense.id == expense_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            return count > 0

    def sum_by_category(self):
        with self._guard("sum expenses by category"):
            rows = (
                self.db.query(Expense.category, func.sum(Expense.amount).label("total"))
                .group_by(Expense.category)
                .order_by(Expense.category)
                .all()
            )
        return [{"category": row.category, "total": to_cents(row.total)} for row in rows]
