from datetime import date
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expense_tracker.utils import to_cents

# NUMERIC(10, 2) upper bound
MAX_AMOUNT = Decimal("100000000")
# String(255) columns
MAX_TEXT_LENGTH = 255


class ExpenseBase(BaseModel):
    description: str
    amount: Decimal
    category: str
    date: date


class ExpenseIn(ExpenseBase):
    description: str = Field(max_length=MAX_TEXT_LENGTH)
    amount: Decimal = Field(allow_inf_nan=False)
    category: str = Field(max_length=MAX_TEXT_LENGTH)

    @field_validator("description", "category")
    @classmethod
    def not_blank(cls, value: str) -> str:
        # Stored exactly as given; categories are never normalized
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("amount", mode="after")
    @classmethod
    def positive_cents(cls, value: Decimal) -> Decimal:
        # Bounds apply to the stored two-decimal value
        value = to_cents(value)
        if not 0 < value < MAX_AMOUNT:
            raise ValueError(f"must be greater than 0 and less than {MAX_AMOUNT} after rounding to cents")
        return value


class ExpenseOut(ExpenseBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
    )


class CategoryTotal(BaseModel):
    category: str
    total: Decimal
