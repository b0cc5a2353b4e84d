from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_cents(value):
    """Quantize a numeric value to two decimal places, rounding half up."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def stringify_expense(expense):
    """
    Convert an expense row to a one-line description for log output.

    Args:
        expense: An ``Expense`` model instance.

    Returns:
        str: e.g. ``#3 Coffee (Food) 3.50 on 05/01/2024``.
    """
    return (
        f"#{expense.id} {expense.description} ({expense.category}) "
        f"{to_cents(expense.amount)} on {expense.date.strftime('%d/%m/%Y')}"
    )


def describe_errors(errors):
    """Flatten pydantic error dicts into ``loc: msg`` pairs joined by ``; ``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )
