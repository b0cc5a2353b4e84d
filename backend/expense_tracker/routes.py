import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from expense_tracker import schemas
from expense_tracker.database import get_db
from expense_tracker.errors import NotFoundError, StoreError, ValidationError
from expense_tracker.service import ExpenseService
from expense_tracker.store import ExpenseStore
from expense_tracker.utils import stringify_expense

logger = logging.getLogger("api_routes")

router = APIRouter(prefix="/api/expenses", tags=["expenses"])

STORE_FAILURE = "Something went wrong while accessing expenses"


def get_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(ExpenseStore(db))


@router.get("", response_model=list[schemas.ExpenseOut])
def list_expenses(service: ExpenseService = Depends(get_service)):
    try:
        return service.list()
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)


# Declared before /{expense_id} so "summary" is never taken for an id
@router.get("/summary/categories", response_model=list[schemas.CategoryTotal])
def category_summary(service: ExpenseService = Depends(get_service)):
    try:
        return service.summary()
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)


@router.get("/{expense_id}", response_model=schemas.ExpenseOut)
def get_expense(expense_id: int, service: ExpenseService = Depends(get_service)):
    try:
        return service.get(expense_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)


@router.post("", response_model=schemas.ExpenseOut, status_code=201)
def create_expense(payload: dict, service: ExpenseService = Depends(get_service)):
    try:
        expense = service.create(payload)
    except ValidationError as exc:
        logger.info(f"Rejected expense: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)

    logger.info(f"Created expense {stringify_expense(expense)}")
    return expense


@router.put("/{expense_id}", response_model=schemas.ExpenseOut)
def update_expense(
    expense_id: int, payload: dict, service: ExpenseService = Depends(get_service)
):
    try:
        expense = service.update(expense_id, payload)
    except ValidationError as exc:
        logger.info(f"Rejected update of expense {expense_id}: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)

    logger.info(f"Updated expense {stringify_expense(expense)}")
    return expense


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: int, service: ExpenseService = Depends(get_service)):
    try:
        deleted = service.remove(expense_id)
    except StoreError:
        raise HTTPException(status_code=500, detail=STORE_FAILURE)

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Expense {expense_id} not found")

    logger.info(f"Deleted expense #{expense_id}")
    return Response(status_code=204)
